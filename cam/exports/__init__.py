"""Exports: flat wire records and CSV writers with fixed column schemas."""
