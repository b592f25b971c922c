"""Financial model: assumptions, cash-flow projection and discounting.

- assumptions.py: assumption record, model constants, validation
- projections.py: revenue and cash-flow series
- discount.py / irr.py / payback.py: NPV, IRR, payback
- engine.py: evaluate_financials
- sensitivity.py: tornado analysis
"""
