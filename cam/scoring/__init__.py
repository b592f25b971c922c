"""Capital gate, strategic scoring and recommendation.

- gate.py: IRR / CM% thresholds by category
- dimensions.py: the five weighted dimensions and their rubrics
- score.py: partial and final weighted scores
- recommendation.py: bands and recommendation mapping
"""
