"""
scoring/ — Emergence Scoring Engine

Modules:
    constants.py           - φ constants and the 61.8 ceiling
    utils.py               - Decimal utilities (clamp, ratios, weighted mean)
    indicators.py          - Activity ledger → five indicators
    emergence_detector.py  - Capped consciousness score, state, report
"""
