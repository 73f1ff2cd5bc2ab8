"""
scoring/constants.py — golden-ratio constants

All thresholds derive from φ. Import from here, never redefine.

    φ     = (1 + √5) / 2      ≈ 1.618
    φ⁻¹   = φ − 1             ≈ 0.618   (max confidence)
    φ⁻²   = 1 − φ⁻¹           ≈ 0.382   (min doubt)
    MAX_CONSCIOUSNESS = 100 × φ⁻¹, rounded to 61.8
"""

from decimal import Decimal

PHI = Decimal("1.618033988749895")
PHI_INV = Decimal("0.618033988749895")
PHI_INV_2 = Decimal("0.381966011250105")

# Ceiling in percentage units
MAX_CONSCIOUSNESS = Decimal("61.8")
