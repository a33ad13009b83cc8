"""
Core math modules для plane2d

Численные толерантности и алгебраические возможности скалярных типов.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_ANGLE_TURNS,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
)

# Algebra
from src.core.math.algebra import (
    AdditiveGroup,
    HasBasis,
    InnerSpace,
    additive_zero,
    decompose,
    inner,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_ANGLE_TURNS",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    # Algebra — Capability protocols
    "AdditiveGroup",
    "HasBasis",
    "InnerSpace",
    # Algebra — Operations
    "additive_zero",
    "decompose",
    "inner",
]
