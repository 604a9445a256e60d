"""
Core math modules для DFT

Комплексная арифметика и twiddle factors с гарантией численной стабильности.
"""

# Numerical Safeguards
from src.dft.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    ZERO_SNAP_EPS,
    # NaN/Inf validation
    is_valid_float,
    validate_finite,
    validate_positive_int,
    # Zero-snap
    snap_to_zero,
    # Epsilon comparisons
    is_close,
    is_zero,
)

# Complex value type
from src.dft.math.complex_number import Complex

# Twiddle factors
from src.dft.math.twiddle import (
    TwiddleTable,
    build_twiddle_table,
    twiddle_base,
    twiddle_factors,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "ZERO_SNAP_EPS",
    # Numerical Safeguards — NaN/Inf validation
    "is_valid_float",
    "validate_finite",
    "validate_positive_int",
    # Numerical Safeguards — Zero-snap
    "snap_to_zero",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    "is_zero",
    # Complex
    "Complex",
    # Twiddle — Types
    "TwiddleTable",
    # Twiddle — Functions
    "build_twiddle_table",
    "twiddle_base",
    "twiddle_factors",
]
