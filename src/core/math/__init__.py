"""
Core math modules

Численные примитивы: float stepping без накопления ошибки и перемешивание хешей.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_STEP,
    FLOAT_STEP_ERR_CAP,
    float_step_count,
    float_step_error,
    is_valid_float,
)

# Hashing
from src.core.math.hashing import (
    HASH_BITS,
    HASH_MASK,
    hash_combine,
    hash_finish,
    hash_start,
)

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPS_FLOAT_STEP",
    "FLOAT_STEP_ERR_CAP",
    # Numerical Safeguards: Functions
    "float_step_count",
    "float_step_error",
    "is_valid_float",
    # Hashing: Constants
    "HASH_BITS",
    "HASH_MASK",
    # Hashing: Functions
    "hash_start",
    "hash_combine",
    "hash_finish",
]
