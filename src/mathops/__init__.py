"""
MathOps — элементарные числовые операции

Stateless библиотека чистых функций: суммы и произведения по диапазону,
mean/average, корни, геометрическое среднее, факториал, вариации и сочетания.
"""

# Numerical Safeguards
from src.mathops.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    SENTINEL_INVALID,
    SUPPORTED_INT_WIDTHS,
    InvalidArgument,
    ieee_pow,
    ieee_reciprocal,
    is_close,
    is_valid_float,
    trunc_div,
    validate_non_empty,
    wrap_int,
)

# Config
from src.mathops.config import DEFAULT_CONFIG, INT32_CONFIG, MathOpsConfig

# Ranges
from src.mathops.ranges import product_between, sum_between

# Means
from src.mathops.means import average, geometric_mean, mean, product, root

# Combinatorics
from src.mathops.combinatorics import combination, factorial, variation

__all__ = [
    # Numerical Safeguards — Constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "SENTINEL_INVALID",
    "SUPPORTED_INT_WIDTHS",
    # Numerical Safeguards — Exceptions
    "InvalidArgument",
    # Numerical Safeguards — Functions
    "ieee_pow",
    "ieee_reciprocal",
    "is_close",
    "is_valid_float",
    "trunc_div",
    "validate_non_empty",
    "wrap_int",
    # Config
    "DEFAULT_CONFIG",
    "INT32_CONFIG",
    "MathOpsConfig",
    # Ranges
    "product_between",
    "sum_between",
    # Means
    "average",
    "geometric_mean",
    "mean",
    "product",
    "root",
    # Combinatorics
    "combination",
    "factorial",
    "variation",
]
