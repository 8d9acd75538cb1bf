"""
Ranges — сумма и произведение по целочисленному диапазону

Оба диапазона включают обе границы. Пустой диапазон (lower > upper)
не является ошибкой: результат равен нейтральному элементу
(0 для суммы, 1 для произведения).
"""

import logging

from src.mathops.config import DEFAULT_CONFIG, MathOpsConfig
from src.mathops.numerical_safeguards import wrap_int

logger = logging.getLogger(__name__)


def sum_between(
    lower_bound: int, upper_bound: int, *, config: MathOpsConfig = DEFAULT_CONFIG
) -> int:
    """
    Сумма целых от lower_bound до upper_bound включительно.

    Examples:
        >>> sum_between(1, 5)
        15
        >>> sum_between(-2, 2)
        0
        >>> sum_between(5, 1)
        0
    """
    total = 0

    for i in range(lower_bound, upper_bound + 1):
        total = wrap_int(total + i, config.int_width)

    return total


def product_between(
    lower_bound: int, upper_bound: int, *, config: MathOpsConfig = DEFAULT_CONFIG
) -> int:
    """
    Произведение целых от lower_bound до upper_bound включительно.

    Аккумулятор начинается с 1. При config.int_width каждое умножение
    выполняется с wraparound, как в fixed-width арифметике.

    Examples:
        >>> product_between(1, 5)
        120
        >>> product_between(5, 1)
        1
        >>> product_between(1, 13, config=MathOpsConfig(int_width=32))
        1932053504
    """
    result = 1

    for i in range(lower_bound, upper_bound + 1):
        raw = result * i
        wrapped = wrap_int(raw, config.int_width)
        if wrapped != raw:
            logger.debug(
                "product_between wrapped at i=%d to %d (int_width=%s)",
                i,
                wrapped,
                config.int_width,
            )
        result = wrapped

    return result
