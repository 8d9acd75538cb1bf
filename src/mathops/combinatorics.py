"""
Combinatorics — факториал, вариации (размещения) и сочетания

Ошибки домена сигнализируются sentinel-значением -1 (SENTINEL_INVALID),
а не исключением.

ИЗВЕСТНЫЙ ДЕФЕКТ (сохранён намеренно): guard в variation/combination —
`n < 1 and k < n`. Это AND, поэтому при n >= 1 и k > n guard не срабатывает:
factorial(n - k) получает отрицательный аргумент и возвращает -1, а деление
на -1 даёт результат с обратным знаком:

    variation(3, 5) == factorial(3) / factorial(-2) == 6 / -1 == -6

Исправленный guard включается через MathOpsConfig(strict_counting_guard=True).

Деление целочисленное с усечением к нулю: combination(3, 5) ==
6 / (-1 * 120) == 0.
"""

import logging

from src.mathops.config import DEFAULT_CONFIG, MathOpsConfig
from src.mathops.numerical_safeguards import SENTINEL_INVALID, trunc_div, wrap_int
from src.mathops.ranges import product_between

logger = logging.getLogger(__name__)


def factorial(n: int, *, config: MathOpsConfig = DEFAULT_CONFIG) -> int:
    """
    Факториал n.

    Args:
        n: Неотрицательное целое
        config: Конфигурация целочисленной семантики

    Returns:
        -1 если n < 0, 1 если n == 0, иначе product_between(1, n)

    Examples:
        >>> factorial(5)
        120
        >>> factorial(0)
        1
        >>> factorial(-1)
        -1
    """
    if n < 0:
        logger.debug("factorial(%d): negative argument, returning sentinel", n)
        return SENTINEL_INVALID

    if n == 0:
        return 1

    return product_between(1, n, config=config)


def _guard_rejects(number_of_items: int, selected_items: int, config: MathOpsConfig) -> bool:
    if config.strict_counting_guard:
        return (
            number_of_items < 0
            or selected_items < 0
            or selected_items > number_of_items
        )
    return number_of_items < 1 and selected_items < number_of_items


def variation(
    number_of_items: int,
    selected_items: int,
    *,
    config: MathOpsConfig = DEFAULT_CONFIG,
) -> int:
    """
    Количество упорядоченных выборок k из n: n! / (n - k)!.

    Args:
        number_of_items: n
        selected_items: k
        config: Конфигурация целочисленной семантики

    Returns:
        -1 если guard отклоняет аргументы, иначе n! / (n - k)!

    Raises:
        OverflowError: Если при int_width частное не помещается в ширину
            (MIN / -1, например variation(32, 33) в int32)

    Examples:
        >>> variation(5, 2)
        20
        >>> variation(3, 5)  # дефект guard: 6 / -1
        -6
    """
    if _guard_rejects(number_of_items, selected_items, config):
        logger.debug(
            "variation(%d, %d): rejected by guard, returning sentinel",
            number_of_items,
            selected_items,
        )
        return SENTINEL_INVALID

    numerator = factorial(number_of_items, config=config)
    denominator = factorial(number_of_items - selected_items, config=config)

    return trunc_div(numerator, denominator, width=config.int_width)


def combination(
    number_of_items: int,
    selected_items: int,
    *,
    config: MathOpsConfig = DEFAULT_CONFIG,
) -> int:
    """
    Количество неупорядоченных выборок k из n: n! / ((n - k)! * k!).

    Raises:
        ZeroDivisionError: Если при int_width произведение факториалов
            в знаменателе обнулилось от wraparound

    Examples:
        >>> combination(5, 2)
        10
        >>> combination(3, 5)  # дефект guard: 6 / (-1 * 120)
        0
    """
    if _guard_rejects(number_of_items, selected_items, config):
        logger.debug(
            "combination(%d, %d): rejected by guard, returning sentinel",
            number_of_items,
            selected_items,
        )
        return SENTINEL_INVALID

    numerator = factorial(number_of_items, config=config)
    denominator = wrap_int(
        factorial(number_of_items - selected_items, config=config)
        * factorial(selected_items, config=config),
        config.int_width,
    )

    return trunc_div(numerator, denominator, width=config.int_width)
