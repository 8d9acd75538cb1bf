"""
Means — произведение, "mean", среднее, корень и геометрическое среднее

ВАЖНО: mean() — это НЕ среднее арифметическое и НЕ медиана.
Возвращается элемент отсортированной последовательности с индексом
len // 2 (для чётной длины — верхний из двух средних, без усреднения).
Среднее арифметическое — average().

Float арифметика следует IEEE-754 и не бросает исключений:
root(x, 0) → x ** inf, root(-8, 3) → nan.
Пустая последовательность в mean/average → InvalidArgument.
"""

import math
from collections.abc import Sequence

from src.mathops.numerical_safeguards import (
    ieee_pow,
    ieee_reciprocal,
    validate_non_empty,
)


def product(values: Sequence[float]) -> float:
    """
    Произведение всех элементов.

    Examples:
        >>> product([2.0, 3.0, 4.0])
        24.0
        >>> product([])
        1.0
    """
    result = 1.0

    for value in values:
        result *= value

    return result


def _sort(values: Sequence[float]) -> list[float]:
    # Новый список; вход не мутируется. NaN меньше любого числа и идёт первым
    return sorted(values, key=lambda v: (not math.isnan(v), v))


def mean(values: Sequence[float]) -> float:
    """
    Элемент с индексом len // 2 отсортированной по возрастанию последовательности.

    Args:
        values: Последовательность float

    Returns:
        sorted(values)[len(values) // 2]

    Raises:
        InvalidArgument: Если values пустая

    Examples:
        >>> mean([3.0, 1.0, 2.0])
        2.0
        >>> mean([4.0, 1.0, 3.0, 2.0])  # не 2.5
        3.0
    """
    validate_non_empty(values, "values")
    return _sort(values)[len(values) // 2]


def average(values: Sequence[float]) -> float:
    """
    Среднее арифметическое: сумма слева направо, делённая на количество.

    Raises:
        InvalidArgument: Если values пустая

    Examples:
        >>> average([1.0, 2.0, 3.0])
        2.0
    """
    validate_non_empty(values, "values")

    total = 0.0
    for value in values:
        total += value

    return total / len(values)


def root(value: float, degree: float) -> float:
    """
    Корень степени degree: value ** (1 / degree).

    Семантика IEEE-754:
    - degree == ±0.0 → показатель ±inf (root(4, 0) == inf, root(1, 0) == 1.0)
    - value < 0 и нецелый показатель → nan
    - value == 0 и отрицательный показатель → inf

    Args:
        value: Подкоренное значение
        degree: Степень корня

    Returns:
        value ** (1 / degree), никогда не бросает

    Examples:
        >>> root(16.0, 2.0)
        4.0
        >>> root(4.0, 0.0)
        inf
    """
    return ieee_pow(value, ieee_reciprocal(degree))


def geometric_mean(values: Sequence[float]) -> float:
    """
    Геометрическое среднее: root(product(values), len(values)).

    Пустая последовательность: product == 1.0, root(1.0, 0) == 1.0.

    Examples:
        >>> geometric_mean([2.0, 8.0])
        4.0
        >>> geometric_mean([])
        1.0
    """
    return root(product(values), len(values))
