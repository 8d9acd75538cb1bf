"""
Numerical Safeguards — нативная семантика арифметики

Модуль собирает примитивы, которые воспроизводят "нативное" поведение
арифметики для всех операций MathOps:
- IEEE-754 возведение в степень без исключений (nan/±inf вместо ValueError)
- Обратная величина 1/x со знаковой бесконечностью для ±0.0
- Fixed-width wraparound для целых (two's complement, 8/16/32/64 бит)
- Целочисленное деление с усечением к нулю
- Валидация входных последовательностей

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Float операции никогда не бросают исключений (результат по IEEE-754)
2. Целочисленный wrap детерминирован и не зависит от платформы
3. Пустая последовательность там, где нужен элемент → InvalidArgument
4. Все операции детерминированы и воспроизводимы
"""

import math
from collections.abc import Sequence
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Sentinel для невалидного домена в factorial/variation/combination
SENTINEL_INVALID: Final[int] = -1

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Допустимые ширины целых для wraparound
SUPPORTED_INT_WIDTHS: Final[tuple[int, ...]] = (8, 16, 32, 64)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgument(ValueError):
    """
    Аргумент вне домена операции, для которого нет sentinel-значения.

    Возникает для пустых последовательностей в mean/average: у этих
    операций нет элемента, который можно было бы вернуть.
    """
    pass


# =============================================================================
# FLOAT: IEEE-754
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(3.0, 3.0000000000000004)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and abs(math.fmod(value, 2.0)) == 1.0


def ieee_reciprocal(value: float) -> float:
    """
    Обратная величина 1/x по IEEE-754.

    Python бросает ZeroDivisionError для 1/0.0; здесь результат —
    бесконечность со знаком нуля.

    Examples:
        >>> ieee_reciprocal(4.0)
        0.25
        >>> ieee_reciprocal(0.0)
        inf
        >>> ieee_reciprocal(-0.0)
        -inf
    """
    value = float(value)
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value


def ieee_pow(base: float, exponent: float) -> float:
    """
    Возведение в степень по правилам C99/IEEE-754 pow.

    math.pow бросает исключения там, где IEEE-754 определяет результат:
    - отрицательное основание и нецелая степень → nan
    - ±0.0 в отрицательной степени → ±inf
    - переполнение → ±inf

    Args:
        base: Основание
        exponent: Показатель степени

    Returns:
        base ** exponent (float, никогда не бросает)

    Examples:
        >>> ieee_pow(4.0, 0.5)
        2.0
        >>> ieee_pow(-8.0, 1.0 / 3.0)
        nan
        >>> ieee_pow(2.0, math.inf)
        inf
        >>> ieee_pow(0.5, math.inf)
        0.0
    """
    base = float(base)
    exponent = float(exponent)
    try:
        return math.pow(base, exponent)
    except ValueError:
        if base == 0.0:
            # Знак сохраняется только для нечётной целой степени
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan
    except OverflowError:
        if base < 0.0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf


# =============================================================================
# INT: FIXED-WIDTH
# =============================================================================


def wrap_int(value: int, width: int | None) -> int:
    """
    Signed two's-complement wraparound целого до заданной ширины.

    Args:
        value: Исходное целое (неограниченное)
        width: Ширина в битах (8/16/32/64) или None (без ограничения)

    Returns:
        value, приведённое к диапазону [-2**(width-1), 2**(width-1) - 1]

    Examples:
        >>> wrap_int(2**31, 32)
        -2147483648
        >>> wrap_int(6227020800, 32)
        1932053504
        >>> wrap_int(6227020800, None)
        6227020800
    """
    if width is None:
        return value

    if width not in SUPPORTED_INT_WIDTHS:
        raise InvalidArgument(
            f"width must be one of {SUPPORTED_INT_WIDTHS}, got {width}"
        )

    modulus = 1 << width
    half = 1 << (width - 1)
    return ((value + half) % modulus) - half


def trunc_div(numerator: int, denominator: int, width: int | None = None) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Python `//` округляет к минус бесконечности: -6 // 120 == -1,
    тогда как усечение даёт 0.

    При заданной ширине частное обязано помещаться в неё: единственный
    случай выхода за диапазон, MIN / -1, не заворачивается, а бросает
    OverflowError, как checked-деление fixed-width целых.

    Args:
        numerator: Делимое
        denominator: Делитель
        width: Ширина в битах (8/16/32/64) или None (без ограничения)

    Raises:
        ZeroDivisionError: Если denominator == 0
        OverflowError: Если частное не помещается в width бит

    Examples:
        >>> trunc_div(6, -1)
        -6
        >>> trunc_div(6, -120)
        0
        >>> trunc_div(-7, 2)
        -3
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient

    if wrap_int(quotient, width) != quotient:
        raise OverflowError(
            f"{numerator} / {denominator} overflows int{width}: quotient {quotient}"
        )

    return quotient


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_empty(values: Sequence[float], name: str) -> None:
    """
    Валидация, что последовательность не пустая.

    Args:
        values: Проверяемая последовательность
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidArgument: Если последовательность пустая
    """
    if len(values) == 0:
        raise InvalidArgument(f"{name} must not be empty")
