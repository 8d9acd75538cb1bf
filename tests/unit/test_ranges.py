"""
Тесты для модуля Ranges

Проверяет:
1. Сумму по включительному диапазону
2. Произведение по включительному диапазону
3. Пустой диапазон (lower > upper) → нейтральный элемент
4. Fixed-width wraparound
"""

import logging

import pytest

from src.mathops.config import INT32_CONFIG, MathOpsConfig
from src.mathops.ranges import product_between, sum_between


class TestSumBetween:
    """Тесты для sum_between"""

    def test_positive_range(self) -> None:
        """1 + 2 + 3 + 4 + 5 == 15"""
        assert sum_between(1, 5) == 15

    def test_symmetric_range_cancels(self) -> None:
        """Симметричный диапазон вокруг нуля даёт 0"""
        assert sum_between(-2, 2) == 0

    def test_single_element(self) -> None:
        """Диапазон из одного элемента"""
        assert sum_between(7, 7) == 7

    def test_empty_range_is_zero(self) -> None:
        """lower > upper → 0, не ошибка"""
        assert sum_between(5, 1) == 0
        assert sum_between(0, -1) == 0

    def test_unbounded_by_default(self) -> None:
        """По умолчанию Python int без переполнения"""
        assert sum_between(1, 100_000) == 5_000_050_000

    def test_int32_wraparound(self) -> None:
        """При int_width=32 сумма переполняется как 32-битный int"""
        assert sum_between(1, 100_000, config=INT32_CONFIG) == 5_000_050_000 - 2**32


class TestProductBetween:
    """Тесты для product_between"""

    def test_factorial_range(self) -> None:
        """1 * 2 * 3 * 4 * 5 == 120"""
        assert product_between(1, 5) == 120

    def test_empty_range_is_one(self) -> None:
        """lower > upper → 1"""
        assert product_between(5, 1) == 1

    def test_range_through_zero(self) -> None:
        """Диапазон, содержащий 0, даёт 0"""
        assert product_between(-3, 3) == 0

    def test_negative_range(self) -> None:
        """Знак определяется количеством отрицательных множителей"""
        assert product_between(-3, -1) == -6
        assert product_between(-4, -1) == 24

    def test_int32_wraparound(self) -> None:
        """13! не помещается в int32"""
        assert product_between(1, 13) == 6_227_020_800
        assert product_between(1, 13, config=INT32_CONFIG) == 1_932_053_504

    def test_int8_wraparound(self) -> None:
        """5! == 120 помещается в int8, 6! == 720 → 720 - 768 == -48"""
        config = MathOpsConfig(int_width=8)
        assert product_between(1, 5, config=config) == 120
        assert product_between(1, 6, config=config) == -48

    def test_wraparound_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Переполнение при int_width фиксируется в DEBUG логе"""
        with caplog.at_level(logging.DEBUG, logger="src.mathops.ranges"):
            product_between(1, 13, config=INT32_CONFIG)
        assert "product_between wrapped at i=13" in caplog.text

    def test_no_log_without_wraparound(self, caplog: pytest.LogCaptureFixture) -> None:
        """Без переполнения записей нет"""
        with caplog.at_level(logging.DEBUG, logger="src.mathops.ranges"):
            product_between(1, 12, config=INT32_CONFIG)
        assert "wrapped" not in caplog.text
