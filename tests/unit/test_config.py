"""
Тесты для MathOpsConfig

Проверяет:
1. Значения по умолчанию
2. Валидацию int_width
3. Immutability (frozen=True)
"""

import pytest
from pydantic import ValidationError

from src.mathops.config import DEFAULT_CONFIG, INT32_CONFIG, MathOpsConfig


class TestMathOpsConfig:
    """Тесты для MathOpsConfig"""

    def test_defaults(self) -> None:
        """По умолчанию: неограниченные int, исходный guard"""
        assert DEFAULT_CONFIG.int_width is None
        assert DEFAULT_CONFIG.strict_counting_guard is False

    def test_int32_preset(self) -> None:
        """INT32_CONFIG воспроизводит 32-битный int"""
        assert INT32_CONFIG.int_width == 32
        assert INT32_CONFIG.strict_counting_guard is False

    @pytest.mark.parametrize("width", [8, 16, 32, 64])
    def test_supported_widths(self, width: int) -> None:
        """Стандартные ширины принимаются"""
        assert MathOpsConfig(int_width=width).int_width == width

    @pytest.mark.parametrize("width", [0, 12, 128, -32])
    def test_unsupported_width_rejected(self, width: int) -> None:
        """Нестандартная ширина → ValidationError"""
        with pytest.raises(ValidationError, match="int_width must be one of"):
            MathOpsConfig(int_width=width)

    def test_frozen(self) -> None:
        """Конфигурация неизменяема"""
        config = MathOpsConfig()
        with pytest.raises(ValidationError):
            config.int_width = 32

    def test_equality_and_hash(self) -> None:
        """Frozen модели сравниваются по значению и хэшируются"""
        assert MathOpsConfig(int_width=32) == INT32_CONFIG
        assert hash(MathOpsConfig(int_width=32)) == hash(INT32_CONFIG)
