"""
MathOpsConfig — конфигурация целочисленной семантики

Immutable Pydantic модель. Передаётся в операции явно (keyword `config`),
никаких environment variables и глобального состояния: одна и та же
конфигурация и одни и те же аргументы всегда дают один результат.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.mathops.numerical_safeguards import SUPPORTED_INT_WIDTHS


class MathOpsConfig(BaseModel):
    """
    Параметры целочисленных операций.

    - int_width: None → неограниченный Python int;
      8/16/32/64 → two's-complement wraparound этой ширины
      (32 воспроизводит поведение исходного `int`)
    - strict_counting_guard: False → guard `n < 1 and k < n` (как в
      исходной библиотеке, с известным дефектом);
      True → исправленный guard `n < 0 or k < 0 or k > n`
    """

    int_width: Optional[int] = Field(
        None, description="Ширина целого для wraparound (None = без ограничения)"
    )
    strict_counting_guard: bool = Field(
        False, description="Исправленный guard для variation/combination"
    )

    model_config = {"frozen": True}

    @field_validator("int_width")
    @classmethod
    def validate_int_width(cls, v: Optional[int]) -> Optional[int]:
        """Проверка, что ширина поддерживается"""
        if v is not None and v not in SUPPORTED_INT_WIDTHS:
            raise ValueError(f"int_width must be one of {SUPPORTED_INT_WIDTHS}, got {v}")
        return v


# Конфигурация по умолчанию: неограниченные int, исходный guard
DEFAULT_CONFIG = MathOpsConfig()

# Побитовое совпадение с 32-битным `int` исходной библиотеки
INT32_CONFIG = MathOpsConfig(int_width=32)
