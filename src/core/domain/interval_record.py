"""
IntervalRecord — Сохраняемая форма интервала

Immutable Pydantic модель из трёх именованных полей: нижняя граница,
верхняя граница, флаг исключения. Этого достаточно, чтобы восстановить
равный интервал; никакое другое (производное) состояние не сохраняется.

JSON форма соответствует схеме contracts/schema/interval_record.json.
"""

from typing import Any

from pydantic import BaseModel, Field


class IntervalRecord(BaseModel):
    """
    Сохраняемая форма интервала.

    Immutable модель (frozen=True). Границы хранятся как есть; JSON
    сериализация возможна для JSON-совместимых границ (числа, строки).
    """

    lower: Any = Field(..., description="Нижняя граница")
    upper: Any = Field(..., description="Верхняя граница")
    exclusive: bool = Field(False, description="Исключена ли верхняя граница")

    model_config = {"frozen": True, "extra": "forbid"}
