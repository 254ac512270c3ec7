"""Interval — immutable интервалы над упорядоченными доменами.

- Interval: тройка (lower, upper, exclusive) с итерацией, шаганием и запросами
- StepConfig: конфигурация Stepping Engine
- OffsetMode: обработка выхода за пределы при конверсии в смещения
"""

from .boundary import OffsetMode
from .config import DEFAULT_STEP_CONFIG, StepConfig
from .interval import Interval

__all__ = [
    "Interval",
    "StepConfig",
    "DEFAULT_STEP_CONFIG",
    "OffsetMode",
]
