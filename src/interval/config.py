"""Конфигурация движков интервала."""

from dataclasses import dataclass

from src.core.math.numerical_safeguards import EPS_FLOAT_STEP, FLOAT_STEP_ERR_CAP


@dataclass(frozen=True)
class StepConfig:
    """Конфигурация Stepping Engine.

    - float_epsilon: машинный epsilon для коррекции количества float шагов
    - float_error_cap: максимальная коррекция (доля шага)
    """

    float_epsilon: float = EPS_FLOAT_STEP
    float_error_cap: float = FLOAT_STEP_ERR_CAP

    def __post_init__(self):
        if self.float_epsilon <= 0:
            raise ValueError(f"float_epsilon must be positive, got {self.float_epsilon}")
        if not 0 <= self.float_error_cap <= 1:
            raise ValueError(
                f"float_error_cap must be in [0, 1], got {self.float_error_cap}"
            )


DEFAULT_STEP_CONFIG = StepConfig()
