"""
Numerical Safeguards — Float stepping без накопления ошибки

Модуль обеспечивает численную устойчивость шагания по float интервалам:
- Количество элементов вычисляется ЗАРАНЕЕ, а не повторным сложением
- Epsilon-коррекция для почти целых отношений (u - l) / step
- Элементы вычисляются от начала: l + i * step

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибка округления не накапливается по последовательности
2. Последний элемент не дублируется и не появляется лишний элемент
3. Все операции детерминированы и воспроизводимы
"""

import math
import sys
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Машинный epsilon для оценки ошибки отношения (u - l) / step
EPS_FLOAT_STEP: Final[float] = sys.float_info.epsilon

# Верхняя граница коррекции: больше половины шага коррекция никогда не сдвигает
FLOAT_STEP_ERR_CAP: Final[float] = 0.5


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# FLOAT STEPPING
# =============================================================================


def float_step_error(
    lower: float,
    upper: float,
    step: float,
    eps: float = EPS_FLOAT_STEP,
    err_cap: float = FLOAT_STEP_ERR_CAP,
) -> float:
    """
    Оценка ошибки округления отношения (upper - lower) / step.

    Алгоритм:
        err = (|l| + |u| + |u - l|) / |step| * eps, но не больше err_cap

    Args:
        lower: Нижняя граница
        upper: Верхняя граница
        step: Шаг (ненулевой)
        eps: Машинный epsilon (default: EPS_FLOAT_STEP)
        err_cap: Верхняя граница коррекции (default: 0.5)

    Returns:
        Коррекция, добавляемая к отношению перед floor
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    err = (abs(lower) + abs(upper) + abs(upper - lower)) / abs(step) * eps
    return min(err, err_cap)


def float_step_count(
    lower: float,
    upper: float,
    step: float,
    exclusive: bool,
    eps: float = EPS_FLOAT_STEP,
    err_cap: float = FLOAT_STEP_ERR_CAP,
) -> int | None:
    """
    Количество элементов последовательности lower + i * step.

    Вычисляется заранее, чтобы повторное сложение step не накапливало ошибку:
        inclusive: floor((upper - lower) / step + err) + 1
        exclusive: n = floor((upper - lower) / step - err), затем n + 1 элементов;
                   элемент n + 1 добавляется, только если он меньше upper
                   больше чем на err * step

    Args:
        lower: Нижняя граница
        upper: Верхняя граница
        step: Шаг (> 0)
        exclusive: True если upper исключена
        eps: Машинный epsilon
        err_cap: Верхняя граница коррекции

    Returns:
        Количество элементов (>= 0) или None, если последовательность
        бесконечна (upper = +inf при конечном шаге)

    Examples:
        >>> float_step_count(0.0, 1.0, 0.3, exclusive=False)
        4
        >>> float_step_count(0.0, 1.0, 0.5, exclusive=True)
        2
        >>> float_step_count(0.0, 0.9, 0.3, exclusive=True)
        3
        >>> float_step_count(1.0, 0.0, 0.5, exclusive=False)
        0
    """
    if math.isinf(step):
        # Бесконечный шаг: только lower, если он внутри интервала
        within = lower < upper if exclusive else lower <= upper
        return 1 if within else 0

    ratio = (upper - lower) / step
    if math.isnan(ratio):
        return 0
    if math.isinf(ratio):
        return None if ratio > 0 else 0

    err = float_step_error(lower, upper, step, eps, err_cap)
    if not exclusive:
        return max(math.floor(ratio + err) + 1, 0)

    if ratio <= 0:
        return 0
    # Последний индекс, заведомо меньший upper с учётом ошибки округления
    last = math.floor(ratio - err) if ratio >= 1 else 0
    # Следующий индекс только если он меньше upper больше чем на допуск
    if (last + 1) * step + lower < upper - err * abs(step):
        last += 1
    return last + 1
