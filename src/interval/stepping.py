"""Stepping Engine — итерация с шагом (каждый n-й элемент).

Порядок диспетчеризации:
1. INTEGER + целый шаг машинного слова → арифметика range(lower, limit, step)
2. LEXICAL → каждый n-й токен lexical upto (n целое)
3. float среди lower/upper/step → количество элементов заранее, l + i * step
4. числовой lower → пересчёт от начала l + i * step (без накопления дрейфа)
5. successor → каждый n-й элемент общего цикла (n целое)
6. иначе → NotIterable

ВАЖНО: шаг должен быть строго положительным; step == 0 и step < 0 → InvalidStep.
"""

import itertools
import logging
import math
import operator
from typing import Any, Iterator

from src.core.domain.errors import InvalidStep, NotIterable
from src.core.domain.kinds import DomainKind, is_fast_int, is_integral, is_number
from src.core.domain.lexical import upto
from src.core.domain.ordering import OrderingProtocol, is_within_upper
from src.core.math.numerical_safeguards import float_step_count, is_valid_float
from src.interval.config import DEFAULT_STEP_CONFIG, StepConfig
from src.interval.iteration import iterate_successors

logger = logging.getLogger(__name__)


# =============================================================================
# VALIDATION
# =============================================================================


def validate_step(step: Any) -> Any:
    """Проверка шага.

    Не-числа приводятся через operator.index (объекты с __index__).

    Args:
        step: шаг

    Returns:
        Проверенный шаг

    Raises:
        InvalidStep: шаг не число, NaN, отрицательный или нулевой
    """
    if not is_number(step):
        try:
            step = operator.index(step)
        except TypeError as exc:
            raise InvalidStep(f"step must be a number, got {type(step).__name__}") from exc

    if isinstance(step, float) and math.isnan(step):
        raise InvalidStep("step can't be NaN")

    try:
        if step < 0:
            raise InvalidStep("step can't be negative")
        if not step > 0:
            raise InvalidStep("step can't be 0")
    except TypeError as exc:
        raise InvalidStep(f"step must be a real number, got {step!r}") from exc
    return step


def _stride(step: Any, kind: DomainKind) -> int:
    # Для дискретных доменов шаг считает элементы
    if not is_integral(step):
        raise InvalidStep(f"step must be an integer for {kind.value} domain, got {step!r}")
    return int(step)


def _involves_float(lower: Any, upper: Any, step: Any) -> bool:
    if not (is_number(lower) and is_number(upper)):
        return False
    return any(isinstance(value, float) for value in (lower, upper, step))


# =============================================================================
# STRATEGIES
# =============================================================================


def step_integers(lower: int, upper: int, step: int, exclusive: bool) -> Iterator[int]:
    """Integer fast path.

    range никогда не выходит за предел, поэтому переполнение машинного
    слова невозможно: последовательность останавливается, а не заворачивается.
    """
    limit = upper if exclusive else upper + 1
    return iter(range(lower, limit, step))


def step_floats(
    lower: float,
    upper: float,
    step: float,
    exclusive: bool,
    config: StepConfig = DEFAULT_STEP_CONFIG,
) -> Iterator[float]:
    """Floating stride: количество элементов вычисляется заранее.

    Элемент i вычисляется как i * step + lower, поэтому ошибка округления
    не накапливается и последний элемент не дублируется.
    """
    beg, end, unit = float(lower), float(upper), float(step)
    count = float_step_count(
        beg,
        end,
        unit,
        exclusive,
        eps=config.float_epsilon,
        err_cap=config.float_error_cap,
    )
    indices = itertools.count() if count is None else range(count)
    for index in indices:
        yield index * unit + beg


def step_numeric(
    lower: Any,
    upper: Any,
    step: Any,
    exclusive: bool,
    ordering: OrderingProtocol,
) -> Iterator[Any]:
    """Generic numeric path: каждый элемент пересчитывается от начала.

    Для Fraction, Decimal и больших целых: lower + i * step.
    """
    value = lower
    index = 0
    while is_within_upper(ordering, value, upper, exclusive):
        yield value
        index += 1
        value = lower + index * step


# =============================================================================
# DISPATCH
# =============================================================================


def step_interval(
    interval: Any, step: Any = 1, config: StepConfig | None = None
) -> Iterator[Any]:
    """Каждый step-й элемент интервала.

    Args:
        interval: Interval
        step: шаг (> 0)
        config: конфигурация (optional, используется default)

    Returns:
        Новый ленивый итератор

    Raises:
        InvalidStep: невалидный шаг
        NotIterable: домен без fast path и без successor,
            или бесконечная float нижняя граница
    """
    config = config or DEFAULT_STEP_CONFIG
    step = validate_step(step)

    kind = interval.kind
    lower, upper, exclusive = interval.lower, interval.upper, interval.exclusive

    if kind is DomainKind.INTEGER and is_fast_int(step):
        return step_integers(lower, upper, step, exclusive)
    if kind is DomainKind.LEXICAL:
        return itertools.islice(upto(lower, upper, exclusive), 0, None, _stride(step, kind))
    if _involves_float(lower, upper, step):
        if isinstance(lower, float) and not is_valid_float(lower):
            raise NotIterable(f"can't iterate from {lower}")
        logger.debug("float stepping %r by %r", interval, step)
        return step_floats(lower, upper, step, exclusive, config)
    if is_number(lower):
        logger.debug("numeric stepping %r by %r", interval, step)
        return step_numeric(lower, upper, step, exclusive, interval.ordering)
    if interval.successor is None:
        raise NotIterable(f"can't iterate from {type(lower).__name__}")

    logger.debug("successor stepping %r by %r", interval, step)
    successors = iterate_successors(
        lower, upper, exclusive, interval.ordering, interval.successor
    )
    return itertools.islice(successors, 0, None, _stride(step, kind))
