"""Boundary Queries — first/last/min/max и конверсия границ в смещения.

- first()/last() без аргумента возвращают lower/upper без сравнений
- first(k)/last(k) материализуют k элементов итерации
- min()/max() учитывают exclusive и пустоту интервала
- offsets(length) переводит целочисленный интервал в (start, count)
  для последовательности заданной длины (отрицательные индексы от конца)
"""

import collections
import itertools
import operator
from enum import Enum
from typing import Any

from src.core.domain.errors import InvalidBounds, OutOfRange, UndefinedPredecessor
from src.core.domain.kinds import is_integral
from src.core.domain.ordering import Ordering
from src.interval.equality import separator_for
from src.interval.iteration import iterate_interval


class OffsetMode(str, Enum):
    """Обработка границ за пределами длины.

    - LENIENT: вернуть None, конец обрезается до length
    - STRICT: OutOfRange, конец не обрезается
    - CLAMPED: OutOfRange, конец обрезается до length
    """

    LENIENT = "lenient"
    STRICT = "strict"
    CLAMPED = "clamped"


def _check_count(count: int) -> int:
    count = operator.index(count)
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return count


def _compare_bounds(interval: Any) -> Ordering:
    order = interval.ordering.compare(interval.lower, interval.upper)
    if order is None:
        raise InvalidBounds(
            f"bounds {interval.lower!r} and {interval.upper!r} are no longer comparable"
        )
    return Ordering.from_int(int(order))


# =============================================================================
# FIRST / LAST
# =============================================================================


def first(interval: Any, count: int | None = None) -> Any:
    """Первый элемент (lower) или список первых count элементов.

    Successor не вызывается после count-го элемента.
    """
    if count is None:
        return interval.lower
    count = _check_count(count)
    return list(itertools.islice(iterate_interval(interval), count))


def last(interval: Any, count: int | None = None) -> Any:
    """Последний элемент (upper) или список последних count элементов."""
    if count is None:
        return interval.upper
    count = _check_count(count)
    return list(collections.deque(iterate_interval(interval), maxlen=count))


# =============================================================================
# MIN / MAX
# =============================================================================


def minimum(interval: Any) -> Any:
    """lower или None, если интервал пуст."""
    order = _compare_bounds(interval)
    if order is Ordering.GREATER or (order is Ordering.EQUAL and interval.exclusive):
        return None
    return interval.lower


def maximum(interval: Any) -> Any:
    """Наибольший элемент интервала.

    Inclusive: upper или None, если lower > upper.
    Exclusive: только для целочисленного домена, upper - 1 или None,
    если lower >= upper.

    Raises:
        UndefinedPredecessor: exclusive интервал с нецелыми границами
    """
    lower, upper = interval.lower, interval.upper

    if not interval.exclusive:
        if _compare_bounds(interval) is Ordering.GREATER:
            return None
        return upper

    if not is_integral(upper):
        raise UndefinedPredecessor("cannot exclude non-integer end value")
    if _compare_bounds(interval) is not Ordering.LESS:
        return None
    if not is_integral(lower):
        raise UndefinedPredecessor("cannot exclude end value with non-integer begin value")
    return upper - 1


# =============================================================================
# OFFSETS
# =============================================================================


def offsets(
    interval: Any, length: int, mode: OffsetMode = OffsetMode.STRICT
) -> tuple[int, int] | None:
    """Конверсия целочисленного интервала в (start, count) для длины length.

    Отрицательные границы отсчитываются от конца (length + bound).

    Args:
        interval: Interval с целыми границами
        length: длина последовательности
        mode: обработка выхода за пределы

    Returns:
        (start, count) или None (только в режиме LENIENT)

    Raises:
        OutOfRange: граница за пределами length (STRICT/CLAMPED)
        TypeError: границы не целые

    Examples:
        offsets(Interval(1, 3), 10) → (1, 3)
        offsets(Interval(-3, -1), 10) → (7, 3)
        offsets(Interval(2, 5, True), 10) → (2, 3)
    """
    start = operator.index(interval.lower)
    end = operator.index(interval.upper)
    length = operator.index(length)
    clamp_end = mode in (OffsetMode.LENIENT, OffsetMode.CLAMPED)

    def out_of_range() -> None:
        if mode is OffsetMode.LENIENT:
            return None
        raise OutOfRange(
            f"{interval.lower}{separator_for(interval.exclusive)}{interval.upper} out of range"
        )

    if start < 0:
        start += length
        if start < 0:
            return out_of_range()
    if end < 0:
        end += length
    if not interval.exclusive:
        end += 1
    if clamp_end:
        if start > length:
            return out_of_range()
        end = min(end, length)

    return start, max(end - start, 0)


def to_slice(interval: Any, length: int, mode: OffsetMode = OffsetMode.CLAMPED) -> slice | None:
    """slice для последовательности длины length (или None в режиме LENIENT)."""
    resolved = offsets(interval, length, mode)
    if resolved is None:
        return None
    start, count = resolved
    return slice(start, start + count)
