"""Membership/Coverage Engine.

cover(v) — чистая проверка порядка, successor НЕ вызывается (работает и для
непрерывных доменов, например float):
    lower <= v < upper   (exclusive)
    lower <= v <= upper  (inclusive)

member(v) — принадлежность множеству элементов:
- числовые границы → cover
- односимвольные ASCII границы → прямое сравнение символов
- прочие строковые интервалы → cover
- прочие домены → перебор элементов (протокол коллекции)
"""

from typing import Any

from src.core.domain.kinds import is_number
from src.core.domain.lexical import is_single_ascii_char
from src.core.domain.ordering import is_less_or_equal, is_within_upper
from src.interval.iteration import iterate_interval


def cover(interval: Any, value: Any) -> bool:
    """Проверка lower <= value <(=) upper через Ordering Protocol.

    Несравнимые значения дают False.
    """
    ordering = interval.ordering
    if not is_less_or_equal(ordering, interval.lower, value):
        return False
    return is_within_upper(ordering, value, interval.upper, interval.exclusive)


def _member_single_char(interval: Any, value: Any) -> bool | None:
    # None означает "fast path неприменим"
    if value is None:
        return False
    if not isinstance(value, str):
        return False
    if len(value) != 1:
        return False
    if not value.isascii():
        return None

    lower, upper = interval.lower, interval.upper
    if lower <= value < upper:
        return True
    return not interval.exclusive and value == upper


def member(interval: Any, value: Any) -> bool:
    """Принадлежность value интервалу.

    Args:
        interval: Interval
        value: проверяемое значение

    Returns:
        True если value — элемент интервала

    Raises:
        NotIterable: для недискретных нечисловых доменов без fast path
    """
    lower, upper = interval.lower, interval.upper

    if is_number(lower) or is_number(upper):
        return cover(interval, value)

    if isinstance(lower, str) and isinstance(upper, str):
        if is_single_ascii_char(lower) and is_single_ascii_char(upper):
            result = _member_single_char(interval, value)
            if result is not None:
                return result
        return cover(interval, value)

    # Протокол коллекции: перебор до первого совпадения
    for element in iterate_interval(interval):
        if element == value:
            return True
    return False
