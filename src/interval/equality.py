"""Equality/Hash Engine — структурное сравнение и хеширование интервалов.

Два интервала равны, если совпадают флаги exclusive и попарно равны границы.
Все три операции (равенство, эквивалентность, хеш) и рендеринг защищены от
циклических границ через RecursionGuard:
- повторное сравнение той же пары → True
- повторный хеш того же интервала → границы не учитываются (нейтральный вклад)
- повторный рендеринг → маркер "(... .. ...)"
"""

import logging
from typing import Any, Callable

from src.core.math.hashing import hash_combine, hash_finish, hash_start
from src.interval.recursion_guard import RecursionGuard

logger = logging.getLogger(__name__)

_EQUAL_GUARD = RecursionGuard("interval_equal")
_EQUIVALENT_GUARD = RecursionGuard("interval_equivalent")
_HASH_GUARD = RecursionGuard("interval_hash")
_REPR_GUARD = RecursionGuard("interval_repr")


def separator_for(exclusive: bool) -> str:
    """Разделитель границ: '..' для inclusive, '...' для exclusive."""
    return "..." if exclusive else ".."


# =============================================================================
# EQUALITY
# =============================================================================


def intervals_equal(a: Any, b: Any) -> bool:
    """Равенство по == границ (isEqual).

    Args:
        a: интервал
        b: интервал

    Returns:
        True если флаги и границы попарно равны
    """
    if a is b:
        return True

    def compare() -> bool:
        if a.exclusive != b.exclusive:
            return False
        if not a.lower == b.lower:
            return False
        return bool(a.upper == b.upper)

    return _EQUAL_GUARD.run((id(a), id(b)), compare, lambda: True)


def _strictly_equal(x: Any, y: Any) -> bool:
    # Вложенные интервалы сравниваются той же строгой эквивалентностью
    if type(x) is not type(y):
        return False
    equivalent = getattr(x, "is_equivalent", None)
    if callable(equivalent):
        return bool(equivalent(y))
    return bool(x == y)


def intervals_equivalent(a: Any, b: Any) -> bool:
    """Строгая эквивалентность (isEquivalent).

    Как intervals_equal, но границы должны совпадать ещё и по точному типу:
    Interval(1, 2) равен, но не эквивалентен Interval(1.0, 2.0).
    """
    if a is b:
        return True

    def compare() -> bool:
        if a.exclusive != b.exclusive:
            return False
        if not _strictly_equal(a.lower, b.lower):
            return False
        return _strictly_equal(a.upper, b.upper)

    return _EQUIVALENT_GUARD.run((id(a), id(b)), compare, lambda: True)


# =============================================================================
# HASH
# =============================================================================


def interval_hash(interval: Any) -> int:
    """Хеш интервала.

    Порядок: seed из exclusive → hash(lower) → hash(upper) → exclusive << 24.
    Равные интервалы дают одинаковый хеш.
    """
    seed = int(interval.exclusive)

    def full() -> int:
        state = hash_start(seed)
        state = hash_combine(state, hash(interval.lower))
        state = hash_combine(state, hash(interval.upper))
        state = hash_combine(state, seed << 24)
        return hash_finish(state)

    def neutral() -> int:
        logger.debug("recursive hash of interval %#x, bounds skipped", id(interval))
        return hash_finish(hash_combine(hash_start(seed), seed << 24))

    return _HASH_GUARD.run(id(interval), full, neutral)


# =============================================================================
# RENDERING
# =============================================================================


def render_interval(interval: Any, formatter: Callable[[Any], str] = str) -> str:
    """Текстовая форма "<lower><sep><upper>".

    Args:
        interval: интервал
        formatter: рендеринг границ (str для to_s, repr для inspect)
    """
    separator = separator_for(interval.exclusive)
    return f"{formatter(interval.lower)}{separator}{formatter(interval.upper)}"


def inspect_interval(interval: Any) -> str:
    """repr-форма с маркером рекурсии."""
    return _REPR_GUARD.run(
        id(interval),
        lambda: render_interval(interval, repr),
        lambda: f"(... {separator_for(interval.exclusive)} ...)",
    )
