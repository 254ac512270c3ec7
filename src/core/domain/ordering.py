"""
Ordering Protocol — Трёхзначное сравнение границ интервала

Любой тип границ должен быть сравним через capability-объект с методом
compare(a, b), который возвращает Ordering.LESS / EQUAL / GREATER или None,
если порядок между значениями не определён (incomparable).

Движок НЕ проверяет транзитивность и антисимметричность — это контракт
вызывающей стороны.
"""

from enum import Enum
from typing import Any, Callable, Protocol


# =============================================================================
# ENUMS
# =============================================================================


class Ordering(int, Enum):
    """Результат трёхзначного сравнения"""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def from_int(cls, value: int) -> "Ordering":
        """
        Нормализация целочисленного результата сравнения.

        Любое отрицательное число → LESS, ноль → EQUAL, положительное → GREATER.

        Examples:
            >>> Ordering.from_int(-7)
            <Ordering.LESS: -1>
            >>> Ordering.from_int(0)
            <Ordering.EQUAL: 0>
        """
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL


# =============================================================================
# PROTOCOL
# =============================================================================


class OrderingProtocol(Protocol):
    """Контракт трёхзначного сравнения."""

    def compare(self, a: Any, b: Any) -> Ordering | None:
        """
        Сравнение a и b.

        Returns:
            Ordering или None, если значения несравнимы
        """
        ...


# =============================================================================
# IMPLEMENTATIONS
# =============================================================================


class NaturalOrdering:
    """
    Естественный порядок Python (rich comparisons).

    TypeError от операндов трактуется как "несравнимы" и превращается в None.
    Частичные порядки (множества, NaN) тоже дают None, если ни <, ни >, ни ==
    не выполняются.
    """

    def compare(self, a: Any, b: Any) -> Ordering | None:
        try:
            if a < b:
                return Ordering.LESS
            if a > b:
                return Ordering.GREATER
            if a == b:
                return Ordering.EQUAL
        except TypeError:
            return None
        return None

    def __repr__(self) -> str:
        return "NaturalOrdering()"


class FunctionOrdering:
    """
    Порядок, заданный функцией cmp(a, b) -> int | None.

    Аналог классического трёхзначного компаратора: отрицательное число,
    ноль или положительное число; None означает "несравнимы".
    """

    def __init__(self, cmp: Callable[[Any, Any], int | None]):
        self._cmp = cmp

    def compare(self, a: Any, b: Any) -> Ordering | None:
        result = self._cmp(a, b)
        if result is None:
            return None
        return Ordering.from_int(result)

    def __repr__(self) -> str:
        return f"FunctionOrdering({self._cmp!r})"


# Порядок по умолчанию для всех интервалов
NATURAL_ORDER = NaturalOrdering()


# =============================================================================
# HELPERS
# =============================================================================


def is_less(ordering: OrderingProtocol, a: Any, b: Any) -> bool:
    """a < b в терминах ordering; несравнимые значения дают False."""
    return ordering.compare(a, b) == Ordering.LESS


def is_less_or_equal(ordering: OrderingProtocol, a: Any, b: Any) -> bool:
    """a <= b в терминах ordering; несравнимые значения дают False."""
    return ordering.compare(a, b) in (Ordering.LESS, Ordering.EQUAL)


def is_within_upper(
    ordering: OrderingProtocol, value: Any, upper: Any, exclusive: bool
) -> bool:
    """
    Проверка value относительно верхней границы.

    Args:
        ordering: Capability сравнения
        value: Проверяемое значение
        upper: Верхняя граница
        exclusive: True если upper исключена

    Returns:
        value < upper (exclusive) или value <= upper (inclusive)
    """
    if exclusive:
        return is_less(ordering, value, upper)
    return is_less_or_equal(ordering, value, upper)
