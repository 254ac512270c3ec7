"""
DomainKind — Тег стратегии домена границ

Тег вычисляется ОДИН раз при конструировании интервала и хранится рядом
с тройкой (lower, upper, exclusive). Все операции диспетчеризуются по тегу,
а не по разбросанным проверкам типов.

Приоритет (первое совпадение):
1. INTEGER    — обе границы int в диапазоне машинного слова
2. LEXICAL    — обе границы str
3. FLOAT      — обе границы числа, хотя бы одна float
4. NUMERIC    — обе границы numbers.Number (big int, Fraction, Decimal, ...)
5. DISCRETE   — для нижней границы доступен successor
6. CONTINUOUS — только порядок
"""

import numbers
from enum import Enum
from typing import Any, Final


# =============================================================================
# CONSTANTS
# =============================================================================

# Диапазон целых fast path: знаковое 64-битное машинное слово
FAST_INT_MIN: Final[int] = -(2**63)
FAST_INT_MAX: Final[int] = 2**63 - 1


# =============================================================================
# ENUMS
# =============================================================================


class DomainKind(str, Enum):
    """Стратегия домена границ"""

    INTEGER = "integer"
    LEXICAL = "lexical"
    FLOAT = "float"
    NUMERIC = "numeric"
    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


# =============================================================================
# PREDICATES
# =============================================================================


def is_fast_int(value: Any) -> bool:
    """
    Проверка, что значение — целое fast path.

    bool и подклассы int не считаются: fast path только для точного int
    в диапазоне [FAST_INT_MIN, FAST_INT_MAX].
    """
    return type(value) is int and FAST_INT_MIN <= value <= FAST_INT_MAX


def is_number(value: Any) -> bool:
    """Число (numbers.Number), исключая bool."""
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def is_integral(value: Any) -> bool:
    """Целое число (numbers.Integral), исключая bool."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


# =============================================================================
# CLASSIFICATION
# =============================================================================


def classify_bounds(lower: Any, upper: Any, has_successor: bool) -> DomainKind:
    """
    Определение стратегии домена по границам.

    Args:
        lower: Нижняя граница
        upper: Верхняя граница
        has_successor: Доступен ли successor для lower

    Returns:
        DomainKind

    Examples:
        >>> classify_bounds(1, 5, True)
        <DomainKind.INTEGER: 'integer'>
        >>> classify_bounds(0.5, 2, False)
        <DomainKind.FLOAT: 'float'>
        >>> classify_bounds("a", "z", True)
        <DomainKind.LEXICAL: 'lexical'>
    """
    if is_fast_int(lower) and is_fast_int(upper):
        return DomainKind.INTEGER
    if isinstance(lower, str) and isinstance(upper, str):
        return DomainKind.LEXICAL
    if is_number(lower) and is_number(upper):
        if isinstance(lower, float) or isinstance(upper, float):
            return DomainKind.FLOAT
        return DomainKind.NUMERIC
    if has_successor:
        return DomainKind.DISCRETE
    return DomainKind.CONTINUOUS
