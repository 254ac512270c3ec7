"""
Interval errors — Иерархия ошибок интервалов

Все ошибки локальные и синхронные: они отражают нарушение контракта вызывающей
стороной (или типом границ) и никогда не ретраятся.

Каждая ошибка наследует и IntervalError, и ближайшее встроенное исключение Python,
чтобы вызывающий код мог ловить её привычным способом (ValueError, TypeError, ...).
"""


class IntervalError(Exception):
    """Базовая ошибка модуля интервалов."""


class InvalidBounds(IntervalError, ValueError):
    """
    Границы не сравнимы между собой.

    Возникает при конструировании, если probe-сравнение lower/upper
    упало или вернуло "нет порядка".
    """


class InvalidStep(IntervalError, ValueError):
    """Шаг <= 0 или не является числом."""


class NotIterable(IntervalError, TypeError):
    """Домен не имеет ни fast path, ни Successor Protocol."""


class UndefinedPredecessor(IntervalError, TypeError):
    """max() для exclusive интервала над нецелочисленным доменом."""


class OutOfRange(IntervalError, IndexError):
    """Конверсия границ в смещения вышла за внешний предел длины."""
