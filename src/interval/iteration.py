"""Iteration Engine — ленивая последовательность элементов интервала.

Диспетчеризация по тегу домена (в порядке приоритета):
1. INTEGER  — последовательные целые, без вызовов successor
2. LEXICAL  — lexical upto с алфавитно-цифровым инкрементом
3. successor — общий цикл: сравнение с upper → выдача → successor(v)
4. иначе    — NotIterable

Каждый вызов начинает новый независимый обход от lower. Successor вызывается
только когда потребитель запрашивает следующий элемент: досрочная остановка
не порождает лишних вызовов.
"""

import logging
from typing import Any, Iterator

from src.core.domain.errors import NotIterable
from src.core.domain.kinds import DomainKind
from src.core.domain.lexical import upto
from src.core.domain.ordering import Ordering, OrderingProtocol
from src.core.domain.successor import SuccessorProtocol

logger = logging.getLogger(__name__)


def iterate_integers(lower: int, upper: int, exclusive: bool) -> Iterator[int]:
    """Integer fast path: lower, lower + 1, ... до включительного предела."""
    limit = upper if exclusive else upper + 1
    return iter(range(lower, limit))


def iterate_successors(
    lower: Any,
    upper: Any,
    exclusive: bool,
    ordering: OrderingProtocol,
    successor: SuccessorProtocol,
) -> Iterator[Any]:
    """Generic successor path.

    На каждом шаге v сравнивается с upper:
    - LESS → выдать v, затем v = successor(v)
    - EQUAL при inclusive → выдать v один раз и остановиться
    - иначе → остановиться
    """
    value = lower
    while True:
        order = ordering.compare(value, upper)
        if order == Ordering.LESS:
            yield value
            value = successor.successor(value)
            continue
        if order == Ordering.EQUAL and not exclusive:
            yield value
        return


def iterate_interval(interval: Any) -> Iterator[Any]:
    """Последовательность элементов интервала по возрастанию.

    Args:
        interval: Interval

    Returns:
        Новый ленивый итератор

    Raises:
        NotIterable: домен без fast path и без successor
    """
    kind = interval.kind
    lower, upper, exclusive = interval.lower, interval.upper, interval.exclusive

    if kind is DomainKind.INTEGER:
        return iterate_integers(lower, upper, exclusive)
    if kind is DomainKind.LEXICAL:
        return upto(lower, upper, exclusive)
    if interval.successor is None:
        raise NotIterable(f"can't iterate from {type(lower).__name__}")

    logger.debug("iterating %r via successor %r", interval, interval.successor)
    return iterate_successors(lower, upper, exclusive, interval.ordering, interval.successor)
