"""Interval — immutable интервал над произвольным упорядоченным доменом.

Интервал — тройка (lower, upper, exclusive):
- exclusive=False: upper входит в интервал ("1..5")
- exclusive=True: upper исключена ("1...5")

Домены (тег вычисляется один раз при конструировании):
- целые машинного слова (арифметический fast path)
- float (непрерывный домен, шагание без накопления ошибки)
- строки (алфавитно-цифровой инкремент)
- дискретные объекты с successor (общий путь)
- объекты только с порядком (cover работает, итерация — нет)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Интервал неизменяем после конструирования
2. Конструирование вызывает ровно одно probe-сравнение lower/upper,
   кроме случая, когда обе границы — целые fast path
3. Равные интервалы имеют одинаковый хеш
4. Циклические границы не приводят к бесконечной рекурсии
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, Mapping, TypeVar

from src.core.contracts import validate_interval_record
from src.core.domain.errors import InvalidBounds
from src.core.domain.interval_record import IntervalRecord
from src.core.domain.kinds import DomainKind, classify_bounds, is_fast_int
from src.core.domain.ordering import NATURAL_ORDER, Ordering, OrderingProtocol
from src.core.domain.successor import SuccessorProtocol, resolve_successor
from src.interval import boundary, equality, membership
from src.interval.boundary import OffsetMode
from src.interval.config import StepConfig
from src.interval.iteration import iterate_interval
from src.interval.stepping import step_interval

logger = logging.getLogger(__name__)

V = TypeVar("V")


@dataclass(frozen=True, eq=False, repr=False)
class Interval(Generic[V]):
    """Immutable интервал (lower, upper, exclusive).

    Args:
        lower: нижняя граница
        upper: верхняя граница
        exclusive: исключить upper (default False)
        ordering: capability сравнения (default: естественный порядок Python)
        successor: capability "следующего элемента" (default: по типу lower)

    Raises:
        InvalidBounds: границы несравнимы

    Examples:
        >>> list(Interval(1, 5))
        [1, 2, 3, 4, 5]
        >>> list(Interval(1, 5, True))
        [1, 2, 3, 4]
        >>> list(Interval(1, 10).step(3))
        [1, 4, 7, 10]
        >>> str(Interval("a", "e", True))
        'a...e'
    """

    lower: V
    upper: V
    exclusive: bool = False
    ordering: OrderingProtocol = field(default=NATURAL_ORDER, kw_only=True)
    successor: SuccessorProtocol | None = field(default=None, kw_only=True)
    kind: DomainKind = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "exclusive", bool(self.exclusive))
        if self.ordering is None:
            object.__setattr__(self, "ordering", NATURAL_ORDER)

        # Целые fast path всегда сравнимы: probe пропускается
        if not (is_fast_int(self.lower) and is_fast_int(self.upper)):
            self._probe_bounds()

        successor = resolve_successor(self.lower, self.successor)
        object.__setattr__(self, "successor", successor)
        object.__setattr__(
            self, "kind", classify_bounds(self.lower, self.upper, successor is not None)
        )

    def _probe_bounds(self) -> None:
        try:
            order = self.ordering.compare(self.lower, self.upper)
        except (TypeError, ValueError) as exc:
            logger.debug("bounds probe failed for %r, %r: %s", self.lower, self.upper, exc)
            raise InvalidBounds("bad value for interval") from exc
        if order is None:
            logger.debug("bounds %r, %r have no defined order", self.lower, self.upper)
            raise InvalidBounds("bad value for interval")

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def lower_bound(self) -> V:
        return self.lower

    def upper_bound(self) -> V:
        return self.upper

    def is_exclusive(self) -> bool:
        return self.exclusive

    def is_empty(self) -> bool:
        """Пустой: lower > upper, или lower == upper при exclusive."""
        order = self.ordering.compare(self.lower, self.upper)
        if order == Ordering.GREATER:
            return True
        return order == Ordering.EQUAL and self.exclusive

    # -------------------------------------------------------------------------
    # Equality & hash
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return equality.intervals_equal(self, other)

    def is_equivalent(self, other: object) -> bool:
        """Строгое равенство: границы равны и совпадают по точному типу."""
        if not isinstance(other, Interval):
            return False
        return equality.intervals_equivalent(self, other)

    def __hash__(self) -> int:
        return equality.interval_hash(self)

    # -------------------------------------------------------------------------
    # Sequences
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[V]:
        return iterate_interval(self)

    def iterate(self) -> Iterator[V]:
        """Новый ленивый обход элементов от lower.

        Raises:
            NotIterable: домен без fast path и без successor
        """
        return iterate_interval(self)

    def step(self, n: Any = 1, config: StepConfig | None = None) -> Iterator[V]:
        """Каждый n-й элемент интервала.

        Raises:
            InvalidStep: n <= 0 или не число
            NotIterable: домен без fast path и без successor
        """
        return step_interval(self, n, config)

    # -------------------------------------------------------------------------
    # Membership
    # -------------------------------------------------------------------------

    def cover(self, value: Any) -> bool:
        """lower <= value <(=) upper; successor не используется."""
        return membership.cover(self, value)

    def member(self, value: Any) -> bool:
        return membership.member(self, value)

    def __contains__(self, value: Any) -> bool:
        return membership.member(self, value)

    def matches(self, value: Any) -> bool:
        """Case-проверка: то же, что member."""
        return membership.member(self, value)

    # -------------------------------------------------------------------------
    # Boundary queries
    # -------------------------------------------------------------------------

    def first(self, count: int | None = None) -> Any:
        return boundary.first(self, count)

    def last(self, count: int | None = None) -> Any:
        return boundary.last(self, count)

    def min(self) -> V | None:
        return boundary.minimum(self)

    def max(self) -> V | None:
        return boundary.maximum(self)

    def offsets(
        self, length: int, mode: OffsetMode = OffsetMode.STRICT
    ) -> tuple[int, int] | None:
        return boundary.offsets(self, length, mode)

    def to_slice(self, length: int, mode: OffsetMode = OffsetMode.CLAMPED) -> slice | None:
        return boundary.to_slice(self, length, mode)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return equality.render_interval(self)

    def __repr__(self) -> str:
        return equality.inspect_interval(self)

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def to_record(self) -> IntervalRecord:
        """Сохраняемая форма: lower, upper, exclusive."""
        return IntervalRecord(lower=self.lower, upper=self.upper, exclusive=self.exclusive)

    @classmethod
    def from_record(
        cls,
        record: IntervalRecord | Mapping[str, Any],
        *,
        ordering: OrderingProtocol | None = None,
        successor: SuccessorProtocol | None = None,
    ) -> "Interval":
        """Восстановление интервала из сохранённой формы.

        Mapping проверяется JSON Schema контрактом interval_record, затем
        Pydantic моделью.

        Raises:
            jsonschema.ValidationError: mapping не соответствует контракту
            InvalidBounds: границы несравнимы
        """
        if not isinstance(record, IntervalRecord):
            data = dict(record)
            validate_interval_record(data)
            record = IntervalRecord.model_validate(data)
        return cls(
            record.lower,
            record.upper,
            record.exclusive,
            ordering=ordering or NATURAL_ORDER,
            successor=successor,
        )
