"""
Domain primitives and value objects.

Contains the ordering and successor contracts, domain classification,
lexical increment, error kinds and the persisted interval record.
"""

from src.core.domain.errors import (
    IntervalError,
    InvalidBounds,
    InvalidStep,
    NotIterable,
    OutOfRange,
    UndefinedPredecessor,
)
from src.core.domain.interval_record import IntervalRecord
from src.core.domain.kinds import (
    FAST_INT_MAX,
    FAST_INT_MIN,
    DomainKind,
    classify_bounds,
    is_fast_int,
)
from src.core.domain.lexical import succ_string, upto
from src.core.domain.ordering import (
    NATURAL_ORDER,
    FunctionOrdering,
    NaturalOrdering,
    Ordering,
    OrderingProtocol,
)
from src.core.domain.successor import (
    FunctionSuccessor,
    IntegerSuccessor,
    LexicalSuccessor,
    MethodSuccessor,
    SuccessorProtocol,
    resolve_successor,
)

__all__ = [
    # Errors
    "IntervalError",
    "InvalidBounds",
    "InvalidStep",
    "NotIterable",
    "OutOfRange",
    "UndefinedPredecessor",
    # Record
    "IntervalRecord",
    # Kinds
    "FAST_INT_MIN",
    "FAST_INT_MAX",
    "DomainKind",
    "classify_bounds",
    "is_fast_int",
    # Lexical
    "succ_string",
    "upto",
    # Ordering
    "NATURAL_ORDER",
    "Ordering",
    "OrderingProtocol",
    "NaturalOrdering",
    "FunctionOrdering",
    # Successor
    "SuccessorProtocol",
    "IntegerSuccessor",
    "LexicalSuccessor",
    "MethodSuccessor",
    "FunctionSuccessor",
    "resolve_successor",
]
