"""
Successor Protocol — "следующий элемент" для дискретных доменов

Опциональный контракт: successor(v) возвращает ближайший элемент строго
больше v в порядке домена. Домен без successor можно проверять на
принадлежность (cover), но нельзя итерировать.
"""

from typing import Any, Callable, Protocol

from src.core.domain.lexical import succ_string


class SuccessorProtocol(Protocol):
    """Контракт "следующего элемента"."""

    def successor(self, value: Any) -> Any:
        ...


class IntegerSuccessor:
    """Целые числа: v + 1"""

    def successor(self, value: int) -> int:
        return value + 1

    def __repr__(self) -> str:
        return "IntegerSuccessor()"


class LexicalSuccessor:
    """Строки: алфавитно-цифровой инкремент"""

    def successor(self, value: str) -> str:
        return succ_string(value)

    def __repr__(self) -> str:
        return "LexicalSuccessor()"


class MethodSuccessor:
    """Объекты с методом succ()"""

    def successor(self, value: Any) -> Any:
        return value.succ()

    def __repr__(self) -> str:
        return "MethodSuccessor()"


class FunctionSuccessor:
    """Successor, заданный произвольной функцией"""

    def __init__(self, func: Callable[[Any], Any]):
        self._func = func

    def successor(self, value: Any) -> Any:
        return self._func(value)

    def __repr__(self) -> str:
        return f"FunctionSuccessor({self._func!r})"


INTEGER_SUCCESSOR = IntegerSuccessor()
LEXICAL_SUCCESSOR = LexicalSuccessor()
METHOD_SUCCESSOR = MethodSuccessor()


def has_succ_method(value: Any) -> bool:
    """True если у значения есть вызываемый метод succ()."""
    return callable(getattr(value, "succ", None))


def resolve_successor(
    value: Any, explicit: SuccessorProtocol | None = None
) -> SuccessorProtocol | None:
    """
    Выбор successor capability для нижней границы.

    Порядок:
    1. Явно переданный successor
    2. int (но не bool) → IntegerSuccessor
    3. str → LexicalSuccessor
    4. Объект с методом succ() → MethodSuccessor
    5. Иначе None (домен не итерируемый)

    Args:
        value: Нижняя граница интервала
        explicit: Явно переданный successor (optional)

    Returns:
        Successor capability или None
    """
    if explicit is not None:
        return explicit
    if isinstance(value, int) and not isinstance(value, bool):
        return INTEGER_SUCCESSOR
    if isinstance(value, str):
        return LEXICAL_SUCCESSOR
    if has_succ_method(value):
        return METHOD_SUCCESSOR
    return None
