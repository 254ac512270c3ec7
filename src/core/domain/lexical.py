"""
Lexical — Алфавитно-цифровой инкремент и lexical upto

Стратегия итерации для коротких строковых токенов:
- succ_string: следующий токен через инкремент последнего alnum символа с переносом
- upto: ленивая последовательность токенов от start до stop

ПРАВИЛА ИНКРЕМЕНТА:
1. Инкрементируется самый правый ASCII alnum символ
2. Переполнение класса ('z'→'a', 'Z'→'A', '9'→'0') переносится влево,
   не-alnum символы между alnum пропускаются
3. Перенос за левый alnum вставляет ведущий символ класса: '1', 'a' или 'A'
4. Строка без alnum инкрементирует последний code point (с переносом)
"""

import string
import sys
from typing import Final, Iterator


# =============================================================================
# CONSTANTS
# =============================================================================

# Классы символов: (первый символ, последний символ, символ для вставки при переносе)
_DIGITS: Final[tuple[str, str, str]] = ("0", "9", "1")
_LOWER: Final[tuple[str, str, str]] = ("a", "z", "a")
_UPPER: Final[tuple[str, str, str]] = ("A", "Z", "A")

_MAX_CODE_POINT: Final[int] = sys.maxunicode


def _char_class(char: str) -> tuple[str, str, str] | None:
    if char in string.digits:
        return _DIGITS
    if char in string.ascii_lowercase:
        return _LOWER
    if char in string.ascii_uppercase:
        return _UPPER
    return None


def is_single_ascii_char(value: object) -> bool:
    """True если value — строка ровно из одного ASCII символа."""
    return isinstance(value, str) and len(value) == 1 and value.isascii()


# =============================================================================
# SUCCESSOR
# =============================================================================


def succ_string(token: str) -> str:
    """
    Следующий токен в алфавитно-цифровом порядке.

    Args:
        token: Исходная строка

    Returns:
        Инкрементированная строка (пустая строка остаётся пустой)

    Examples:
        >>> succ_string("a")
        'b'
        >>> succ_string("az")
        'ba'
        >>> succ_string("zz")
        'aaa'
        >>> succ_string("a9")
        'b0'
        >>> succ_string("Zz")
        'AAa'
        >>> succ_string("1.9.9")
        '2.0.0'
    """
    if not token:
        return token

    chars = list(token)
    alnum_positions = [i for i, c in enumerate(chars) if _char_class(c) is not None]

    if not alnum_positions:
        return _succ_code_points(chars)

    # Перенос идёт справа налево только по alnum позициям
    for position in reversed(alnum_positions):
        first, last, _ = _char_class(chars[position])
        if chars[position] != last:
            chars[position] = chr(ord(chars[position]) + 1)
            return "".join(chars)
        chars[position] = first

    # Перенос за самый левый alnum символ
    leftmost = alnum_positions[0]
    _, _, carry = _char_class(token[leftmost])
    chars.insert(leftmost, carry)
    return "".join(chars)


def _succ_code_points(chars: list[str]) -> str:
    # Нет alnum символов: инкремент последнего code point с переносом
    for position in range(len(chars) - 1, -1, -1):
        code = ord(chars[position])
        if code < _MAX_CODE_POINT:
            chars[position] = chr(code + 1)
            return "".join(chars)
        chars[position] = chr(0)
    chars.insert(0, chr(1))
    return "".join(chars)


# =============================================================================
# UPTO
# =============================================================================


def upto(start: str, stop: str, exclusive: bool = False) -> Iterator[str]:
    """
    Ленивая последовательность токенов от start до stop.

    Одиночные ASCII символы перебираются по code point. Остальные строки
    перебираются через succ_string с остановкой по правилу "сначала длина,
    затем лексикографическое сравнение":
    - токен длиннее stop никогда не выдаётся
    - при равной длине применяется inclusive/exclusive сравнение со stop

    Args:
        start: Нижняя граница
        stop: Верхняя граница
        exclusive: True если stop исключается

    Yields:
        Токены в порядке возрастания

    Examples:
        >>> list(upto("a", "e"))
        ['a', 'b', 'c', 'd', 'e']
        >>> list(upto("a", "e", exclusive=True))
        ['a', 'b', 'c', 'd']
        >>> list(upto("a8", "b1"))
        ['a8', 'a9', 'b0', 'b1']
        >>> list(upto("9", "11"))
        ['9', '10', '11']
    """
    if is_single_ascii_char(start) and is_single_ascii_char(stop):
        first, last = ord(start), ord(stop)
        if exclusive:
            last -= 1
        for code in range(first, last + 1):
            yield chr(code)
        return

    if len(start) > len(stop):
        return

    # Пустой start тоже выдаётся один раз
    current = start
    while True:
        if len(current) == len(stop):
            if current > stop:
                return
            if current == stop:
                if not exclusive:
                    yield current
                return
        yield current
        current = succ_string(current)
        if not current or len(current) > len(stop):
            return
