"""
Тесты для Iteration Engine

Проверяет:
1. Integer fast path (inclusive/exclusive, пустые интервалы, большие значения)
2. Lexical upto
3. Generic successor path: ленивость и отсутствие лишних вызовов successor
4. NotIterable для непрерывных доменов
"""

import itertools
import logging

import pytest

from src.core.domain.errors import NotIterable
from src.core.domain.successor import FunctionSuccessor
from src.interval import Interval


class Version:
    """Дискретное значение с succ() и счётчиком вызовов"""

    calls = 0

    def __init__(self, number: int):
        self.number = number

    def succ(self) -> "Version":
        Version.calls += 1
        return Version(self.number + 1)

    def __eq__(self, other):
        return isinstance(other, Version) and self.number == other.number

    def __lt__(self, other):
        return self.number < other.number

    def __gt__(self, other):
        return self.number > other.number

    def __hash__(self):
        return hash(self.number)

    def __repr__(self):
        return f"Version({self.number})"


@pytest.fixture(autouse=True)
def reset_calls():
    Version.calls = 0


# =============================================================================
# INTEGER FAST PATH
# =============================================================================


class TestIntegerIteration:
    """Тесты для integer fast path"""

    def test_inclusive(self) -> None:
        assert list(Interval(1, 5)) == [1, 2, 3, 4, 5]

    def test_exclusive(self) -> None:
        assert list(Interval(1, 5, True)) == [1, 2, 3, 4]

    def test_single_element(self) -> None:
        assert list(Interval(3, 3)) == [3]
        assert list(Interval(3, 3, True)) == []

    def test_reversed_is_empty(self) -> None:
        assert list(Interval(5, 1)) == []

    def test_negative(self) -> None:
        assert list(Interval(-2, 1)) == [-2, -1, 0, 1]

    def test_machine_word_edge(self) -> None:
        """Последовательность у края машинного слова не заворачивается"""
        top = 2**63 - 1
        assert list(Interval(top - 2, top)) == [top - 2, top - 1, top]

    def test_big_integers_via_successor(self) -> None:
        assert list(Interval(2**64, 2**64 + 2)) == [2**64, 2**64 + 1, 2**64 + 2]

    def test_mixed_int_float(self) -> None:
        """Interval(1, 2.5): целые от 1, пока <= 2.5"""
        assert list(Interval(1, 2.5)) == [1, 2]

    def test_each_call_restarts(self) -> None:
        interval = Interval(1, 3)
        assert list(interval.iterate()) == [1, 2, 3]
        assert list(interval.iterate()) == [1, 2, 3]


# =============================================================================
# LEXICAL
# =============================================================================


class TestLexicalIteration:
    """Тесты для строковых интервалов"""

    def test_single_chars(self) -> None:
        assert list(Interval("a", "e")) == ["a", "b", "c", "d", "e"]
        assert list(Interval("a", "e", True)) == ["a", "b", "c", "d"]

    def test_multi_char(self) -> None:
        assert list(Interval("aa", "ad")) == ["aa", "ab", "ac", "ad"]

    def test_alnum_carry(self) -> None:
        assert list(Interval("a8", "b1")) == ["a8", "a9", "b0", "b1"]

    def test_reversed_is_empty(self) -> None:
        assert list(Interval("e", "a")) == []

    def test_digit_strings(self) -> None:
        """Длина сравнивается раньше лексикографического порядка"""
        assert list(Interval("9", "10")) == ["9", "10"]
        assert list(Interval("8", "12", True)) == ["8", "9", "10", "11"]

    def test_empty_lower(self) -> None:
        assert list(Interval("", "c")) == [""]


# =============================================================================
# SUCCESSOR PATH
# =============================================================================


class TestSuccessorIteration:
    """Тесты для generic successor path"""

    def test_succ_method(self) -> None:
        assert list(Interval(Version(1), Version(4))) == [
            Version(1),
            Version(2),
            Version(3),
            Version(4),
        ]

    def test_exclusive(self) -> None:
        assert list(Interval(Version(1), Version(4), True)) == [
            Version(1),
            Version(2),
            Version(3),
        ]

    def test_exact_successor_calls(self) -> None:
        """Полный обход 1..4 вызывает successor ровно 3 раза"""
        list(Interval(Version(1), Version(4)))
        assert Version.calls == 3

    def test_early_stop_no_extra_calls(self) -> None:
        """Досрочная остановка не порождает лишних вызовов successor"""
        iterator = iter(Interval(Version(1), Version(100)))
        assert list(itertools.islice(iterator, 2)) == [Version(1), Version(2)]
        assert Version.calls == 1

    def test_lazy_until_consumed(self) -> None:
        Interval(Version(1), Version(100)).iterate()
        assert Version.calls == 0

    def test_explicit_successor(self) -> None:
        evens = FunctionSuccessor(lambda value: value + 2)
        assert list(Interval(0.0, 6.0, successor=evens)) == [0.0, 2.0, 4.0, 6.0]

    def test_successor_dispatch_is_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.interval.iteration"):
            list(Interval(Version(1), Version(2)))
        assert "via successor" in caplog.text


# =============================================================================
# NOT ITERABLE
# =============================================================================


class TestNotIterable:
    """Тесты для доменов без successor"""

    def test_float(self) -> None:
        with pytest.raises(NotIterable, match="can't iterate from float"):
            iter(Interval(1.0, 2.0))

    def test_raised_eagerly(self) -> None:
        """Ошибка возникает при создании обхода, а не при первом next()"""
        with pytest.raises(NotIterable):
            Interval(0.5, 1.5).iterate()

    def test_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            list(Interval(1.0, 2.0))
