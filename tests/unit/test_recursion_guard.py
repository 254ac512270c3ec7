"""
Тесты для RecursionGuard

Проверяет:
1. Повторный вход с тем же ключом возвращает on_recursion()
2. Разные ключи не мешают друг другу
3. Состояние очищается после вызова верхнего уровня, в том числе при исключении
4. Потоки не делят состояние
"""

import threading

import pytest

from src.interval.recursion_guard import RecursionGuard


class TestRecursionGuard:
    """Тесты для RecursionGuard.run"""

    def test_plain_call(self) -> None:
        guard = RecursionGuard("plain")
        assert guard.run("key", lambda: 42, lambda: -1) == 42

    def test_reentry_same_key(self) -> None:
        guard = RecursionGuard("reentry")

        def outer() -> int:
            return guard.run("key", lambda: 1, lambda: -1)

        assert guard.run("key", outer, lambda: 0) == -1

    def test_reentry_other_key(self) -> None:
        guard = RecursionGuard("other")

        def outer() -> int:
            return guard.run("inner", lambda: 1, lambda: -1)

        assert guard.run("outer", outer, lambda: 0) == 1

    def test_deep_recursion_terminates(self) -> None:
        guard = RecursionGuard("deep")
        depth = []

        def visit() -> str:
            depth.append(1)
            return "(" + guard.run("node", visit, lambda: "...") + ")"

        assert guard.run("node", visit, lambda: "...") == "(...)"
        assert len(depth) == 1

    def test_state_cleared_after_exception(self) -> None:
        guard = RecursionGuard("failing")

        def fail() -> int:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            guard.run("key", fail, lambda: -1)
        assert guard.run("key", lambda: 1, lambda: -1) == 1

    def test_threads_do_not_share_state(self) -> None:
        guard = RecursionGuard("threads")
        entered = threading.Event()
        release = threading.Event()
        results = []

        def hold() -> str:
            entered.set()
            release.wait(timeout=5)
            return "outer"

        worker = threading.Thread(target=lambda: results.append(guard.run("key", hold, lambda: "re")))
        worker.start()
        entered.wait(timeout=5)
        # Пока поток держит ключ, текущий поток его не видит
        results.append(guard.run("key", lambda: "main", lambda: "re"))
        release.set()
        worker.join(timeout=5)

        assert sorted(results) == ["main", "outer"]
