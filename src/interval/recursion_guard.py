"""RecursionGuard — защита от бесконечной рекурсии на циклических границах.

Границы интервала могут содержать ссылку на сам интервал (контейнер,
содержащий интервал, который содержит этот контейнер). Сравнение, хеш и
рендеринг таких структур возвращаются в тот же интервал.

Guard хранит множество "операций в процессе" в ContextVar:
- множество создаётся самым внешним вызовом и удаляется при его завершении
- потоки и asyncio задачи никогда не делят одно множество
- повторный вход с тем же ключом возвращает заранее заданный результат
"""

from contextvars import ContextVar
from typing import Callable, Hashable, TypeVar

T = TypeVar("T")


class RecursionGuard:
    """Множество ключей, обрабатываемых в текущем вызове верхнего уровня."""

    def __init__(self, name: str):
        """
        Args:
            name: имя операции (для ContextVar, например "interval_eq")
        """
        self.name = name
        self._in_progress: ContextVar[set[Hashable] | None] = ContextVar(
            f"{name}_in_progress", default=None
        )

    def run(self, key: Hashable, func: Callable[[], T], on_recursion: Callable[[], T]) -> T:
        """Выполнение func под ключом key.

        Args:
            key: ключ операции (id объекта или пара id)
            func: вычисление, которое может рекурсивно вернуться с тем же ключом
            on_recursion: результат для повторного входа

        Returns:
            func() или on_recursion() при повторном входе
        """
        active = self._in_progress.get()
        token = None
        if active is None:
            active = set()
            token = self._in_progress.set(active)

        try:
            if key in active:
                return on_recursion()
            active.add(key)
            try:
                return func()
            finally:
                active.discard(key)
        finally:
            if token is not None:
                self._in_progress.reset(token)
