from __future__ import annotations
from typing import Protocol

from crossing.search_node import SearchNode


class OpenPolicy(Protocol):
    """
    Фронтир поиска переправы: конфигурации, которые уже найдены,
    но ещё не раскрыты.

    RiverCrossingSearch только кладёт узлы и снимает следующий;
    какой узел окажется следующим, решает реализация
    (StackOpen → DFS, PriorityOpen → best-first).
    """

    def push(self, node: SearchNode) -> None:
        """Положить только что найденный узел."""
        ...

    def pop(self) -> SearchNode:
        """Снять узел, который нужно раскрыть следующим."""
        ...

    def peek(self) -> SearchNode:
        """Тот же узел, что вернёт pop(), без снятия."""
        ...

    def empty(self) -> bool:
        """Нечего раскрывать — поиск исчерпан."""
        ...

    def __len__(self) -> int:
        ...
