from __future__ import annotations
from typing import List

from crossing.search_node import SearchNode
from .base import OpenPolicy


class StackOpen(OpenPolicy):
    """
    Фронтир-стек: раскрываем последнюю найденную конфигурацию.

    Лодка уходит в глубину по первой ветке рейсов и возвращается
    к соседям только когда ветка упёрлась в уже посещённые состояния.
    """

    def __init__(self):
        self._nodes: List[SearchNode] = []

    def push(self, node: SearchNode) -> None:
        self._nodes.append(node)

    def pop(self) -> SearchNode:
        return self._nodes.pop()

    def peek(self) -> SearchNode:
        return self._nodes[-1]

    def empty(self) -> bool:
        return not self._nodes

    def __len__(self) -> int:
        return len(self._nodes)
