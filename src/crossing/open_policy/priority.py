from __future__ import annotations
import heapq
from itertools import count
from typing import Callable, List, Tuple

from crossing.search_node import SearchNode
from crossing.state import State
from .base import OpenPolicy


def left_bank_population(state: State) -> int:
    """Ключ best-first: сколько людей ещё осталось на левом берегу."""
    return state.cannibals_left + state.missionaries_left


class PriorityOpen(OpenPolicy):
    """
    Open-список с приоритетом по ключу конфигурации (min-heap).

    Ключ передаётся снаружи, чтобы State не знал ничего о политике поиска.
    По умолчанию — население левого берега: меньше людей слева → раньше.
    При равном ключе работает как стек (LIFO): побеждает последний push.
    """

    def __init__(self, key: Callable[[State], int] = left_bank_population):
        self._key = key
        self._heap: List[Tuple[int, int, SearchNode]] = []
        # убывающий счётчик: более поздний push получает меньший tie-break
        self._counter = count(0, -1)

    def push(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (self._key(node.state), next(self._counter), node))

    def pop(self) -> SearchNode:
        return heapq.heappop(self._heap)[2]

    def peek(self) -> SearchNode:
        return self._heap[0][2]

    def empty(self) -> bool:
        return len(self._heap) == 0

    def __len__(self) -> int:
        return len(self._heap)
