from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .state import BoatMovement, State


@dataclass(eq=False)
class SearchNode:
    """
    Узел поиска: конфигурация + обратная ссылка на узел, из которого
    её впервые нашли, и рейс, который туда привёл.

    Содержит:
        state   : State
            Конфигурация переправы.

        parent  : SearchNode | None
            Родительский узел (None только у корня).

        move    : BoatMovement | None
            Рейс parent.state → state (None только у корня).

    История рейсов не копируется при каждом расширении: она
    восстанавливается один раз, проходом по parent от цели к корню.
    """

    state: State
    parent: Optional["SearchNode"] = None
    move: Optional[BoatMovement] = None

    def reconstruct_moves(self) -> list[BoatMovement]:
        """
        Восстановить список рейсов от начальной конфигурации до этого узла.
        Используется, когда поиск снимает цель с фронтира.
        """
        moves = []
        node = self
        while node.parent is not None:
            moves.append(node.move)
            node = node.parent
        return list(reversed(moves))

    def __repr__(self):
        return f"SearchNode(state={self.state}, move={self.move})"
