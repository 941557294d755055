from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Направление рейса лодки."""
    LEFT_TO_RIGHT = "left_to_right"
    RIGHT_TO_LEFT = "right_to_left"

    @classmethod
    def departing(cls, boat_left: bool) -> Direction:
        """Направление рейса, если лодка сейчас на левом (True) или правом берегу."""
        return cls.LEFT_TO_RIGHT if boat_left else cls.RIGHT_TO_LEFT


@dataclass(frozen=True)
class State:
    """
    Конфигурация переправы в один момент времени.

    Хранится только левый берег и положение лодки; правый берег
    вычисляется через Puzzle.right_bank() как total - left.
    Immutable → можно безопасно класть в dict / set.
    """
    cannibals_left: int
    missionaries_left: int
    boat_left: bool

    def __repr__(self) -> str:
        side = "L" if self.boat_left else "R"
        return f"State(c={self.cannibals_left}, m={self.missionaries_left}, boat={side})"


@dataclass(frozen=True)
class BoatMovement:
    """Один рейс лодки: сколько людей каждой роли на борту и куда плывём."""
    cannibals_boat: int
    missionaries_boat: int
    direction: Direction

    @property
    def move_right(self) -> bool:
        return self.direction is Direction.LEFT_TO_RIGHT

    @property
    def passengers(self) -> int:
        return self.cannibals_boat + self.missionaries_boat

    def __repr__(self) -> str:
        arrow = "→" if self.move_right else "←"
        return f"BoatMovement({arrow} c={self.cannibals_boat}, m={self.missionaries_boat})"


@dataclass(frozen=True)
class Puzzle:
    """
    Параметры задачи: численность обеих ролей и вместимость лодки.

    Фиксированы на время одного поиска и никогда не меняются.
    """
    total_cannibals: int
    total_missionaries: int
    boat_capacity: int

    def __post_init__(self):
        assert self.total_cannibals >= 0, "total_cannibals должен быть >= 0"
        assert self.total_missionaries >= 0, "total_missionaries должен быть >= 0"
        assert self.boat_capacity >= 0, "boat_capacity должен быть >= 0"

    @property
    def population(self) -> int:
        return self.total_cannibals + self.total_missionaries

    def initial_state(self) -> State:
        """Все на левом берегу, лодка тоже слева."""
        return State(self.total_cannibals, self.total_missionaries, True)

    def goal_state(self) -> State:
        return State(0, 0, False)

    def is_goal(self, state: State) -> bool:
        """Левый берег пуст, лодка на правом берегу."""
        return state == self.goal_state()

    def right_bank(self, state: State) -> Tuple[int, int]:
        """(cannibals_right, missionaries_right) для данной конфигурации."""
        return (
            self.total_cannibals - state.cannibals_left,
            self.total_missionaries - state.missionaries_left,
        )

    def departure_bank(self, state: State) -> Tuple[int, int]:
        """Кто сейчас на берегу, от которого отходит лодка."""
        if state.boat_left:
            return state.cannibals_left, state.missionaries_left
        return self.right_bank(state)
