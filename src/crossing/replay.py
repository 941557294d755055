from __future__ import annotations
from typing import Iterable, List

from .safety import validate_balance
from .state import BoatMovement, Direction, Puzzle, State


class InvalidPlanError(ValueError):
    """Рейс из плана нельзя выполнить из текущей конфигурации."""

    def __init__(self, step: int, move: BoatMovement, state: State, reason: str):
        self.step = step
        self.move = move
        self.state = state
        self.reason = reason
        super().__init__(f"Рейс {step} ({move!r}) из {state!r}: {reason}")


def apply_move(puzzle: Puzzle, state: State, move: BoatMovement, step: int = 1) -> State:
    """
    Выполнить один рейс и вернуть новую конфигурацию.

    Проверяет направление, вместимость, наличие пассажиров на берегу
    отправления и баланс обоих берегов и лодки после рейса.
    """
    if move.direction is not Direction.departing(state.boat_left):
        raise InvalidPlanError(step, move, state, "лодка на другом берегу")
    if move.passengers == 0:
        raise InvalidPlanError(step, move, state, "пустая лодка")
    if move.passengers > puzzle.boat_capacity:
        raise InvalidPlanError(step, move, state, f"вместимость лодки {puzzle.boat_capacity}")

    cannibals_here, missionaries_here = puzzle.departure_bank(state)
    if move.cannibals_boat > cannibals_here or move.missionaries_boat > missionaries_here:
        raise InvalidPlanError(step, move, state, "на берегу отправления не хватает людей")

    sign = -1 if state.boat_left else 1
    next_state = State(
        state.cannibals_left + sign * move.cannibals_boat,
        state.missionaries_left + sign * move.missionaries_boat,
        not state.boat_left,
    )
    cannibals_right, missionaries_right = puzzle.right_bank(next_state)
    if not validate_balance(
        next_state.cannibals_left,
        next_state.missionaries_left,
        cannibals_right,
        missionaries_right,
        move.cannibals_boat,
        move.missionaries_boat,
    ):
        raise InvalidPlanError(step, move, state, "каннибалы в большинстве")
    return next_state


def replay(puzzle: Puzzle, moves: Iterable[BoatMovement]) -> List[State]:
    """
    Проиграть план от начальной конфигурации.

    Возвращает список конфигураций (начальная включена, len = рейсов + 1).
    """
    states = [puzzle.initial_state()]
    for step, move in enumerate(moves, 1):
        states.append(apply_move(puzzle, states[-1], move, step))
    return states


def is_valid_plan(puzzle: Puzzle, moves: Iterable[BoatMovement]) -> bool:
    """True если план выполним и заканчивается целевой конфигурацией."""
    moves = list(moves)
    try:
        states = replay(puzzle, moves)
    except InvalidPlanError:
        return False
    if puzzle.population == 0:
        return not moves
    return puzzle.is_goal(states[-1])
