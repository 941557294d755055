import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from crossing.replay import InvalidPlanError, apply_move, is_valid_plan, replay
from crossing.state import BoatMovement, Direction, Puzzle, State

R = Direction.LEFT_TO_RIGHT
L = Direction.RIGHT_TO_LEFT

# классическое решение 3/3/2 за 11 рейсов
CLASSIC_PLAN = [
    BoatMovement(2, 0, R),
    BoatMovement(1, 0, L),
    BoatMovement(2, 0, R),
    BoatMovement(1, 0, L),
    BoatMovement(0, 2, R),
    BoatMovement(1, 1, L),
    BoatMovement(0, 2, R),
    BoatMovement(1, 0, L),
    BoatMovement(2, 0, R),
    BoatMovement(1, 0, L),
    BoatMovement(2, 0, R),
]


def test_replay_classic_plan():
    puzzle = Puzzle(3, 3, 2)
    states = replay(puzzle, CLASSIC_PLAN)
    assert len(states) == len(CLASSIC_PLAN) + 1
    assert states[0] == State(3, 3, True)
    assert states[1] == State(1, 3, False)
    assert states[5] == State(1, 1, False)
    assert states[-1] == State(0, 0, False)
    assert is_valid_plan(puzzle, CLASSIC_PLAN)


def test_boat_flips_every_trip():
    states = replay(Puzzle(3, 3, 2), CLASSIC_PLAN)
    for prev, nxt in zip(states, states[1:]):
        assert prev.boat_left != nxt.boat_left


def test_incomplete_plan_is_not_valid():
    puzzle = Puzzle(3, 3, 2)
    assert replay(puzzle, CLASSIC_PLAN[:3])[-1] == State(0, 3, False)
    assert not is_valid_plan(puzzle, CLASSIC_PLAN[:3])


def test_empty_plan_only_valid_without_people():
    assert is_valid_plan(Puzzle(0, 0, 2), [])
    assert not is_valid_plan(Puzzle(1, 1, 2), [])


@pytest.mark.parametrize(
    "puzzle, move, reason",
    [
        (Puzzle(3, 3, 2), BoatMovement(1, 0, L), "лодка на другом берегу"),
        (Puzzle(3, 3, 2), BoatMovement(0, 0, R), "пустая лодка"),
        (Puzzle(3, 3, 2), BoatMovement(2, 1, R), "вместимость лодки 2"),
        (Puzzle(1, 1, 3), BoatMovement(2, 0, R), "на берегу отправления не хватает людей"),
        (Puzzle(3, 3, 2), BoatMovement(0, 2, R), "каннибалы в большинстве"),
        (Puzzle(2, 2, 3), BoatMovement(2, 1, R), "каннибалы в большинстве"),
    ],
)
def test_invalid_moves_are_rejected(puzzle, move, reason):
    with pytest.raises(InvalidPlanError) as excinfo:
        apply_move(puzzle, puzzle.initial_state(), move)
    assert excinfo.value.reason == reason
    assert excinfo.value.step == 1
    assert isinstance(excinfo.value, ValueError)
    assert not is_valid_plan(puzzle, [move])


def test_replay_reports_failing_step():
    plan = CLASSIC_PLAN[:2] + [BoatMovement(0, 3, R)]
    with pytest.raises(InvalidPlanError) as excinfo:
        replay(Puzzle(3, 3, 2), plan)
    assert excinfo.value.step == 3
    assert excinfo.value.state == State(2, 3, True)


def test_goal_is_empty_left_bank_with_boat_on_the_right():
    puzzle = Puzzle(3, 3, 2)
    assert puzzle.goal_state() == State(0, 0, False)
    assert puzzle.is_goal(State(0, 0, False))
    # все переправились, но лодка вернулась налево
    assert not puzzle.is_goal(State(0, 0, True))
    assert not puzzle.is_goal(State(1, 0, False))
