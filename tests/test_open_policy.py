import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from crossing.open_policy.disciplines import Discipline, make_open_policy
from crossing.open_policy.priority import PriorityOpen, left_bank_population
from crossing.open_policy.stack import StackOpen
from crossing.search_node import SearchNode
from crossing.state import State


def _node(cannibals: int, missionaries: int, boat_left: bool = True) -> SearchNode:
    return SearchNode(state=State(cannibals, missionaries, boat_left))


def test_stack_open_is_lifo():
    open_list = StackOpen()
    assert open_list.empty()
    a, b, c = _node(1, 1), _node(2, 2), _node(0, 3)
    for node in (a, b, c):
        open_list.push(node)

    assert len(open_list) == 3
    assert open_list.peek() is c
    assert [open_list.pop() for _ in range(3)] == [c, b, a]
    assert open_list.empty()


def test_priority_open_pops_smallest_left_bank_first():
    open_list = PriorityOpen()
    a, b, c, d = _node(2, 3), _node(1, 1), _node(0, 2), _node(4, 3)
    for node in (a, b, c, d):
        open_list.push(node)

    assert open_list.peek() is c
    # b и c равны по ключу (2) — побеждает последний push
    assert [open_list.pop() for _ in range(4)] == [c, b, a, d]
    assert open_list.empty()


def test_priority_open_uses_supplied_key():
    open_list = PriorityOpen(key=lambda state: -state.missionaries_left)
    a, b = _node(0, 1), _node(3, 5)
    open_list.push(a)
    open_list.push(b)
    assert open_list.pop() is b


def test_priority_open_does_not_compare_nodes_on_ties():
    open_list = PriorityOpen()
    nodes = [_node(1, 1, boat_left=flag) for flag in (True, False, True)]
    for node in nodes:
        open_list.push(node)
    assert [open_list.pop() for _ in nodes] == list(reversed(nodes))


def test_left_bank_population():
    assert left_bank_population(State(4, 7, False)) == 11
    assert left_bank_population(State(0, 0, True)) == 0


@pytest.mark.parametrize(
    "discipline, expected_type",
    [(Discipline.STACK, StackOpen), (Discipline.PRIORITY, PriorityOpen)],
)
def test_make_open_policy(discipline, expected_type):
    first = make_open_policy(discipline)
    second = make_open_policy(discipline)
    assert isinstance(first, expected_type)
    assert first is not second
    assert first.empty()


def test_make_open_policy_rejects_unknown():
    with pytest.raises(ValueError):
        make_open_policy("queue")
