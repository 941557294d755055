from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple
import time

from .open_policy.base import OpenPolicy
from .open_policy.disciplines import Discipline, make_open_policy
from .safety import validate_balance
from .search_node import SearchNode
from .state import BoatMovement, Direction, Puzzle, State


@dataclass
class RiverCrossingSearch:
    """
    Поиск по графу конфигураций переправы с подключаемым Open-списком.

    Параметры:
        puzzle       : Puzzle      — численность ролей и вместимость лодки
        open_policy  : OpenPolicy  — структура Open (stack / priority queue)

    Главный метод:
        run() -> Optional[list[BoatMovement]]

    Одна и та же петля поиска работает и как DFS (StackOpen), и как
    best-first (PriorityOpen). Каждая конфигурация попадает в _explored
    не более одного раза: выигрывает первое обнаружение.
    """

    puzzle: Puzzle
    open_policy: OpenPolicy

    def __post_init__(self):
        assert self.open_policy.empty(), "open_policy должен быть пустым"

        self.start_state = self.puzzle.initial_state()

        # таблица посещённых конфигураций (Explored)
        self._explored: Dict[State, SearchNode] = {}

        self._stats = {
            'iterations': 0,
            'generated': 0,
            'rejected_unsafe': 0,
            'rejected_visited': 0,
            'max_frontier': 1,
            'path_length': None,
            'solved': False,
            'runtime_seconds': 0.0,
        }

        root_node = SearchNode(state=self.start_state)
        self._explored[self.start_state] = root_node
        self.open_policy.push(root_node)

    # ------------------------------------------------------------
    # Публичный интерфейс
    # ------------------------------------------------------------
    def run(self, max_iterations: Optional[int] = None, verbose: bool = False) -> Optional[list[BoatMovement]]:
        """
        Запустить поиск.

        Возвращает:
            список рейсов от старта до цели, если решение найдено,
            иначе None (пространство конфигураций исчерпано или
            вышли по max_iterations).
        """
        t0 = time.perf_counter()
        try:
            return self._run(max_iterations, verbose)
        finally:
            self._stats['runtime_seconds'] = time.perf_counter() - t0

    def _run(self, max_iterations: Optional[int], verbose: bool) -> Optional[list[BoatMovement]]:
        # Никого перевозить не нужно — задача решена без рейсов
        if self.puzzle.population == 0:
            self._finish([], verbose)
            return []

        while not self.open_policy.empty():
            if max_iterations is not None and self._stats['iterations'] >= max_iterations:
                if verbose:
                    print(f"[search] остановка по max_iterations={max_iterations}, "
                          f"explored={len(self._explored)}")
                break

            node = self.open_policy.pop()
            self._stats['iterations'] += 1

            # Проверка цели
            if self.puzzle.is_goal(node.state):
                moves = node.reconstruct_moves()
                self._finish(moves, verbose)
                return moves

            for move, next_state in self.successors(node.state):
                self._stats['generated'] += 1

                if next_state in self._explored:
                    self._stats['rejected_visited'] += 1
                    continue

                child = SearchNode(state=next_state, parent=node, move=move)
                self._explored[next_state] = child
                self.open_policy.push(child)

            self._stats['max_frontier'] = max(self._stats['max_frontier'], len(self.open_policy))

        # Если дошли сюда — решения нет (или вышли по max_iterations)
        if verbose:
            print(f"[search] решение не найдено, explored={len(self._explored)}")
        return None

    def successors(self, state: State) -> Iterator[Tuple[BoatMovement, State]]:
        """
        Все безопасные рейсы из state и конфигурации, к которым они ведут.

        Перебор: каннибалы во внешнем цикле, миссионеры во внутреннем,
        оба по возрастанию; пустая лодка пропускается.
        """
        capacity = self.puzzle.boat_capacity
        cannibals_right, missionaries_right = self.puzzle.right_bank(state)
        cannibals_here, missionaries_here = self.puzzle.departure_bank(state)
        direction = Direction.departing(state.boat_left)

        for cannibals_boat in range(min(capacity, cannibals_here) + 1):
            max_missionaries = min(capacity - cannibals_boat, missionaries_here)
            for missionaries_boat in range(max_missionaries + 1):
                if cannibals_boat + missionaries_boat == 0:
                    continue

                if state.boat_left:
                    next_cl = state.cannibals_left - cannibals_boat
                    next_ml = state.missionaries_left - missionaries_boat
                    next_cr = cannibals_right + cannibals_boat
                    next_mr = missionaries_right + missionaries_boat
                else:
                    next_cl = state.cannibals_left + cannibals_boat
                    next_ml = state.missionaries_left + missionaries_boat
                    next_cr = cannibals_right - cannibals_boat
                    next_mr = missionaries_right - missionaries_boat

                if not validate_balance(
                    next_cl, next_ml, next_cr, next_mr, cannibals_boat, missionaries_boat
                ):
                    self._stats['rejected_unsafe'] += 1
                    continue

                move = BoatMovement(cannibals_boat, missionaries_boat, direction)
                yield move, State(next_cl, next_ml, not state.boat_left)

    def get_statistics(self) -> dict:
        """Получить статистику работы."""
        stats = dict(self._stats)
        stats['explored'] = len(self._explored)
        stats['expanded'] = stats['iterations']
        return stats

    def _finish(self, moves: list[BoatMovement], verbose: bool) -> None:
        self._stats['solved'] = True
        self._stats['path_length'] = len(moves)
        if verbose:
            print(f"[search] решение найдено: рейсов={len(moves)}, "
                  f"итераций={self._stats['iterations']}, explored={len(self._explored)}")


def solve(
    total_cannibals: int,
    total_missionaries: int,
    boat_capacity: int,
    discipline: Discipline = Discipline.STACK,
    max_iterations: Optional[int] = None,
    verbose: bool = False,
) -> Optional[list[BoatMovement]]:
    """
    Найти последовательность рейсов, перевозящую всех на правый берег.

    Возвращает список BoatMovement, либо None, если решения нет.
    """
    search = RiverCrossingSearch(
        puzzle=Puzzle(total_cannibals, total_missionaries, boat_capacity),
        open_policy=make_open_policy(discipline),
    )
    return search.run(max_iterations=max_iterations, verbose=verbose)
