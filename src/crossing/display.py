from __future__ import annotations
from typing import Optional, Sequence, TextIO

from .state import BoatMovement

SEPARATOR = "=" * 59


def print_history(history: Sequence[BoatMovement], file: Optional[TextIO] = None) -> None:
    for action in history:
        print(SEPARATOR, file=file)
        if action.move_right:
            print(f"(→) move right with {action.cannibals_boat} 🧟 and {action.missionaries_boat} 😇", file=file)
        else:
            print(f"(←) move left with {action.cannibals_boat} 🧟 and {action.missionaries_boat} 😇", file=file)
        print(SEPARATOR, file=file)
        print(file=file)


def print_result(history: Optional[Sequence[BoatMovement]], label: str, file: Optional[TextIO] = None) -> None:
    """Напечатать решение (или сообщение об отсутствии решения)."""
    if history is None:
        print(SEPARATOR, file=file)
        print("No solution found!", file=file)
        print(SEPARATOR, file=file)
        return

    print(f"Found solution! With {label}", file=file)
    print(SEPARATOR, file=file)
    print("🧟 = cannibal", file=file)
    print("😇 = missionary", file=file)
    print(SEPARATOR, file=file)
    print(file=file)
    print(f"step counts: {len(history)}", file=file)
    print_history(history, file=file)
