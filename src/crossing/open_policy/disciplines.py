from __future__ import annotations
from enum import Enum

from .base import OpenPolicy
from .priority import PriorityOpen, left_bank_population
from .stack import StackOpen


class Discipline(Enum):
    """Дисциплина фронтира, которую выбирает вызывающий код."""
    STACK = "stack"
    PRIORITY = "priority"


def make_open_policy(discipline: Discipline) -> OpenPolicy:
    """Создать новый (пустой) Open-список для выбранной дисциплины."""
    if discipline is Discipline.STACK:
        return StackOpen()
    if discipline is Discipline.PRIORITY:
        return PriorityOpen(key=left_bank_population)
    raise ValueError(f"Неизвестная дисциплина: {discipline!r}")
