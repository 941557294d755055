from __future__ import annotations


def side_is_balanced(cannibals: int, missionaries: int) -> bool:
    """Каннибалов не больше миссионеров, либо миссионеров нет совсем."""
    return cannibals <= missionaries or missionaries == 0


def validate_balance(
    cannibals_left: int,
    missionaries_left: int,
    cannibals_right: int,
    missionaries_right: int,
    cannibals_boat: int,
    missionaries_boat: int,
) -> bool:
    """
    Безопасна ли конфигурация после предложенного рейса.

    Проверяются три места: левый берег, правый берег и сама лодка.
    Чистая функция, определена для любых неотрицательных чисел (включая 0).

    Пример:
        validate_balance(1, 2, 1, 2, 1, 1)  → True
        validate_balance(2, 1, 2, 1, 1, 1)  → False
    """
    return (
        side_is_balanced(cannibals_left, missionaries_left)
        and side_is_balanced(cannibals_right, missionaries_right)
        and side_is_balanced(cannibals_boat, missionaries_boat)
    )
