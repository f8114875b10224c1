from typing import Protocol

from matecheck.domain.entities import KnightLoopState


class KnightBounds(Protocol):
    vertical: int
    horizontal: int


def knight_state(vertical: int, horizontal: int, bounds: KnightBounds) -> KnightLoopState:
    """
    Classify the knight loop counters.

    Vertical steps always run first, so horizontal progress only counts
    once the vertical leg is complete.
    """
    if vertical < bounds.vertical:
        return "both_pending"
    if horizontal < bounds.horizontal:
        return "vertical_done"
    return "done"


def can_transition(current: KnightLoopState, new: KnightLoopState) -> bool:
    """
    Determine if the knight loop may move from current to new.
    """
    if current == new:
        return True

    if current == "both_pending":
        return new == "vertical_done"

    if current == "vertical_done":
        return new == "done"

    # done is terminal
    return False


def transition(current: KnightLoopState, new: KnightLoopState) -> KnightLoopState:
    """
    Return the new state.
    Raises ValueError if transition is invalid.
    """
    if not can_transition(current, new):
        raise ValueError(f"Invalid knight transition from {current} to {new}")
    return new
