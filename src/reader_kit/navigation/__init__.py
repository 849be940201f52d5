from .navigator import (
    advance,
    clamp,
    first_position,
    is_first,
    is_last,
    is_valid,
    iter_positions,
    jump_to_chapter,
    last_position,
    progress_label,
    step_chapter,
)
from .position import Direction, Position

__all__ = [
    "Direction",
    "Position",
    "advance",
    "clamp",
    "first_position",
    "is_first",
    "is_last",
    "is_valid",
    "iter_positions",
    "jump_to_chapter",
    "last_position",
    "progress_label",
    "step_chapter",
]
