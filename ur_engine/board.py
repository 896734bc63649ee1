"""
Board topology for the Royal Game of Ur.

The path is a function over (offset, lane) rather than an adjacency table:
entry lanes run down to a merge cell, the shared lane runs up to the split
cell, and each exit lane runs down to an off-board home cell.
"""

from __future__ import annotations

from .constants import BoardConstants, GameConstants
from .types import CreateToken, MoveToken, MoveType, Position, Seat


def step(position: Position, mover: Seat) -> Position:
    """Advance one cell. The mover only matters at the split cell."""
    cell = position.cell
    if cell in BoardConstants.MERGE_CELLS:
        return Position(*BoardConstants.MERGE_TARGET)
    if cell == BoardConstants.SPLIT_CELL:
        return Position(*BoardConstants.SPLIT_TARGETS[int(mover)])
    if position.y == GameConstants.SHARED_LANE:
        return Position(position.x + 1, position.y)
    return Position(position.x - 1, position.y)


def advance(position: Position, distance: int, mover: Seat) -> Position:
    """Return where a token on ``position`` lands after ``distance`` steps."""
    if distance < 0:
        raise ValueError(f"distance must be non-negative, got {distance}")
    for _ in range(distance):
        position = step(position, mover)
    return position


def entry_point(mover: Seat) -> Position:
    return Position(*BoardConstants.ENTRY_POINTS[int(mover)])


def is_home_cell(position: Position) -> bool:
    return position.cell in BoardConstants.HOME_CELLS.values()


def is_homing(position: Position, distance: int, mover: Seat) -> bool:
    """True if the move carries the token exactly onto a home cell."""
    return is_home_cell(advance(position, distance, mover))


def is_rosette(position: Position) -> bool:
    return position.cell in BoardConstants.ROSETTES


def max_distance_from(position: Position) -> int:
    """Largest distance that does not run past home from ``position``."""
    return BoardConstants.OVERSHOOT_CAPS.get(position.cell, GameConstants.MAX_DISTANCE)


def origin(kind: MoveType, mover: Seat) -> Position:
    """Cell a move starts from: the entry point for new tokens."""
    if isinstance(kind, CreateToken):
        return entry_point(mover)
    if isinstance(kind, MoveToken):
        return kind.origin
    raise TypeError(f"Unknown move kind: {kind!r}")


def landing(kind: MoveType, mover: Seat) -> Position:
    return advance(origin(kind, mover), kind.distance, mover)
