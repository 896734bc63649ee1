"""
Constants for the Royal Game of Ur board.
Fixed board geometry and move rules; tunable settings live in config.py.
"""

from typing import Dict, FrozenSet, Tuple

Cell = Tuple[int, int]


class GameConstants:
    """Core game rules."""

    # Distance of a single move (sum of four binary dice, zero excluded)
    MIN_DISTANCE = 1
    MAX_DISTANCE = 4

    # Tokens each player brings into the game (on board + home)
    TOKENS_PER_PLAYER = 7

    # Lanes
    P1_LANE = 0
    SHARED_LANE = 1
    P2_LANE = 2
    LANE_LENGTH = 8


class BoardConstants:
    """Board layout: entry points, junctions, home cells and rosettes."""

    # Off-board cells where new tokens start, keyed by seat (1, 2)
    ENTRY_POINTS: Dict[int, Cell] = {
        1: (4, 0),
        2: (4, 2),
    }

    # End of each entry lane; stepping off joins the shared lane at (0, 1)
    MERGE_CELLS: FrozenSet[Cell] = frozenset({(0, 0), (0, 2)})
    MERGE_TARGET: Cell = (0, 1)

    # End of the shared lane; stepping off enters the mover's exit lane
    SPLIT_CELL: Cell = (7, 1)
    SPLIT_TARGETS: Dict[int, Cell] = {
        1: (7, 0),
        2: (7, 2),
    }

    # Off-board cells reached by a token leaving its exit lane exactly
    HOME_CELLS: Dict[int, Cell] = {
        1: (5, 0),
        2: (5, 2),
    }

    ROSETTES: FrozenSet[Cell] = frozenset({(0, 0), (0, 2), (3, 1), (6, 0), (6, 2)})

    # Largest distance that still lands exactly on home from these origins
    OVERSHOOT_CAPS: Dict[Cell, int] = {
        (7, 1): 3,
        (7, 0): 2,
        (7, 2): 2,
        (6, 0): 1,
        (6, 2): 1,
    }

    # Private lane offsets that are real board cells (4 is entry, 5 is home)
    PRIVATE_OFFSETS: FrozenSet[int] = frozenset({0, 1, 2, 3, 6, 7})

    @classmethod
    def is_board_cell(cls, x: int, y: int) -> bool:
        """Check whether (x, y) is a cell a token can stand on."""
        if not 0 <= x < GameConstants.LANE_LENGTH:
            return False
        if y == GameConstants.SHARED_LANE:
            return True
        if y in (GameConstants.P1_LANE, GameConstants.P2_LANE):
            return x in cls.PRIVATE_OFFSETS
        return False
