"""
Royal Game of Ur rules engine.
Board topology, turn order, move legality and state evolution as pure functions.
"""

from ur_engine.board import advance, is_homing, is_rosette, step
from ur_engine.config import Config, config
from ur_engine.constants import BoardConstants, GameConstants
from ur_engine.errors import IllegalMoveError, UrEngineError
from ur_engine.session import apply_move, legal_moves, replay
from ur_engine.state import GameState, evolve, initial
from ur_engine.turn import TurnVerdict, whose_turn
from ur_engine.types import (
    CreateToken,
    Game,
    Move,
    MoveToken,
    MoveType,
    Position,
    Seat,
    describe,
)
from ur_engine.validation import Rejection, Verdict, is_valid

__all__ = [
    "advance",
    "step",
    "is_homing",
    "is_rosette",
    "whose_turn",
    "TurnVerdict",
    "is_valid",
    "Verdict",
    "Rejection",
    "evolve",
    "initial",
    "GameState",
    "Game",
    "Move",
    "MoveType",
    "CreateToken",
    "MoveToken",
    "Position",
    "Seat",
    "describe",
    "legal_moves",
    "apply_move",
    "replay",
    "IllegalMoveError",
    "UrEngineError",
    "Config",
    "config",
    "GameConstants",
    "BoardConstants",
]
