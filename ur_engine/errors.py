from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import Move
    from .validation import Rejection


class UrEngineError(Exception):
    """Base exception for engine errors."""

    pass


class IllegalMoveError(UrEngineError):
    """Raised when a session helper is handed a move the rules reject."""

    def __init__(self, move: "Move", rejection: "Rejection", index: int | None = None):
        self.move = move
        self.rejection = rejection
        self.index = index
        where = f" at move {index}" if index is not None else ""
        super().__init__(f"Illegal move{where}: {rejection.value}")
