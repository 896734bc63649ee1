from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Optional

from . import board
from .state import GameState
from .types import Game


@dataclass(frozen=True, slots=True)
class TurnVerdict:
    """Who may move next.

    ``player`` is None when either player may move. ``retained`` is True when
    the previous mover landed on a rosette and keeps the turn.
    """

    player: Optional[Hashable] = None
    retained: bool = False

    @classmethod
    def either(cls) -> "TurnVerdict":
        return cls()

    @classmethod
    def only(cls, player: Hashable, retained: bool = False) -> "TurnVerdict":
        return cls(player=player, retained=retained)

    @property
    def is_open(self) -> bool:
        return self.player is None

    def allows(self, author: Hashable) -> bool:
        return self.player is None or self.player == author


def whose_turn(game: Game, state: GameState) -> TurnVerdict:
    """Replay the last logged move to decide who moves next."""
    last = state.last_move()
    if last is None:
        seat = game.opening_seat()
        if seat is None:
            return TurnVerdict.either()
        return TurnVerdict.only(game.player(seat))

    seat = game.seat_of(last.author)
    if seat is None:
        raise ValueError(f"Logged move by {last.author!r}, who is not in this game")

    if board.is_rosette(board.landing(last.kind, seat)):
        return TurnVerdict.only(last.author, retained=True)
    return TurnVerdict.only(game.player(seat.other()))
