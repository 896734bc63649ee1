"""
Move legality for the Royal Game of Ur.

``is_valid`` runs the rule predicates in a fixed order and stops at the
first failure. Each failure is reported as a ``Rejection`` whose value is
the message shown to the player; nothing here raises or logs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from . import board
from .constants import GameConstants
from .state import GameState
from .turn import whose_turn
from .types import CreateToken, Game, Move, MoveToken, Position, Seat


class Rejection(Enum):
    """Reasons a move is refused. Values are user-facing messages."""

    NOT_A_PLAYER = "You are not a player in this game!"
    OPPONENT_ON_ROSETTE = "It is not your turn! Your opponent landed on a rosette and moves again."
    NOT_YOUR_TURN = "It is not your turn! Your opponent moves next."
    OPENING_MOVE_RESERVED = "It is not your turn! Your opponent makes the opening move."
    INVALID_DISTANCE = "You must move between 1 and 4 tiles!"
    DESTINATION_OCCUPIED = "You can't move a token onto another of your tokens!"
    OUT_OF_TOKENS = "You are out of tokens!"
    NO_TOKEN_AT_ORIGIN = "There is not one of your tokens to move on the selected tile!"
    OVERSHOOT_FROM_SPLIT = "You must move off the board exactly! At most 3 tiles from this tile."
    OVERSHOOT_FROM_EXIT = "You must move off the board exactly! At most 2 tiles from this tile."
    OVERSHOOT_FROM_LAST_TILE = "You must move off the board exactly! Only 1 tile from this tile."


_OVERSHOOT_BY_CAP = {
    3: Rejection.OVERSHOOT_FROM_SPLIT,
    2: Rejection.OVERSHOOT_FROM_EXIT,
    1: Rejection.OVERSHOOT_FROM_LAST_TILE,
}


@dataclass(frozen=True, slots=True)
class Verdict:
    """Outcome of ``is_valid``; truthy when the move is accepted."""

    rejection: Optional[Rejection] = None

    @property
    def ok(self) -> bool:
        return self.rejection is None

    @property
    def reason(self) -> Optional[str]:
        return None if self.rejection is None else self.rejection.value

    def __bool__(self) -> bool:
        return self.ok


ACCEPTED = Verdict()


def is_valid(move: Move, game: Game, state: GameState) -> Verdict:
    """Check ``move`` against ``state``; return the first rule it breaks."""
    seat = game.seat_of(move.author)
    if seat is None:
        return Verdict(Rejection.NOT_A_PLAYER)

    rejection = (
        _check_turn(move, game, state)
        or _check_distance(move.distance)
        or _check_destination(move, seat, state)
    )
    if rejection is None:
        kind = move.kind
        if isinstance(kind, CreateToken):
            rejection = _check_has_token(seat, state)
        elif isinstance(kind, MoveToken):
            rejection = _check_token_exists(kind.origin, seat, state) or _check_overshoot(
                kind.origin, kind.distance
            )
        else:
            raise TypeError(f"Unknown move kind: {kind!r}")

    return ACCEPTED if rejection is None else Verdict(rejection)


def _check_turn(move: Move, game: Game, state: GameState) -> Optional[Rejection]:
    verdict = whose_turn(game, state)
    if verdict.allows(move.author):
        return None
    if not state.moves:
        return Rejection.OPENING_MOVE_RESERVED
    if verdict.retained:
        return Rejection.OPPONENT_ON_ROSETTE
    return Rejection.NOT_YOUR_TURN


def _check_distance(distance: int) -> Optional[Rejection]:
    if GameConstants.MIN_DISTANCE <= distance <= GameConstants.MAX_DISTANCE:
        return None
    return Rejection.INVALID_DISTANCE


def _check_destination(move: Move, seat: Seat, state: GameState) -> Optional[Rejection]:
    # Opponent tokens never block a move; there is no capture.
    if board.landing(move.kind, seat) in state.tokens_for(seat):
        return Rejection.DESTINATION_OCCUPIED
    return None


def _check_has_token(seat: Seat, state: GameState) -> Optional[Rejection]:
    if len(state.tokens_for(seat)) + state.home_for(seat) < GameConstants.TOKENS_PER_PLAYER:
        return None
    return Rejection.OUT_OF_TOKENS


def _check_token_exists(origin: Position, seat: Seat, state: GameState) -> Optional[Rejection]:
    if origin in state.tokens_for(seat):
        return None
    return Rejection.NO_TOKEN_AT_ORIGIN


def _check_overshoot(origin: Position, distance: int) -> Optional[Rejection]:
    cap = board.max_distance_from(origin)
    if distance <= cap:
        return None
    return _OVERSHOOT_BY_CAP[cap]
