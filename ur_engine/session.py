from __future__ import annotations

from typing import Hashable, Iterable, List

from loguru import logger

from .errors import IllegalMoveError
from .state import GameState, evolve
from .types import CreateToken, Game, Move, MoveToken
from .validation import is_valid


def legal_moves(game: Game, state: GameState, author: Hashable, distance: int) -> List[Move]:
    """All moves ``author`` may make for a rolled ``distance``.

    Entering a new token comes first, then moving existing tokens ordered
    by lane and offset. Empty when nothing is legal (or not their turn).
    """
    seat = game.seat_of(author)
    if seat is None:
        return []
    candidates = [Move(author, CreateToken(distance=distance))]
    for pos in sorted(state.tokens_for(seat), key=lambda p: (p.y, p.x)):
        candidates.append(Move(author, MoveToken(x=pos.x, y=pos.y, distance=distance)))
    return [mv for mv in candidates if is_valid(mv, game, state)]


def apply_move(game: Game, state: GameState, move: Move) -> GameState:
    """Validate ``move`` and fold it into ``state``."""
    verdict = is_valid(move, game, state)
    if not verdict:
        logger.info(f"Rejected move {move}: {verdict.reason}")
        raise IllegalMoveError(move, verdict.rejection, index=len(state.moves))
    logger.debug(f"Accepted move {move}")
    return evolve(state, game, move)


def replay(game: Game, moves: Iterable[Move], validate: bool = True) -> GameState:
    """Rebuild a state from a move log, starting from the initial state."""
    state = GameState.initial()
    for move in moves:
        if validate:
            state = apply_move(game, state, move)
        else:
            state = evolve(state, game, move)
    return state
