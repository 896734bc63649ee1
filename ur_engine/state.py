from __future__ import annotations

from dataclasses import dataclass, replace
from typing import FrozenSet, Optional, Tuple

import numpy as np
from loguru import logger

from . import board
from .constants import BoardConstants, GameConstants
from .types import CreateToken, Game, Move, MoveToken, Position, Seat


@dataclass(frozen=True, slots=True)
class GameState:
    """Move log plus the token sets and home counters derived from it.

    States are values: ``evolve`` returns a new state and never touches the
    one it was given, so any snapshot held by a caller stays valid.
    """

    moves: Tuple[Move, ...] = ()
    p1_tokens: FrozenSet[Position] = frozenset()
    p1_home: int = 0
    p2_tokens: FrozenSet[Position] = frozenset()
    p2_home: int = 0

    @classmethod
    def initial(cls) -> "GameState":
        return cls()

    # --- Queries ---
    def tokens_for(self, seat: Seat) -> FrozenSet[Position]:
        return self.p1_tokens if seat == Seat.ONE else self.p2_tokens

    def home_for(self, seat: Seat) -> int:
        return self.p1_home if seat == Seat.ONE else self.p2_home

    def waiting_for(self, seat: Seat) -> int:
        """Tokens not yet brought onto the board."""
        return GameConstants.TOKENS_PER_PLAYER - len(self.tokens_for(seat)) - self.home_for(seat)

    def occupant(self, position: Position) -> Optional[Seat]:
        """Seat holding ``position``, checking player 1 first."""
        if position in self.p1_tokens:
            return Seat.ONE
        if position in self.p2_tokens:
            return Seat.TWO
        return None

    def last_move(self) -> Optional[Move]:
        return self.moves[-1] if self.moves else None

    def evolve(self, game: Game, move: Move) -> "GameState":
        return evolve(self, game, move)

    # --- Rendering ---
    def to_grid(self) -> np.ndarray:
        """Build a (3, LANE_LENGTH) occupancy grid.

        Values: -1 not a board cell, 0 empty, 1 player 1, 2 player 2,
        3 both players (only possible on the shared lane).
        """
        grid = np.full((3, GameConstants.LANE_LENGTH), -1, dtype=np.int8)
        for y in range(3):
            for x in range(GameConstants.LANE_LENGTH):
                if BoardConstants.is_board_cell(x, y):
                    grid[y, x] = 0
        for pos in self.p1_tokens:
            grid[pos.y, pos.x] += 1
        for pos in self.p2_tokens:
            grid[pos.y, pos.x] += 2
        return grid

    def render(self) -> str:
        symbols = {-1: " ", 0: ".", 1: "1", 2: "2", 3: "X"}
        grid = self.to_grid()
        lines = []
        for y in range(3):
            row = []
            for x in range(GameConstants.LANE_LENGTH):
                value = int(grid[y, x])
                if value == 0 and (x, y) in BoardConstants.ROSETTES:
                    row.append("*")
                else:
                    row.append(symbols[value])
            lines.append(" ".join(row))
        for seat in Seat:
            lines.append(
                f"P{int(seat)} home: {self.home_for(seat)}, "
                f"waiting: {self.waiting_for(seat)}"
            )
        return "\n".join(lines)


def evolve(state: GameState, game: Game, move: Move) -> GameState:
    """Fold an already validated move into the next state.

    Assumes ``move`` passed ``is_valid`` against ``state``; nothing is
    re-checked here.
    """
    seat = game.seat_of(move.author)
    if seat is None:
        raise ValueError(f"{move.author!r} is not a player in this game")

    tokens = set(state.tokens_for(seat))
    home = state.home_for(seat)
    kind = move.kind

    if isinstance(kind, MoveToken):
        tokens.discard(kind.origin)
        if board.is_homing(kind.origin, kind.distance, seat):
            home += 1
            logger.debug(f"P{int(seat)} token from {kind.origin} reached home ({home})")
        else:
            tokens.add(board.advance(kind.origin, kind.distance, seat))
    elif isinstance(kind, CreateToken):
        tokens.add(board.advance(board.entry_point(seat), kind.distance, seat))
    else:
        raise TypeError(f"Unknown move kind: {kind!r}")

    moves = state.moves + (move,)
    if seat == Seat.ONE:
        return replace(state, moves=moves, p1_tokens=frozenset(tokens), p1_home=home)
    return replace(state, moves=moves, p2_tokens=frozenset(tokens), p2_home=home)


def initial() -> GameState:
    return GameState.initial()
