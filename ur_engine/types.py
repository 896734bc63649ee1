from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Hashable, List, Optional, Union

from .config import FIRST_MOVER_CHOICES, config


class Seat(IntEnum):
    ONE = 1
    TWO = 2

    def other(self) -> "Seat":
        return Seat.TWO if self == Seat.ONE else Seat.ONE


@dataclass(frozen=True, slots=True)
class Position:
    """A cell (x, y): y picks the lane (0 p1, 1 shared, 2 p2), x the offset."""

    x: int
    y: int

    @property
    def cell(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass(frozen=True, slots=True)
class CreateToken:
    """Bring a new token in at the mover's entry point and advance it."""

    distance: int


@dataclass(frozen=True, slots=True)
class MoveToken:
    """Advance the mover's token currently standing on (x, y)."""

    x: int
    y: int
    distance: int

    @property
    def origin(self) -> Position:
        return Position(self.x, self.y)


MoveType = Union[CreateToken, MoveToken]


@dataclass(frozen=True, slots=True)
class Move:
    author: Hashable
    kind: MoveType

    @property
    def distance(self) -> int:
        if isinstance(self.kind, (CreateToken, MoveToken)):
            return self.kind.distance
        raise TypeError(f"Unknown move kind: {self.kind!r}")


@dataclass(frozen=True, slots=True)
class Game:
    player_1: Hashable
    player_2: Hashable
    first_mover: str = "either"

    def __post_init__(self) -> None:
        if self.player_1 == self.player_2:
            raise ValueError("A game needs two distinct players")
        if self.first_mover not in FIRST_MOVER_CHOICES:
            raise ValueError(f"Unknown first_mover rule: {self.first_mover!r}")

    @classmethod
    def from_config(cls, player_1: Hashable, player_2: Hashable) -> "Game":
        """Build a game using the configured opening rule."""
        return cls(player_1, player_2, first_mover=config.FIRST_MOVER)

    def seat_of(self, author: Hashable) -> Optional[Seat]:
        if author == self.player_1:
            return Seat.ONE
        if author == self.player_2:
            return Seat.TWO
        return None

    def player(self, seat: Seat) -> Hashable:
        return self.player_1 if seat == Seat.ONE else self.player_2

    def opponent_of(self, author: Hashable) -> Optional[Hashable]:
        seat = self.seat_of(author)
        if seat is None:
            return None
        return self.player(seat.other())

    def opening_seat(self) -> Optional[Seat]:
        """Seat reserved for the first move, None when either may open."""
        if self.first_mover == "player_1":
            return Seat.ONE
        if self.first_mover == "player_2":
            return Seat.TWO
        return None


def describe() -> List[MoveType]:
    """Return one example of each move kind."""
    return [
        MoveToken(x=3, y=0, distance=2),
        CreateToken(distance=2),
    ]
