"""Move representation."""

from __future__ import annotations

import enum

from scrabble.board import Direction
from scrabble.tiles import Tile


class MoveKind(enum.Enum):
    PLACE = "PLACE"
    EXCHANGE = "EXCHANGE"
    PASS = "PASS"


class Move:
    """A turn's action.

    For PLACE moves, ``(row, column)`` is the first square a new tile goes
    on and ``tiles`` are the new tiles in board order; squares already
    holding tiles are skipped over when the move is laid out.
    """

    __slots__ = ("kind", "tiles", "row", "column", "direction")

    def __init__(
        self,
        kind: MoveKind = MoveKind.PASS,
        tiles: list[Tile] | None = None,
        row: int = 0,
        column: int = 0,
        direction: Direction = Direction.ACROSS,
    ):
        self.kind = kind
        self.tiles = tiles if tiles is not None else []
        self.row = row
        self.column = column
        self.direction = direction

    @classmethod
    def place(cls, tiles: list[Tile], row: int, column: int, direction: Direction) -> Move:
        return cls(MoveKind.PLACE, list(tiles), row, column, direction)

    @classmethod
    def exchange(cls, tiles: list[Tile]) -> Move:
        return cls(MoveKind.EXCHANGE, list(tiles))

    @classmethod
    def pass_turn(cls) -> Move:
        return cls(MoveKind.PASS)

    @property
    def word(self) -> str:
        """Letters of the new tiles only."""
        return "".join(tile.face for tile in self.tiles)

    def copy(self) -> Move:
        return Move(self.kind, list(self.tiles), self.row, self.column, self.direction)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return (self.kind, self.tiles, self.row, self.column, self.direction) == (
            other.kind, other.tiles, other.row, other.column, other.direction)

    def __repr__(self) -> str:
        if self.kind is MoveKind.PASS:
            return "PASS"
        if self.kind is MoveKind.EXCHANGE:
            return f"EXCHANGE {self.word}"
        arrow = "→" if self.direction is Direction.ACROSS else "↓"
        return f"{self.word} at ({self.row},{self.column}) {arrow}"
