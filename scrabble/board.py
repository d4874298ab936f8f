"""Rectangular game board: geometry, anchors, and placement scoring."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NamedTuple

from scrabble.constants import DOUBLE_LETTER, DOUBLE_WORD, PLAIN_SQUARE, TRIPLE_LETTER
from scrabble.errors import FileError
from scrabble.tiles import Tile

if TYPE_CHECKING:
    from scrabble.move import Move

log = logging.getLogger("scrabble.board")


class Direction(enum.Enum):
    ACROSS = "-"
    DOWN = "|"

    @property
    def perpendicular(self) -> Direction:
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


class Position(NamedTuple):
    row: int
    column: int

    def translate(self, direction: Direction, distance: int = 1) -> Position:
        if direction is Direction.DOWN:
            return Position(self.row + distance, self.column)
        return Position(self.row, self.column + distance)


class Anchor(NamedTuple):
    """An empty square a word may be built through, with its prefix room."""

    position: Position
    direction: Direction
    limit: int


class Square:
    """One board square.  Multipliers are fixed; a tile is set at most once."""

    __slots__ = ("letter_multiplier", "word_multiplier", "tile")

    def __init__(self, letter_multiplier: int = 1, word_multiplier: int = 1):
        self.letter_multiplier = letter_multiplier
        self.word_multiplier = word_multiplier
        self.tile: Tile | None = None

    @classmethod
    def from_code(cls, code: str) -> Square:
        if code == PLAIN_SQUARE:
            return cls()
        if code == DOUBLE_LETTER:
            return cls(letter_multiplier=2)
        if code == TRIPLE_LETTER:
            return cls(letter_multiplier=3)
        if code == DOUBLE_WORD:
            return cls(word_multiplier=2)
        return cls(word_multiplier=3)

    def has_tile(self) -> bool:
        return self.tile is not None

    def set_tile(self, tile: Tile) -> None:
        if self.tile is not None:
            raise ValueError("square already holds a tile")
        self.tile = tile


class PlaceError(enum.Enum):
    OVERLAP = "overlap"
    NOT_VALID_PLACEMENT = "not valid placement"
    FIRST_MOVE_NOT_AT_START = "first move must be placed at start"
    OUT_OF_BOUNDS = "out of bounds"


@dataclass
class PlaceResult:
    """Outcome of checking a placement.

    ``words[0]`` is the word along the move's direction; the rest are the
    perpendicular words formed at newly placed tiles, in placement order.
    """

    valid: bool
    words: list[str] = field(default_factory=list)
    points: int = 0
    error: PlaceError | None = None

    @classmethod
    def failed(cls, error: PlaceError) -> PlaceResult:
        return cls(valid=False, error=error)

    def __str__(self) -> str:
        if not self.valid:
            return f"ERROR: {self.error.value}"
        return f"{', '.join(self.words)} for {self.points} pts"


class Board:
    """Grid of multiplier squares with a single start square."""

    def __init__(self, rows: int, columns: int, start: Position,
                 squares: list[list[Square]] | None = None):
        self.rows = rows
        self.columns = columns
        self.start = Position(*start)
        self.squares = squares or [[Square() for _ in range(columns)] for _ in range(rows)]
        if not self.is_in_bounds(self.start):
            raise ValueError(f"start square {self.start} is off the board")

    # loading

    @classmethod
    def parse(cls, text: str) -> Board:
        """Build a board from board-file text.

        The first four integers are ``rows columns start_row start_column``
        (start is 1-indexed); after that come ``rows * columns`` square
        codes, one character each.  Whitespace is ignored.
        """
        tokens = text.split()
        try:
            rows, columns, start_row, start_column = (int(t) for t in tokens[:4])
        except ValueError as exc:
            raise FileError("board header must be 'rows columns start_row start_column'") from exc
        codes = "".join(tokens[4:])
        if len(codes) != rows * columns:
            raise FileError(f"expected {rows * columns} squares, found {len(codes)}")

        squares = [
            [Square.from_code(codes[r * columns + c]) for c in range(columns)]
            for r in range(rows)
        ]
        try:
            return cls(rows, columns, Position(start_row - 1, start_column - 1), squares)
        except ValueError as exc:
            raise FileError(str(exc)) from exc

    @classmethod
    def read(cls, path: str) -> Board:
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
        except OSError as exc:
            raise FileError(f"cannot open board file {path!r}") from exc
        board = cls.parse(text)
        log.info("Loaded %dx%d board from %s", board.rows, board.columns, path)
        return board

    # queries

    def is_in_bounds(self, p: Position) -> bool:
        return 0 <= p.row < self.rows and 0 <= p.column < self.columns

    def at(self, p: Position) -> Square:
        return self.squares[p.row][p.column]

    def in_bounds_and_has_tile(self, p: Position) -> bool:
        return self.is_in_bounds(p) and self.at(p).has_tile()

    def letter_at(self, p: Position) -> str:
        """Letter on an occupied square (the assigned letter for a blank)."""
        return self.at(p).tile.face

    def is_board_empty(self) -> bool:
        """True until the start square is covered; every first move covers it."""
        return not self.at(self.start).has_tile()

    def count_tiles(self) -> int:
        return sum(1 for row in self.squares for square in row if square.has_tile())

    def _neighbours(self, p: Position):
        for direction in Direction:
            yield p.translate(direction, -1)
            yield p.translate(direction, 1)

    def _touches_tile(self, p: Position) -> bool:
        return any(self.in_bounds_and_has_tile(n) for n in self._neighbours(p))

    def _has_inline_tile(self, p: Position, direction: Direction) -> bool:
        return (self.in_bounds_and_has_tile(p.translate(direction, -1))
                or self.in_bounds_and_has_tile(p.translate(direction, 1)))

    # anchors

    def is_anchor_spot(self, p: Position) -> bool:
        if not self.is_in_bounds(p) or self.at(p).has_tile():
            return False
        if self._touches_tile(p):
            return True
        return p == self.start and not self.at(self.start).has_tile()

    def get_anchors(self) -> list[Anchor]:
        """Two anchors (DOWN, then ACROSS) per anchor square, row-major.

        An anchor's limit is the number of empty, non-anchor squares directly
        before it (above for DOWN, to the left for ACROSS).
        """
        anchors: list[Anchor] = []
        for r in range(self.rows):
            for c in range(self.columns):
                p = Position(r, c)
                if self.is_anchor_spot(p):
                    anchors.append(Anchor(p, Direction.DOWN, self._limit(p, Direction.DOWN)))
                    anchors.append(Anchor(p, Direction.ACROSS, self._limit(p, Direction.ACROSS)))
        return anchors

    def _limit(self, p: Position, direction: Direction) -> int:
        limit = 0
        q = p.translate(direction, -1)
        while self.is_in_bounds(q) and not self.at(q).has_tile() and not self.is_anchor_spot(q):
            limit += 1
            q = q.translate(direction, -1)
        return limit

    # placement

    def test_place(self, move: Move) -> PlaceResult:
        """Check *move* and score it without touching the board."""
        anchor = Position(move.row, move.column)
        if not self.is_in_bounds(anchor):
            return PlaceResult.failed(PlaceError.OUT_OF_BOUNDS)
        if self.at(anchor).has_tile():
            return PlaceResult.failed(PlaceError.OVERLAP)
        if not move.tiles:
            return PlaceResult.failed(PlaceError.NOT_VALID_PLACEMENT)

        placed = self._lay_out(anchor, move.direction, move.tiles)
        if placed is None:
            return PlaceResult.failed(PlaceError.OUT_OF_BOUNDS)

        direction = move.direction
        if len(placed) == 1 and not self._has_inline_tile(anchor, direction):
            # A lone tile can only extend a word running the other way.
            if not self._has_inline_tile(anchor, direction.perpendicular):
                return PlaceResult.failed(PlaceError.NOT_VALID_PLACEMENT)
            direction = direction.perpendicular

        if self.is_board_empty():
            if self.start not in placed:
                return PlaceResult.failed(PlaceError.FIRST_MOVE_NOT_AT_START)
        elif not any(self._touches_tile(p) for p in placed):
            return PlaceResult.failed(PlaceError.NOT_VALID_PLACEMENT)

        word, points = self._score_line(placed, anchor, direction)
        words = [word]
        cross = direction.perpendicular
        for p in placed:
            if self._has_inline_tile(p, cross):
                cross_word, cross_points = self._score_line(placed, p, cross)
                words.append(cross_word)
                points += cross_points
        return PlaceResult(valid=True, words=words, points=points)

    def place(self, move: Move) -> PlaceResult:
        """Validate *move* and, if legal, write its tiles onto the board."""
        result = self.test_place(move)
        if not result.valid:
            return result
        placed = self._lay_out(Position(move.row, move.column), move.direction, move.tiles)
        for p, tile in placed.items():
            self.at(p).set_tile(tile)
        log.debug("Placed %s at (%d,%d) %s: %s", move.word, move.row, move.column,
                  move.direction.name, result)
        return result

    def _lay_out(self, anchor: Position, direction: Direction,
                 tiles: list[Tile]) -> dict[Position, Tile] | None:
        """Assign each tile an empty square, skipping occupied ones.

        Returns None if the tiles run off the board.
        """
        placed: dict[Position, Tile] = {}
        p = anchor
        for tile in tiles:
            while self.in_bounds_and_has_tile(p):
                p = p.translate(direction)
            if not self.is_in_bounds(p):
                return None
            placed[p] = tile
            p = p.translate(direction)
        return placed

    def _score_line(self, placed: dict[Position, Tile], origin: Position,
                    direction: Direction) -> tuple[str, int]:
        """Read and score the full word through *origin* along *direction*.

        Multipliers only count under newly placed tiles; tiles already on the
        board score their face value.
        """
        def filled(p: Position) -> bool:
            return p in placed or self.in_bounds_and_has_tile(p)

        p = origin
        while filled(p.translate(direction, -1)):
            p = p.translate(direction, -1)

        letters: list[str] = []
        points = 0
        word_multiplier = 1
        while filled(p):
            square = self.at(p)
            tile = placed.get(p)
            if tile is not None:
                points += tile.points * square.letter_multiplier
                word_multiplier *= square.word_multiplier
            else:
                tile = square.tile
                points += tile.points
            letters.append(tile.face)
            p = p.translate(direction)
        return "".join(letters), points * word_multiplier
