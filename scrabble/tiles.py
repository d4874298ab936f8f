"""Tiles and the hand of tiles a player (or a search) draws from."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from scrabble.constants import BLANK


@dataclass(frozen=True)
class Tile:
    """A single tile.  A blank carries the letter it stands for in *assigned*."""

    letter: str
    points: int
    assigned: str | None = None

    @property
    def is_blank(self) -> bool:
        return self.letter == BLANK

    @property
    def face(self) -> str:
        """The letter this tile reads as on the board."""
        return self.assigned if self.assigned is not None else self.letter

    def as_letter(self, letter: str) -> Tile:
        """This blank, assigned to *letter* and worth nothing."""
        if not self.is_blank:
            raise ValueError(f"only a blank can stand for another letter, not {self.letter!r}")
        return Tile(BLANK, 0, letter.upper())

    def __repr__(self) -> str:
        if self.is_blank and self.assigned:
            return f"?{self.assigned}"
        return f"{self.letter}({self.points})"


class Hand:
    """Multiset of tiles keyed by letter.  Blanks live under ``"?"``."""

    __slots__ = ("_kinds", "_counts")

    def __init__(self, tiles: Iterable[Tile] = ()):
        self._kinds: dict[str, Tile] = {}
        self._counts: Counter[str] = Counter()
        for tile in tiles:
            self.add(tile)

    @classmethod
    def from_letters(cls, letters: str, points: Mapping[str, int]) -> Hand:
        """Build a hand from a string such as ``"CAT?"``."""
        return cls(Tile(ch, 0 if ch == BLANK else points[ch]) for ch in letters.upper())

    def lookup(self, letter: str) -> Tile | None:
        """The held tile for *letter*, or None when there is none."""
        if self._counts[letter] > 0:
            return self._kinds[letter]
        return None

    def add(self, tile: Tile) -> None:
        if tile.is_blank:
            tile = Tile(BLANK, 0)
        self._kinds.setdefault(tile.letter, tile)
        self._counts[tile.letter] += 1

    def remove(self, tile: Tile) -> None:
        """Remove one tile of *tile*'s kind.  Raises KeyError if none is held."""
        if self._counts[tile.letter] <= 0:
            raise KeyError(tile.letter)
        self._counts[tile.letter] -= 1
        if not self._counts[tile.letter]:
            del self._counts[tile.letter]

    def count(self, letter: str | None = None) -> int:
        if letter is None:
            return sum(self._counts.values())
        return self._counts[letter]

    def total_points(self) -> int:
        return sum(self._kinds[letter].points * n for letter, n in self._counts.items())

    def copy(self) -> Hand:
        clone = Hand()
        clone._kinds = dict(self._kinds)
        clone._counts = Counter(self._counts)
        return clone

    def letters(self) -> str:
        return "".join(tile.letter for tile in self)

    def __iter__(self) -> Iterator[Tile]:
        for letter in sorted(self._counts):
            for _ in range(self._counts[letter]):
                yield self._kinds[letter]

    def __len__(self) -> int:
        return self.count()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return +self._counts == +other._counts

    def __repr__(self) -> str:
        return f"Hand({self.letters()!r})"
