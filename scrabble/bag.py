"""Tile bag.

Defines the standard tile distribution (how many of each letter exist in
the game and what each is worth) and the bag players draw from.  A bag can
also be read from a file with one ``letter points count`` triple per line.
"""

from __future__ import annotations

import logging
import random

from scrabble.constants import BLANK
from scrabble.errors import FileError
from scrabble.tiles import Tile

log = logging.getLogger("scrabble")

# ── Standard distribution ───────────────────────────────────────────────
# letter: (count, points).  Total: 100 tiles (98 lettered + 2 blanks).

TILE_DISTRIBUTION: dict[str, tuple[int, int]] = {
    "A": (9, 1),  "B": (2, 3),  "C": (2, 3),  "D": (4, 2),  "E": (12, 1),
    "F": (2, 4),  "G": (3, 2),  "H": (2, 4),  "I": (9, 1),  "J": (1, 8),
    "K": (1, 5),  "L": (4, 1),  "M": (2, 3),  "N": (6, 1),  "O": (8, 1),
    "P": (2, 3),  "Q": (1, 10), "R": (6, 1),  "S": (4, 1),  "T": (6, 1),
    "U": (4, 1),  "V": (2, 4),  "W": (2, 4),  "X": (1, 8),  "Y": (2, 4),
    "Z": (1, 10), BLANK: (2, 0),
}

TILE_VALUES: dict[str, int] = {letter: pts for letter, (_, pts) in TILE_DISTRIBUTION.items()}


class TileBag:
    """The tiles not yet drawn.  Draws are random but reproducible by seed."""

    def __init__(self, tiles: list[Tile], seed: int | None = None):
        self.tiles = list(tiles)
        self._rng = random.Random(seed)

    @classmethod
    def standard(cls, seed: int | None = None) -> TileBag:
        tiles: list[Tile] = []
        for letter, (count, points) in TILE_DISTRIBUTION.items():
            tiles.extend([Tile(letter, points)] * count)
        return cls(tiles, seed)

    @classmethod
    def read(cls, path: str, seed: int | None = None) -> TileBag:
        try:
            with open(path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except OSError as exc:
            raise FileError(f"cannot open tile bag file {path!r}") from exc

        tiles: list[Tile] = []
        for lineno, line in enumerate(lines, 1):
            parts = line.split()
            if not parts:
                continue
            try:
                letter, points, count = parts[0].upper(), int(parts[1]), int(parts[2])
            except (IndexError, ValueError) as exc:
                raise FileError(f"{path}:{lineno}: expected 'letter points count'") from exc
            if len(letter) != 1:
                raise FileError(f"{path}:{lineno}: bad tile letter {parts[0]!r}")
            tiles.extend([Tile(letter, 0 if letter == BLANK else points)] * count)

        log.info("Loaded %d tiles from %s", len(tiles), path)
        return cls(tiles, seed)

    def add_tile(self, tile: Tile) -> None:
        """Return a tile to the bag.  Blanks come back unassigned."""
        if tile.is_blank:
            tile = Tile(BLANK, 0)
        self.tiles.append(tile)

    def remove_random_tiles(self, n: int) -> list[Tile]:
        """Draw up to *n* tiles; fewer if the bag runs out."""
        drawn: list[Tile] = []
        for _ in range(min(n, len(self.tiles))):
            i = self._rng.randrange(len(self.tiles))
            drawn.append(self.tiles.pop(i))
        return drawn

    def count_tiles(self) -> int:
        return len(self.tiles)

    def __len__(self) -> int:
        return len(self.tiles)
