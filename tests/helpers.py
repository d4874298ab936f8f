"""Shorthand for building tiles, hands and moves in tests."""

from scrabble.bag import TILE_VALUES
from scrabble.board import Direction
from scrabble.move import Move
from scrabble.tiles import Hand, Tile


def tiles(letters):
    """Tiles for *letters*; a lowercase letter is a blank playing that letter."""
    out = []
    for ch in letters:
        if ch.islower():
            out.append(Tile("?", 0, ch.upper()))
        else:
            out.append(Tile(ch, TILE_VALUES[ch]))
    return out


def hand(letters):
    return Hand.from_letters(letters, TILE_VALUES)


def across(letters, row, column):
    return Move.place(tiles(letters), row, column, Direction.ACROSS)


def down(letters, row, column):
    return Move.place(tiles(letters), row, column, Direction.DOWN)
