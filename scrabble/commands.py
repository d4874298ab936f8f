"""Parsing of typed commands into moves.

Grammar (case-insensitive)::

    PLACE <-|"|"> <row> <col> <letters>   row/col are 1-indexed;
                                           "?x" plays a blank as x
    EXCHANGE <letters>
    PASS
"""

from __future__ import annotations

from collections import Counter

from scrabble.board import Direction
from scrabble.constants import BLANK
from scrabble.errors import CommandError, MoveError
from scrabble.move import Move
from scrabble.tiles import Hand, Tile


def parse_move(line: str, hand: Hand) -> Move:
    """Turn one line of input into a Move using tiles from *hand*.

    Raises CommandError if the line is malformed and MoveError if it asks for
    tiles the hand does not hold.
    """
    parts = line.split()
    if not parts:
        raise CommandError("Invalid command")
    verb = parts[0].upper()

    if verb == "PASS":
        if len(parts) != 1:
            raise CommandError("PASS takes no arguments")
        return Move.pass_turn()

    if verb == "EXCHANGE":
        if len(parts) != 2:
            raise CommandError("usage: EXCHANGE <letters>")
        letters = parts[1].upper()
        _check_held(Counter(letters), hand)
        return Move.exchange([hand.lookup(ch) for ch in letters])

    if verb == "PLACE":
        if len(parts) != 5:
            raise CommandError("usage: PLACE <-|\"|\"> <row> <col> <letters>")
        try:
            direction = Direction(parts[1])
        except ValueError:
            raise CommandError(f"direction must be '-' or '|', not {parts[1]!r}") from None
        try:
            row, column = int(parts[2]) - 1, int(parts[3]) - 1
        except ValueError:
            raise CommandError("row and column must be numbers") from None
        tiles = parse_tiles(parts[4], hand)
        return Move.place(tiles, row, column, direction)

    raise CommandError(f"Unknown command {parts[0]!r}")


def parse_tiles(letters: str, hand: Hand) -> list[Tile]:
    """Tiles for a PLACE string such as ``"c?At"``; ``?a`` is a blank as A."""
    letters = letters.upper()
    kinds: list[str] = []
    faces: list[str] = []
    i = 0
    while i < len(letters):
        ch = letters[i]
        if ch == BLANK:
            if i + 1 >= len(letters) or not letters[i + 1].isalpha():
                raise CommandError("'?' must be followed by the letter it stands for")
            kinds.append(BLANK)
            faces.append(letters[i + 1])
            i += 2
            continue
        if not ch.isalpha():
            raise CommandError(f"bad letter {ch!r}")
        kinds.append(ch)
        faces.append(ch)
        i += 1

    _check_held(Counter(kinds), hand)
    tiles: list[Tile] = []
    for kind, face in zip(kinds, faces):
        held = hand.lookup(kind)
        tiles.append(held.as_letter(face) if kind == BLANK else held)
    return tiles


def _check_held(needed: Counter, hand: Hand) -> None:
    for letter, n in needed.items():
        if hand.count(letter) < n:
            raise MoveError(f"Invalid move, tile {letter!r} not found in your hand")
