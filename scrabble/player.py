"""Players: the human at the keyboard and the computer opponent."""

from __future__ import annotations

import logging
from collections.abc import Callable

from scrabble.board import Board
from scrabble.commands import parse_move
from scrabble.constants import BLANK
from scrabble.dictionary import Dictionary
from scrabble.engine import MoveEngine
from scrabble.errors import MoveError
from scrabble.move import Move, MoveKind
from scrabble.tiles import Hand, Tile

log = logging.getLogger("scrabble.player")


class Player:
    """Name, score and hand shared by every kind of player."""

    def __init__(self, name: str, hand_size: int):
        self.name = name
        self.hand_size = hand_size
        self.hand = Hand()
        self.points = 0

    def is_human(self) -> bool:
        return False

    def get_move(self, board: Board, dictionary: Dictionary) -> Move:
        raise NotImplementedError

    def add_points(self, points: int) -> None:
        self.points += points

    def subtract_points(self, points: int) -> None:
        """Lose *points*, never dropping below zero."""
        self.points = max(0, self.points - points)

    def add_tiles(self, tiles: list[Tile]) -> None:
        for tile in tiles:
            self.hand.add(tile)

    def remove_tiles(self, tiles: list[Tile]) -> None:
        """Take *tiles* out of the hand, using a blank for any missing letter."""
        for tile in tiles:
            held = self.hand.lookup(tile.letter) or self.hand.lookup(BLANK)
            if held is None:
                raise MoveError("Error in tiles played")
            self.hand.remove(held)

    def count_tiles(self) -> int:
        return len(self.hand)

    def hand_value(self) -> int:
        return self.hand.total_points()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, points={self.points}, hand={self.hand.letters()!r})"


class HumanPlayer(Player):
    """Reads moves typed at the terminal and checks them before returning."""

    def __init__(self, name: str, hand_size: int, prompt: Callable[[str], str] = input):
        super().__init__(name, hand_size)
        self._prompt = prompt

    def is_human(self) -> bool:
        return True

    def get_move(self, board: Board, dictionary: Dictionary) -> Move:
        line = self._prompt(f"Enter your move, {self.name}: ")
        move = parse_move(line, self.hand)

        if move.kind is MoveKind.PLACE:
            if len(move.tiles) > self.hand_size:
                raise MoveError("Too many letters placed")
            result = board.test_place(move)
            if not result.valid:
                raise MoveError(str(result))
            bad = [w for w in result.words if not dictionary.is_word(w)]
            if bad:
                raise MoveError(f"Not in the dictionary: {', '.join(bad)}")
        elif move.kind is MoveKind.EXCHANGE and len(move.tiles) > self.hand_size:
            raise MoveError("Too many letters to swap")
        return move


class ComputerPlayer(Player):
    """Plays the highest-scoring move the engine can find."""

    def get_move(self, board: Board, dictionary: Dictionary) -> Move:
        move = MoveEngine(dictionary).get_move(board, self.hand, self.hand_size)
        log.info("%s plays %r", self.name, move)
        return move
