"""Scrabble engine: board scoring, move generation and game loop."""

from scrabble.bag import TILE_DISTRIBUTION, TILE_VALUES, TileBag
from scrabble.board import Anchor, Board, Direction, PlaceError, PlaceResult, Position, Square
from scrabble.dictionary import Dictionary
from scrabble.engine import MoveEngine
from scrabble.errors import CommandError, FileError, MoveError, ScrabbleError
from scrabble.game import Game, GameConfig
from scrabble.move import Move, MoveKind
from scrabble.player import ComputerPlayer, HumanPlayer, Player
from scrabble.tiles import Hand, Tile
from scrabble.trie import Trie

__all__ = [
    "TILE_DISTRIBUTION",
    "TILE_VALUES",
    "Anchor",
    "Board",
    "CommandError",
    "ComputerPlayer",
    "Dictionary",
    "Direction",
    "FileError",
    "Game",
    "GameConfig",
    "Hand",
    "HumanPlayer",
    "Move",
    "MoveEngine",
    "MoveError",
    "MoveKind",
    "PlaceError",
    "PlaceResult",
    "Player",
    "Position",
    "ScrabbleError",
    "Square",
    "Tile",
    "TileBag",
    "Trie",
]
