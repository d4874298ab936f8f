import io

import pytest
from rich.console import Console

from helpers import across
from scrabble.board import Board, Position


@pytest.fixture
def board():
    """Plain 15x15 board, start square at (7, 7)."""
    return Board(15, 15, Position(7, 7))


@pytest.fixture
def cat_board(board):
    """CAT played across row 7 from the start square."""
    result = board.place(across("CAT", 7, 7))
    assert result.valid
    return board


@pytest.fixture
def quiet_console():
    return Console(file=io.StringIO(), width=120)
