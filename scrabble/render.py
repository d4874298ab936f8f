"""Terminal rendering of the board, hands and results with rich."""

from __future__ import annotations

from rich import box
from rich.table import Table
from rich.text import Text

from scrabble.board import Board, Square
from scrabble.tiles import Hand, Tile

_TILE_STYLE = "bold black on wheat1"
_START_STYLE = "bold white on magenta"
_SQUARE_STYLES = {
    ("W", 3): "bold white on red3",
    ("W", 2): "bold white on orange3",
    ("L", 3): "bold white on blue3",
    ("L", 2): "bold white on deep_sky_blue3",
}


def _tile_text(tile: Tile) -> Text:
    label = tile.face.lower() if tile.is_blank else tile.face
    return Text(f"{label}{tile.points}", style=_TILE_STYLE)


def _square_text(square: Square, is_start: bool) -> Text:
    if square.tile is not None:
        return _tile_text(square.tile)
    if is_start:
        return Text(" ★", style=_START_STYLE)
    if square.word_multiplier > 1:
        return Text(f"W{square.word_multiplier}", style=_SQUARE_STYLES[("W", square.word_multiplier)])
    if square.letter_multiplier > 1:
        return Text(f"L{square.letter_multiplier}", style=_SQUARE_STYLES[("L", square.letter_multiplier)])
    return Text("")


def board_table(board: Board) -> Table:
    """The board as a grid, with 1-indexed row and column labels."""
    table = Table(box=box.SQUARE, show_lines=True, padding=(0, 0), header_style="bold cyan")
    table.add_column("", style="bold cyan", justify="right")
    for c in range(board.columns):
        table.add_column(str(c + 1), justify="center", width=3)
    for r in range(board.rows):
        cells = [_square_text(board.squares[r][c], (r, c) == board.start) for c in range(board.columns)]
        table.add_row(str(r + 1), *cells)
    return table


def hand_text(hand: Hand) -> Text:
    text = Text("Your hand: ", style="bold")
    for tile in hand:
        text.append_text(_tile_text(tile))
        text.append(" ")
    return text


def results_table(players) -> Table:
    """Final scores, highest first."""
    table = Table(title="Scores", box=box.HEAVY_EDGE)
    table.add_column("Player", style="bold magenta")
    table.add_column("Points", justify="right", style="green")
    for player in sorted(players, key=lambda p: p.points, reverse=True):
        table.add_row(player.name, str(player.points))
    return table
