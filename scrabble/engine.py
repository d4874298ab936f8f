"""Move engine: anchor-based generation with trie pruning."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from collections.abc import Iterator

from scrabble.board import Anchor, Board, Direction, Position
from scrabble.constants import BLANK
from scrabble.dictionary import Dictionary
from scrabble.move import Move
from scrabble.tiles import Hand, Tile

log = logging.getLogger("scrabble.engine")


class _Search:
    """State for the search through one anchor.

    Owns a private hand and a single partial move.  Every change made on the
    way down is undone on the way back up, so after :meth:`run` both are
    exactly as they started.
    """

    def __init__(self, board: Board, dictionary: Dictionary, hand: Hand,
                 anchor: Anchor, moves: list[Move]):
        self.board = board
        self.trie = dictionary.trie
        self.hand = hand
        self.anchor = anchor
        self.step = anchor.direction
        self.moves = moves
        self.partial = Move.place([], anchor.position.row, anchor.position.column, anchor.direction)

    def run(self) -> None:
        if self.anchor.limit > 0:
            self.left_part(self.trie.root, self.anchor.limit)
            return
        prefix = self._board_prefix()
        node = self.trie.find_prefix(prefix)
        if node is not None:
            self.extend_right(self.anchor.position, node)

    def left_part(self, node: int, limit: int) -> None:
        """Build every prefix of up to *limit* tiles before the anchor."""
        self.extend_right(self.anchor.position, node)
        if limit == 0:
            return
        for letter, child in self.trie.children(node).items():
            choice = self._take(letter)
            if choice is None:
                continue
            with self._placed(*choice, prefix=True):
                self.left_part(child, limit - 1)

    def extend_right(self, square: Position, node: int) -> None:
        """Extend the current partial word through *square* and beyond."""
        if self.trie.is_terminal(node) and self._past_anchor(square):
            self.moves.append(self.partial.copy())

        if not self.board.is_in_bounds(square) or self.trie.is_leaf(node):
            return

        if self.board.at(square).has_tile():
            child = self.trie.child(node, self.board.letter_at(square))
            if child is not None:
                self.extend_right(square.translate(self.step), child)
            return

        for letter, child in self.trie.children(node).items():
            choice = self._take(letter)
            if choice is None:
                continue
            with self._placed(*choice, prefix=False):
                self.extend_right(square.translate(self.step), child)

    # helpers

    def _take(self, letter: str) -> tuple[Tile, Tile] | None:
        """(tile leaving the hand, tile going on the board) for *letter*."""
        held = self.hand.lookup(letter)
        if held is not None:
            return held, held
        blank = self.hand.lookup(BLANK)
        if blank is not None:
            return blank, blank.as_letter(letter)
        return None

    @contextmanager
    def _placed(self, held: Tile, tile: Tile, prefix: bool) -> Iterator[None]:
        self.hand.remove(held)
        self.partial.tiles.append(tile)
        if prefix:
            self._shift(-1)
        try:
            yield
        finally:
            if prefix:
                self._shift(1)
            self.partial.tiles.pop()
            self.hand.add(held)

    def _shift(self, distance: int) -> None:
        if self.step is Direction.DOWN:
            self.partial.row += distance
        else:
            self.partial.column += distance

    def _past_anchor(self, square: Position) -> bool:
        anchor = self.anchor.position
        if self.step is Direction.DOWN:
            return square.row > anchor.row
        return square.column > anchor.column

    def _board_prefix(self) -> str:
        """Letters already on the board directly before the anchor."""
        letters: list[str] = []
        p = self.anchor.position.translate(self.step, -1)
        while self.board.in_bounds_and_has_tile(p):
            letters.append(self.board.letter_at(p))
            p = p.translate(self.step, -1)
        return "".join(reversed(letters))


class MoveEngine:
    """Finds legal moves using anchor-based generation with trie pruning
    (the Appel-Jacobson left-part / extend-right search)."""

    def __init__(self, dictionary: Dictionary):
        self.dict = dictionary

    # public API

    def get_move(self, board: Board, hand: Hand, hand_size: int | None = None) -> Move:
        """Best-scoring legal move for *hand*, or PASS.  *hand* is not modified."""
        candidates = self.generate_moves(board, hand, hand_size)
        return self.get_best_move(board, candidates)

    def generate_moves(self, board: Board, hand: Hand, hand_size: int | None = None) -> list[Move]:
        """Every candidate placement through every anchor, in anchor order."""
        if hand_size is None:
            hand_size = len(hand)
        moves: list[Move] = []
        anchors = board.get_anchors()
        log.debug("%d anchors", len(anchors))
        for anchor in anchors:
            if anchor.position == board.start and board.is_board_empty():
                anchor = anchor._replace(limit=max(hand_size - 1, 0))
            _Search(board, self.dict, hand.copy(), anchor, moves).run()
        log.debug("%d candidate moves for hand %s", len(moves), hand.letters())
        return moves

    def get_best_move(self, board: Board, candidates: list[Move]) -> Move:
        """Highest-scoring candidate whose words are all in the dictionary.

        Candidates placing fewer than two tiles are skipped.  Ties go to the
        earliest candidate.  On an empty board the chosen tiles are played
        across from the start square.
        """
        best: Move | None = None
        best_points = 0
        for move in candidates:
            if len(move.tiles) < 2:
                continue
            result = board.test_place(move)
            if not result.valid or not all(self.dict.is_word(w) for w in result.words):
                continue
            if best is None or result.points > best_points:
                best, best_points = move, result.points

        if best is None:
            log.debug("No playable candidate; passing")
            return Move.pass_turn()
        if board.is_board_empty():
            best = Move.place(best.tiles, board.start.row, board.start.column, Direction.ACROSS)
        log.debug("Best move %r for %d pts", best, best_points)
        return best
