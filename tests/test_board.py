"""Board geometry, anchors, placement checks and scoring."""

import pytest

from helpers import across, down, tiles
from scrabble.board import Anchor, Board, Direction, PlaceError, Position, Square
from scrabble.errors import FileError
from scrabble.move import Move

SMALL_BOARD = """\
5 5
3 3
.....
.....
.2d3x
.....
.....
"""


class TestGeometry:
    def test_translate(self):
        p = Position(3, 4)
        assert p.translate(Direction.ACROSS) == Position(3, 5)
        assert p.translate(Direction.DOWN, -2) == Position(1, 4)

    def test_perpendicular(self):
        assert Direction.ACROSS.perpendicular is Direction.DOWN
        assert Direction.DOWN.perpendicular is Direction.ACROSS

    def test_bounds(self, board):
        assert board.is_in_bounds(Position(0, 14))
        assert not board.is_in_bounds(Position(-1, 0))
        assert not board.is_in_bounds(Position(15, 0))

    def test_square_holds_one_tile(self):
        square = Square()
        square.set_tile(tiles("A")[0])
        with pytest.raises(ValueError):
            square.set_tile(tiles("B")[0])


class TestParse:
    def test_square_codes(self):
        board = Board.parse(SMALL_BOARD)
        assert (board.rows, board.columns) == (5, 5)
        assert board.start == Position(2, 2)
        row = board.squares[2]
        assert (row[0].letter_multiplier, row[0].word_multiplier) == (1, 1)
        assert row[1].letter_multiplier == 2
        assert row[2].word_multiplier == 2
        assert row[3].letter_multiplier == 3
        assert row[4].word_multiplier == 3

    def test_wrong_square_count(self):
        with pytest.raises(FileError):
            Board.parse("2 2 1 1\n..\n.")

    def test_bad_header(self):
        with pytest.raises(FileError):
            Board.parse("two 2 1 1\n....")

    def test_start_off_board(self):
        with pytest.raises(FileError):
            Board.parse("2 2 3 3\n....")

    def test_read_missing(self, tmp_path):
        with pytest.raises(FileError):
            Board.read(str(tmp_path / "board.txt"))

    def test_read(self, tmp_path):
        path = tmp_path / "board.txt"
        path.write_text(SMALL_BOARD)
        assert Board.read(str(path)).start == Position(2, 2)


class TestAnchors:
    def test_empty_board_only_start(self, board):
        assert board.get_anchors() == [
            Anchor(Position(7, 7), Direction.DOWN, 7),
            Anchor(Position(7, 7), Direction.ACROSS, 7),
        ]

    def test_anchor_squares_touch_tiles(self, cat_board):
        anchors = cat_board.get_anchors()
        assert len(anchors) == 16
        for anchor in anchors:
            p = anchor.position
            assert not cat_board.at(p).has_tile()
            assert any(
                cat_board.in_bounds_and_has_tile(p.translate(d, step))
                for d in Direction for step in (-1, 1)
            )

    def test_limits(self, cat_board):
        limits = {(a.position, a.direction): a.limit for a in cat_board.get_anchors()}
        # left of C: open row to the edge, open column above
        assert limits[(Position(7, 6), Direction.ACROSS)] == 6
        assert limits[(Position(7, 6), Direction.DOWN)] == 7
        # above A: the square to its left is itself an anchor
        assert limits[(Position(6, 8), Direction.ACROSS)] == 0
        assert limits[(Position(6, 8), Direction.DOWN)] == 6
        # right of T: word directly before it
        assert limits[(Position(7, 10), Direction.ACROSS)] == 0

    def test_start_not_anchor_once_covered(self, cat_board):
        assert not cat_board.is_anchor_spot(cat_board.start)


class TestPlacementRules:
    def test_first_move_scores(self, board):
        result = board.test_place(across("CAT", 7, 7))
        assert result.valid
        assert result.words == ["CAT"]
        assert result.points == 5

    def test_first_move_must_cover_start(self, board):
        result = board.test_place(across("CAT", 0, 0))
        assert not result.valid
        assert result.error is PlaceError.FIRST_MOVE_NOT_AT_START

    def test_single_tile_first_move(self, board):
        result = board.test_place(across("A", 7, 7))
        assert result.error is PlaceError.NOT_VALID_PLACEMENT

    def test_overlap(self, cat_board):
        result = cat_board.test_place(down("SO", 7, 8))
        assert result.error is PlaceError.OVERLAP

    def test_out_of_bounds(self, board):
        assert board.test_place(across("CAT", 7, 13)).error is PlaceError.OUT_OF_BOUNDS
        assert board.test_place(across("CAT", 7, -1)).error is PlaceError.OUT_OF_BOUNDS

    def test_empty_tile_list(self, cat_board):
        result = cat_board.test_place(Move.place([], 6, 7, Direction.ACROSS))
        assert result.error is PlaceError.NOT_VALID_PLACEMENT

    def test_disconnected(self, cat_board):
        result = cat_board.test_place(across("DOG", 0, 0))
        assert result.error is PlaceError.NOT_VALID_PLACEMENT

    def test_isolated_single_tile(self, cat_board):
        result = cat_board.test_place(down("S", 5, 9))
        assert result.error is PlaceError.NOT_VALID_PLACEMENT

    def test_single_tile_above_word(self, cat_board):
        result = cat_board.test_place(down("S", 6, 9))
        assert result.valid
        assert result.words == ["ST"]
        assert result.points == 2

    def test_single_tile_uses_perpendicular_word(self, cat_board):
        result = cat_board.test_place(across("S", 6, 9))
        assert result.valid
        assert result.words == ["ST"]
        assert result.points == 2

    def test_extend_word(self, cat_board):
        result = cat_board.test_place(across("S", 7, 10))
        assert result.valid
        assert result.words == ["CATS"]
        assert result.points == 6

    def test_play_through_existing_tiles(self, cat_board):
        result = cat_board.test_place(across("AS", 7, 6))
        assert result.valid
        assert result.words == ["ACATS"]
        assert result.points == 7

    def test_existing_prefix_counted(self, cat_board):
        result = cat_board.test_place(down("AT", 8, 7))
        assert result.words == ["CAT"]
        assert result.points == 5

    def test_cross_words(self, cat_board):
        result = cat_board.test_place(across("AT", 8, 8))
        assert result.valid
        assert result.words == ["AT", "AA", "TT"]
        assert result.points == 6

    def test_blank_scores_zero(self, cat_board):
        result = cat_board.test_place(across("s", 7, 10))
        assert result.words == ["CATS"]
        assert result.points == 5


class TestScoring:
    def test_multipliers_apply_once(self):
        board = Board.parse(SMALL_BOARD)
        first = board.place(across("CAT", 2, 1))
        # C on double letter, A on double word, T on triple letter
        assert first.points == (3 * 2 + 1 + 1 * 3) * 2

        again = board.test_place(across("S", 2, 4))
        # S on triple word; C, A and T score face value now
        assert again.words == ["CATS"]
        assert again.points == (3 + 1 + 1 + 1) * 3

    def test_existing_tile_scores_face_value(self):
        board = Board.parse(SMALL_BOARD)
        board.place(down("AT", 1, 2))
        result = board.test_place(across("AX", 2, 3))
        # T sits on the double word square but was placed earlier
        assert result.words == ["TAX"]
        assert result.points == (1 + 1 * 3 + 8) * 3

    def test_place_matches_test_place(self, cat_board):
        move = across("AT", 8, 8)
        expected = cat_board.test_place(move)
        assert cat_board.place(move) == expected
        assert cat_board.letter_at(Position(8, 9)) == "T"
        assert cat_board.count_tiles() == 5

    def test_invalid_place_leaves_board(self, cat_board):
        result = cat_board.place(across("DOG", 0, 0))
        assert not result.valid
        assert cat_board.count_tiles() == 3
        assert not cat_board.at(Position(0, 0)).has_tile()

    def test_tile_set_on_start_square_counts(self, board):
        board.at(board.start).set_tile(tiles("A")[0])
        assert not board.is_board_empty()
        assert board.count_tiles() == 1
        result = board.test_place(across("T", 7, 8))
        assert result.valid
        assert result.words == ["AT"]

    def test_letter_at_blank(self, board):
        board.place(across("CaT", 7, 7))
        assert board.letter_at(Position(7, 8)) == "A"
