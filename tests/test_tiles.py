import pytest

from helpers import hand
from scrabble.bag import TileBag
from scrabble.errors import FileError
from scrabble.tiles import Hand, Tile


class TestTile:
    def test_blank_as_letter(self):
        blank = Tile("?", 0)
        s = blank.as_letter("s")
        assert s.is_blank
        assert s.face == "S"
        assert s.points == 0

    def test_only_blank_takes_a_letter(self):
        with pytest.raises(ValueError):
            Tile("Q", 10).as_letter("U")

    def test_face_of_plain_tile(self):
        assert Tile("Q", 10).face == "Q"


class TestHand:
    def test_lookup_absent_is_none(self):
        h = hand("CAT")
        assert h.lookup("Z") is None
        assert h.lookup("C") == Tile("C", 3)

    def test_remove_and_add(self):
        h = hand("AAB")
        h.remove(Tile("A", 1))
        assert h.count("A") == 1
        assert len(h) == 2
        h.add(Tile("A", 1))
        assert h.count("A") == 2

    def test_remove_missing_raises(self):
        h = hand("A")
        with pytest.raises(KeyError):
            h.remove(Tile("B", 3))

    def test_assigned_blank_returns_as_blank(self):
        h = Hand()
        h.add(Tile("?", 0, "E"))
        assert h.lookup("?") == Tile("?", 0)
        assert h.lookup("E") is None

    def test_copy_is_independent(self):
        h = hand("CAT")
        clone = h.copy()
        clone.remove(Tile("C", 3))
        assert h.count("C") == 1
        assert clone != h

    def test_iteration_is_sorted(self):
        assert hand("TAC?").letters() == "?ACT"

    def test_total_points(self):
        assert hand("QZ?").total_points() == 20


class TestTileBag:
    def test_standard_bag(self):
        bag = TileBag.standard()
        assert len(bag) == 100
        letters = "".join(t.letter for t in bag.tiles)
        assert letters.count("E") == 12
        assert letters.count("?") == 2

    def test_seeded_draws_repeat(self):
        a = TileBag.standard(seed=42).remove_random_tiles(7)
        b = TileBag.standard(seed=42).remove_random_tiles(7)
        assert a == b

    def test_draw_more_than_available(self):
        bag = TileBag([Tile("A", 1), Tile("B", 3)], seed=1)
        drawn = bag.remove_random_tiles(5)
        assert sorted(t.letter for t in drawn) == ["A", "B"]
        assert bag.count_tiles() == 0

    def test_returned_blank_is_unassigned(self):
        bag = TileBag([])
        bag.add_tile(Tile("?", 0, "Q"))
        assert bag.tiles == [Tile("?", 0)]

    def test_read(self, tmp_path):
        path = tmp_path / "bag.txt"
        path.write_text("a 1 3\nz 10 1\n? 5 2\n")
        bag = TileBag.read(str(path), seed=0)
        assert len(bag) == 6
        assert Tile("Z", 10) in bag.tiles
        assert Tile("?", 0) in bag.tiles

    def test_read_malformed(self, tmp_path):
        path = tmp_path / "bag.txt"
        path.write_text("A one 3\n")
        with pytest.raises(FileError):
            TileBag.read(str(path))

    def test_read_missing(self, tmp_path):
        with pytest.raises(FileError):
            TileBag.read(str(tmp_path / "missing.txt"))
