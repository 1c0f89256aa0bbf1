import pytest

from identicon.contracts import InsufficientData
from identicon.image.grid_builder import build_grid, chunk_every, mirror_row
from tests.helpers.fake_digest import EMPTY_MD5_ROWS, make_descriptor

pytestmark = pytest.mark.unit


class TestChunkEvery:

    def test_sixteen_bytes_give_five_triplets(self):
        chunks = chunk_every(list(range(16)), 3)
        assert chunks == [[0, 1, 2], [3, 4, 5], [6, 7, 8], [9, 10, 11], [12, 13, 14]]

    def test_incomplete_tail_is_dropped(self):
        assert chunk_every([1, 2, 3, 4, 5], 3) == [[1, 2, 3]]

    def test_exact_multiple_keeps_everything(self):
        assert chunk_every([1, 2, 3, 4, 5, 6], 3) == [[1, 2, 3], [4, 5, 6]]

    def test_short_input_gives_no_chunks(self):
        assert chunk_every([1, 2], 3) == []


class TestMirrorRow:

    def test_mirror_triplet(self):
        assert mirror_row([1, 2, 3]) == [1, 2, 3, 2, 1]

    def test_axis_appears_once(self):
        row = mirror_row([10, 20, 30])
        assert row.count(30) == 1
        assert len(row) == 5

    def test_input_not_mutated(self):
        row = [4, 5, 6]
        mirror_row(row)
        assert row == [4, 5, 6]

    def test_too_short_raises(self):
        with pytest.raises(InsufficientData):
            mirror_row([1])


class TestBuildGrid:

    def test_grid_matches_known_rows(self):
        image = build_grid(make_descriptor())
        flat = [value for row in EMPTY_MD5_ROWS for value in row]
        assert image.grid == tuple((value, index) for index, value in enumerate(flat))

    def test_grid_has_25_entries(self):
        image = build_grid(make_descriptor())
        assert len(image.grid) == 25

    def test_indices_are_positions(self):
        image = build_grid(make_descriptor())
        assert [index for _value, index in image.grid] == list(range(25))

    def test_rows_are_palindromes(self):
        image = build_grid(make_descriptor(digest=range(100, 116)))
        values = [value for value, _index in image.grid]
        for start in range(0, 25, 5):
            row = values[start:start + 5]
            assert row == row[::-1]

    def test_sixteenth_byte_is_ignored(self):
        a = build_grid(make_descriptor(digest=list(range(15)) + [0]))
        b = build_grid(make_descriptor(digest=list(range(15)) + [255]))
        assert a.grid == b.grid

    def test_other_digest_lengths_truncate(self):
        image = build_grid(make_descriptor(digest=range(20)))
        # 6 full triplets, 2 bytes dropped
        assert len(image.grid) == 30
