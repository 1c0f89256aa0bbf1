import pytest

from identicon.image.pixel_mapper import build_pixel_map
from tests.helpers.fake_digest import make_descriptor, make_full_grid

pytestmark = pytest.mark.unit


@pytest.mark.parametrize("index, expected", [
    (0, ((0, 0), (50, 50))),
    (4, ((200, 0), (250, 50))),
    (5, ((0, 50), (50, 100))),
    (7, ((100, 50), (150, 100))),
    (12, ((100, 100), (150, 150))),
    (24, ((200, 200), (250, 250))),
])
def test_index_to_rectangle(index, expected):
    image = build_pixel_map(make_descriptor(grid=((0, index),)))
    assert image.pixel_map == (expected,)


def test_one_rectangle_per_entry_in_order():
    grid = ((2, 13), (4, 1), (6, 20))
    image = build_pixel_map(make_descriptor(grid=grid))
    assert image.pixel_map == (
        ((150, 100), (200, 150)),
        ((50, 0), (100, 50)),
        ((0, 200), (50, 250)),
    )


def test_empty_grid_gives_empty_pixel_map():
    image = build_pixel_map(make_descriptor(grid=()))
    assert image.pixel_map == ()


def test_full_grid_covers_canvas():
    image = build_pixel_map(make_descriptor(grid=make_full_grid([0] * 25)))
    assert len(image.pixel_map) == 25
    top_lefts = {top_left for top_left, _bottom_right in image.pixel_map}
    assert top_lefts == {(x, y) for x in range(0, 250, 50) for y in range(0, 250, 50)}


def test_coordinates_are_python_ints():
    image = build_pixel_map(make_descriptor(grid=((0, 6),)))
    (top_left, bottom_right), = image.pixel_map
    assert all(type(c) is int for c in top_left + bottom_right)


def test_value_does_not_affect_position():
    a = build_pixel_map(make_descriptor(grid=((0, 8),)))
    b = build_pixel_map(make_descriptor(grid=((254, 8),)))
    assert a.pixel_map == b.pixel_map
