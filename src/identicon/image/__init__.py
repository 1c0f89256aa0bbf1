"""Identicon image stages, in pipeline order.

- hasher: Input -> 16 digest bytes
- color_picker: First three bytes -> RGB
- grid_builder: Triplets -> mirrored 5x5 (value, index) grid
- square_filter: Keep even cells
- pixel_mapper: Grid index -> canvas rectangle
"""

from identicon.image.descriptor import ImageDescriptor
from identicon.image.hasher import Hasher, DIGEST_ALGORITHMS
from identicon.image.color_picker import pick_color
from identicon.image.grid_builder import build_grid, mirror_row, chunk_every
from identicon.image.square_filter import filter_odd_squares
from identicon.image.pixel_mapper import build_pixel_map

__all__ = [
    "ImageDescriptor",
    "Hasher",
    "DIGEST_ALGORITHMS",
    "pick_color",
    "build_grid",
    "mirror_row",
    "chunk_every",
    "filter_odd_squares",
    "build_pixel_map",
]
