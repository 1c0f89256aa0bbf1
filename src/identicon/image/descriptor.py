"""ImageDescriptor: the single record threaded through the pipeline.

Each stage receives a descriptor and returns a new one with its field
filled in. Descriptors are frozen; nothing is shared between invocations.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

# (value, flat index) of one grid cell
GridEntry = tuple[int, int]
Point = tuple[int, int]
# (top_left, bottom_right) in canvas pixels
Rectangle = tuple[Point, Point]


class ImageDescriptor(BaseModel):
    """Immutable description of one identicon.

    Attributes
    ----------
    digest_bytes : tuple of int
        Digest of the input as unsigned bytes (0..255). Set by the Hasher.
    color : tuple of int, optional
        (r, g, b) fill colour. Set by pick_color().
    grid : tuple of (value, index), optional
        25 mirrored cells after build_grid(); only the even-valued cells
        after filter_odd_squares(). Indices always refer to the unfiltered
        5x5 layout.
    pixel_map : tuple of (top_left, bottom_right), optional
        One rectangle per grid entry. Set by build_pixel_map().
    """

    digest_bytes: tuple[int, ...]
    color: Optional[tuple[int, int, int]] = None
    grid: Optional[tuple[GridEntry, ...]] = None
    pixel_map: Optional[tuple[Rectangle, ...]] = None

    model_config = ConfigDict(
        extra='forbid',
        frozen=True,
    )
