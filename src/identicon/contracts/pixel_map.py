"""Pixel map stage contract.

Enforces the guarantee that there is one 50x50, grid-aligned rectangle on
the 250x250 canvas per surviving grid entry.
"""

from typing import TYPE_CHECKING

import numpy as np

from identicon.contracts.base import require
from identicon.constants import CANVAS_SIZE, CELL_SIZE

if TYPE_CHECKING:
    from identicon.image.descriptor import ImageDescriptor


def assert_pixel_mapped(image: "ImageDescriptor") -> None:
    """Enforce pixel map stage contract.

    Parameters
    ----------
    image : ImageDescriptor
        Descriptor returned by build_pixel_map()

    Raises
    ------
    ContractViolation
        If any invariant is violated
    """
    require(
        image.pixel_map is not None,
        "Pixel map contract violated: pixel_map not set"
    )
    require(
        image.grid is not None and len(image.pixel_map) == len(image.grid),
        "Pixel map contract violated: one rectangle per grid entry expected"
    )

    # An empty pixel map is a valid result (every value was odd)
    if not image.pixel_map:
        return

    # shape (n, 2, 2): rectangle, corner, axis
    corners = np.array(image.pixel_map, dtype=np.int64)
    require(
        corners.shape[1:] == (2, 2),
        f"Pixel map contract violated: rectangles have shape {corners.shape[1:]}, expected (2, 2)"
    )
    require(
        corners.min() >= 0 and corners.max() <= CANVAS_SIZE,
        f"Pixel map contract violated: coordinates outside 0..{CANVAS_SIZE}"
    )
    require(
        bool(np.all(corners % CELL_SIZE == 0)),
        f"Pixel map contract violated: coordinates not multiples of {CELL_SIZE}"
    )
    require(
        bool(np.all(corners[:, 1] - corners[:, 0] == CELL_SIZE)),
        f"Pixel map contract violated: rectangles are not {CELL_SIZE}x{CELL_SIZE}"
    )
