"""Grid and filter stage contracts.

Enforces the guarantee that the mirrored grid has five palindromic rows of
five cells with flat indices 0..24, and that filtering only removes entries
(never renumbers them).
"""

from typing import TYPE_CHECKING

import numpy as np

from identicon.contracts.base import require
from identicon.constants import GRID_CELLS, GRID_SIZE

if TYPE_CHECKING:
    from identicon.image.descriptor import ImageDescriptor


def assert_gridded(image: "ImageDescriptor") -> None:
    """Enforce grid stage contract.

    Called immediately after build_grid(). Verifies the full 5x5 grid
    before any filtering.

    Parameters
    ----------
    image : ImageDescriptor
        Descriptor returned by build_grid()

    Raises
    ------
    ContractViolation
        If any invariant is violated
    """
    require(
        image.grid is not None,
        "Grid contract violated: grid not set"
    )
    require(
        len(image.grid) == GRID_CELLS,
        f"Grid contract violated: {len(image.grid)} entries, expected {GRID_CELLS}"
    )

    indices = [index for _value, index in image.grid]
    require(
        indices == list(range(GRID_CELLS)),
        "Grid contract violated: indices are not 0..24 in order"
    )

    # Every row must read the same left to right and right to left
    values = np.array([value for value, _index in image.grid]).reshape(GRID_SIZE, GRID_SIZE)
    require(
        np.array_equal(values, values[:, ::-1]),
        "Grid contract violated: rows are not mirrored"
    )


def assert_filtered(image: "ImageDescriptor") -> None:
    """Enforce filter stage contract.

    Raises
    ------
    ContractViolation
        If an odd value survived, or indices were renumbered or reordered
    """
    require(
        image.grid is not None,
        "Filter contract violated: grid not set"
    )
    require(
        len(image.grid) <= GRID_CELLS,
        f"Filter contract violated: {len(image.grid)} entries, expected at most {GRID_CELLS}"
    )
    require(
        all(value % 2 == 0 for value, _index in image.grid),
        "Filter contract violated: odd values survived filtering"
    )

    indices = np.array([index for _value, index in image.grid], dtype=np.int64)
    if indices.size:
        require(
            indices.min() >= 0 and indices.max() < GRID_CELLS,
            f"Filter contract violated: indices outside 0..{GRID_CELLS - 1}"
        )
        require(
            bool(np.all(np.diff(indices) > 0)),
            "Filter contract violated: indices not strictly increasing"
        )
