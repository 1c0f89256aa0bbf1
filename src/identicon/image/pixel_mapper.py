import logging

import numpy as np

from identicon.constants import CELL_SIZE, GRID_SIZE
from identicon.image.descriptor import ImageDescriptor

logger = logging.getLogger(__name__)


def build_pixel_map(image: ImageDescriptor) -> ImageDescriptor:
    """Compute one (top_left, bottom_right) rectangle per grid entry.

    Column is ``index % 5`` and row is ``index // 5`` on the unfiltered
    grid, scaled by the 50 px cell size. Output order follows the grid.
    """
    indices = np.array([index for _value, index in image.grid], dtype=np.int64)

    if indices.size == 0:
        logger.debug("Pixel map empty: no even cells")
        return image.model_copy(update={"pixel_map": ()})

    rows, columns = np.divmod(indices, GRID_SIZE)
    left = columns * CELL_SIZE
    top = rows * CELL_SIZE

    pixel_map = tuple(
        ((x, y), (x + CELL_SIZE, y + CELL_SIZE))
        for x, y in zip(left.tolist(), top.tolist())
    )
    logger.debug("Pixel map built: %d rectangles", len(pixel_map))

    return image.model_copy(update={"pixel_map": pixel_map})
