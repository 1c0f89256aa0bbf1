import logging
from typing import Sequence

from identicon.constants import ROW_SEED
from identicon.contracts.failure import InsufficientData
from identicon.image.descriptor import ImageDescriptor

logger = logging.getLogger(__name__)


def chunk_every(values: Sequence[int], size: int = ROW_SEED) -> list[list[int]]:
    """Split into consecutive groups of `size`, dropping an incomplete tail.

    For a 16-byte digest this yields 5 triplets; the 16th byte is dropped.
    """
    complete = len(values) - len(values) % size
    return [list(values[i:i + size]) for i in range(0, complete, size)]


def mirror_row(row: Sequence[int]) -> list[int]:
    """Mirror [a, b, c] into [a, b, c, b, a].

    The third value is the axis and appears once.
    """
    if len(row) < 2:
        raise InsufficientData(f"Cannot mirror a row of {len(row)} values")

    first, second = row[0], row[1]
    return list(row) + [second, first]


def build_grid(image: ImageDescriptor) -> ImageDescriptor:
    """Turn the digest into (value, index) pairs for the mirrored 5x5 grid."""
    rows = [mirror_row(chunk) for chunk in chunk_every(image.digest_bytes)]
    flat = [value for row in rows for value in row]
    grid = tuple((value, index) for index, value in enumerate(flat))

    dropped = len(image.digest_bytes) % ROW_SEED
    logger.debug("Grid built: %d rows, %d cells, %d digest byte(s) unused",
                 len(rows), len(grid), dropped)

    return image.model_copy(update={"grid": grid})
