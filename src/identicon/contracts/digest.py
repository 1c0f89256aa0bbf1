"""Hash and colour stage contracts.

Enforces the guarantee that the digest has the fixed length and byte range
the grid depends on, and that the picked colour is a valid RGB triple
taken from the head of the digest.
"""

from typing import TYPE_CHECKING

from identicon.contracts.base import require
from identicon.contracts.failure import InsufficientData
from identicon.constants import DIGEST_SIZE

if TYPE_CHECKING:
    from identicon.image.descriptor import ImageDescriptor


def assert_hashed(image: "ImageDescriptor", digest_size: int = DIGEST_SIZE) -> None:
    """Enforce hash stage contract.

    Parameters
    ----------
    image : ImageDescriptor
        Descriptor returned by Hasher.hash_input()

    digest_size : int, optional
        Expected number of digest bytes (default: 16)

    Raises
    ------
    InsufficientData
        If the digest is shorter than digest_size
    ContractViolation
        If any other invariant is violated
    """
    digest = image.digest_bytes
    require(
        len(digest) >= digest_size,
        f"Hash contract violated: digest has {len(digest)} bytes, expected {digest_size}",
        error=InsufficientData,
    )
    require(
        len(digest) == digest_size,
        f"Hash contract violated: digest has {len(digest)} bytes, expected {digest_size}"
    )
    require(
        all(0 <= value <= 255 for value in digest),
        "Hash contract violated: digest values outside 0..255"
    )
    require(
        image.color is None and image.grid is None and image.pixel_map is None,
        "Hash contract violated: descriptor already carries derived fields"
    )


def assert_colored(image: "ImageDescriptor") -> None:
    """Enforce colour stage contract."""
    require(
        image.color is not None,
        "Color contract violated: color not set"
    )
    require(
        len(image.color) == 3,
        f"Color contract violated: {len(image.color)} components, expected 3"
    )
    require(
        all(0 <= c <= 255 for c in image.color),
        f"Color contract violated: components out of range {image.color}"
    )
    require(
        tuple(image.color) == tuple(image.digest_bytes[:3]),
        "Color contract violated: color does not match first three digest bytes"
    )
