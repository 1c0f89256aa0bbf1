"""Identicon processing pipeline.

Runs one input through the pure stages, in fixed order:

    hash -> pick colour -> build grid -> filter odd squares -> pixel map

and checks each stage's contract before the next one starts.
"""

import logging
from typing import Optional, Union, TYPE_CHECKING

from identicon.image.descriptor import ImageDescriptor
from identicon.image.hasher import Hasher
from identicon.image.color_picker import pick_color
from identicon.image.grid_builder import build_grid
from identicon.image.square_filter import filter_odd_squares
from identicon.image.pixel_mapper import build_pixel_map
from identicon.contracts import (
    ContractViolation,
    assert_hashed,
    assert_colored,
    assert_gridded,
    assert_filtered,
    assert_pixel_mapped,
)

if TYPE_CHECKING:
    from identicon.schemas import InternalConfig

__all__ = ['IdenticonProcessor']

logger = logging.getLogger(__name__)


class IdenticonProcessor:
    """Computes the drawable model of an identicon from its input.

    **Processing Pipeline:**

    1. **Hash**: Digest the input (MD5 by default) into 16 bytes.

    2. **Colour**: The first three digest bytes become the RGB fill.

    3. **Grid**: Five triplets of the digest are mirrored into five rows
       ``[a, b, c, b, a]`` and numbered 0..24. The 16th byte is unused.

    4. **Filter**: Only even-valued cells are kept, with their original
       indices.

    5. **Pixel map**: Each kept index becomes a 50x50 rectangle on the
       250x250 canvas.

    The processor holds no per-input state; one instance can process any
    number of inputs, and each call returns a fresh descriptor.

    Example usage::

        processor = IdenticonProcessor(config)
        image = processor.process("banana")
        image.color, image.pixel_map
    """

    def __init__(self, config: Optional["InternalConfig"] = None,
                 hasher: Optional[Hasher] = None):
        """Initialize processor.

        Parameters
        ----------
        config : InternalConfig, optional
            Runtime configuration; selects the digest algorithm.
            Defaults to MD5 when omitted.

        hasher : Hasher, optional
            Explicit digest strategy. Takes precedence over config.
        """
        self.config = config
        if hasher is None:
            algorithm = config.hasher.algorithm if config is not None else "md5"
            hasher = Hasher(algorithm)
        self.hasher = hasher

    def process(self, value: Union[str, bytes]) -> ImageDescriptor:
        """Process one input: hash -> colour -> grid -> filter -> pixel map."""
        try:
            # Step 1: Hash
            image = self.hasher.hash_input(value)
            assert_hashed(image)

            # Step 2: Colour
            image = pick_color(image)
            assert_colored(image)

            # Step 3: Grid
            image = build_grid(image)
            assert_gridded(image)

            # Step 4: Filter
            image = filter_odd_squares(image)
            assert_filtered(image)

            # Step 5: Pixel map
            image = build_pixel_map(image)
            assert_pixel_mapped(image)

        except ContractViolation as e:
            logger.critical("Pipeline contract violated for %r: %s", value, e)
            raise

        logger.debug("Processed %r: color=%s, %d squares",
                     value, image.color, len(image.pixel_map))
        return image
