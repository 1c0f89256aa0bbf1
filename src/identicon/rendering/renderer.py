"""Identicon rasterization.

Renders filled, axis-aligned rectangles in one colour onto a square canvas
and encodes the result as PNG bytes. Two interchangeable backends:

- PillowRenderer: draws with PIL.ImageDraw (default)
- MatplotlibRenderer: fills a numpy canvas and encodes it with matplotlib

Rectangles use half-open pixel bounds: ((0, 0), (50, 50)) covers
columns and rows 0..49, so neighbouring cells never overlap.
"""

import io
import logging
from abc import ABC, abstractmethod
from typing import Iterable, Tuple, TYPE_CHECKING

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.image as mpimg
from PIL import Image, ImageDraw

if TYPE_CHECKING:
    from identicon.schemas import InternalConfig

__all__ = ['Renderer', 'PillowRenderer', 'MatplotlibRenderer', 'get_renderer']

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]
Rectangle = Tuple[Tuple[int, int], Tuple[int, int]]


class Renderer(ABC):
    """Turns a colour and a pixel map into encoded image bytes."""

    def __init__(self, background: RGB = (255, 255, 255)):
        self.background = tuple(background)

    @abstractmethod
    def render(self, size: int, color: RGB, rectangles: Iterable[Rectangle]) -> bytes:
        """Draw `rectangles` filled with `color` on a `size` x `size` canvas.

        Parameters
        ----------
        size : int
            Canvas edge in pixels (250 for identicons).
        color : tuple of int
            (r, g, b) fill colour.
        rectangles : iterable of ((x0, y0), (x1, y1))
            Top-left and bottom-right corners in pixels.

        Returns
        -------
        bytes
            PNG-encoded image.
        """


class PillowRenderer(Renderer):
    """Draws rectangles with PIL and encodes to PNG."""

    def render(self, size: int, color: RGB, rectangles: Iterable[Rectangle]) -> bytes:
        image = Image.new("RGB", (size, size), self.background)
        draw = ImageDraw.Draw(image)

        count = 0
        for (x0, y0), (x1, y1) in rectangles:
            # PIL includes the end coordinate
            draw.rectangle([x0, y0, x1 - 1, y1 - 1], fill=tuple(color))
            count += 1

        output = io.BytesIO()
        image.save(output, format="PNG")
        logger.debug("Rendered %d rectangles with Pillow (%dx%d)", count, size, size)
        return output.getvalue()


class MatplotlibRenderer(Renderer):
    """Fills a numpy canvas and encodes it with matplotlib's imsave."""

    def render(self, size: int, color: RGB, rectangles: Iterable[Rectangle]) -> bytes:
        canvas = np.empty((size, size, 3), dtype=np.uint8)
        canvas[:, :] = self.background

        count = 0
        for (x0, y0), (x1, y1) in rectangles:
            canvas[y0:y1, x0:x1] = color
            count += 1

        output = io.BytesIO()
        mpimg.imsave(output, canvas, format="png")
        logger.debug("Rendered %d rectangles with matplotlib (%dx%d)", count, size, size)
        return output.getvalue()


RENDERERS = {
    "pillow": PillowRenderer,
    "matplotlib": MatplotlibRenderer,
}


def get_renderer(config: "InternalConfig") -> Renderer:
    """Build the renderer selected by ``config.renderer.backend``."""
    backend = config.renderer.backend
    if backend not in RENDERERS:
        raise ValueError(f"Unknown renderer backend: {backend}")
    return RENDERERS[backend](background=config.renderer.background)
