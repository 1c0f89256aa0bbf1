"""Rendering and persistence collaborators.

- renderer: Pixel map -> PNG bytes (Pillow or matplotlib)
- persister: PNG bytes -> file
"""

from identicon.rendering.renderer import (
    Renderer,
    PillowRenderer,
    MatplotlibRenderer,
    get_renderer,
)
from identicon.rendering.persister import FilePersister

__all__ = [
    'Renderer',
    'PillowRenderer',
    'MatplotlibRenderer',
    'get_renderer',
    'FilePersister',
]
