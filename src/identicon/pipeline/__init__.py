"""Pipeline modules.

- processor: Pure hash-to-pixel-map stages with contract checks
- orchestrator: Render and persist, logging setup, generate()
"""

from identicon.pipeline.processor import IdenticonProcessor
from identicon.pipeline.orchestrator import IdenticonPipeline, generate, setup_logging

__all__ = [
    "IdenticonProcessor",
    "IdenticonPipeline",
    "generate",
    "setup_logging",
]
