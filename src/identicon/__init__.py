"""`Identicon` - deterministic 5x5 visual identifiers from an input string.

Subpackages:
- image: Hashing, colour, grid, filter and pixel-map stages
- contracts: Stage invariants (fail fast)
- pipeline: Processor and orchestrator
- rendering: PNG renderers and file persister
- schemas: Pydantic configuration
- cli: Command-line entry point
"""

__version__ = "0.1.0"
