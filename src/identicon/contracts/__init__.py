"""Pipeline contracts: fail-fast enforcement of stage invariants.

This package enforces semantic guarantees between pipeline stages.
Contracts fail immediately and loudly when a stage doesn't produce
its promised invariants.

Key principle:
- Pydantic validates config correctness
- Contracts validate pipeline correctness
- The persister's OSError is the only runtime failure callers should expect
"""

from identicon.contracts.failure import ContractViolation, InsufficientData
from identicon.contracts.base import require
from identicon.contracts.digest import assert_hashed, assert_colored
from identicon.contracts.grid import assert_gridded, assert_filtered
from identicon.contracts.pixel_map import assert_pixel_mapped

__all__ = [
    "ContractViolation",
    "InsufficientData",
    "require",
    "assert_hashed",
    "assert_colored",
    "assert_gridded",
    "assert_filtered",
    "assert_pixel_mapped",
]
