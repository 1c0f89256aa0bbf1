"""Stage-boundary checks.

Every assert_* function is a list of require() calls, so all contract
failures go through one place.
"""

from typing import Type

from identicon.contracts.failure import ContractViolation


def require(condition: bool, message: str,
            error: Type[ContractViolation] = ContractViolation) -> None:
    """Raise `error(message)` unless `condition` holds.

    Parameters
    ----------
    condition : bool
        Invariant the preceding stage promised.
    message : str
        Names the stage contract and what was found instead.
    error : type, optional
        ContractViolation subclass to raise. The hash contract uses
        InsufficientData for a digest that is too short.

    Examples
    --------
    >>> require(image.color is not None, "Color contract violated: color not set")
    >>> require(len(digest) >= 16, "digest too short", error=InsufficientData)
    """
    if not condition:
        raise error(message)
