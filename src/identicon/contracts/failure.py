"""Contract failure types.

Contracts fail fast: the first broken invariant raises and nothing is
rendered or written afterwards. Every failure is a ContractViolation (or
a subclass), so callers can treat pipeline bugs uniformly.
"""


class ContractViolation(RuntimeError):
    """Raised when a pipeline contract is violated.

    This indicates a bug in pipeline logic, not bad user input. It means a
    stage did not produce the invariants it promised.

    Key distinction:
    - ValueError / TypeError: caller or config error (handled by Pydantic
      and argument checks)
    - ContractViolation: pipeline bug (programmer error)
    - OSError: persistence failure, surfaced to the caller unchanged
    """
    pass


class InsufficientData(ContractViolation):
    """Raised when the digest holds fewer bytes than a stage consumes.

    Unreachable with the built-in 16-byte digests; it guards against a
    substituted digest source that returns too little data.
    """
    pass
