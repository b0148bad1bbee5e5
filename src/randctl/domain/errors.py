"""Domain exceptions raised by the generators and the entropy contract.

Only two failure kinds exist inside the core:

- ``InvalidConstraintError``: the caller's request is inconsistent. Raised
  before any entropy is consumed for the offending step.
- ``EntropyUnavailableError``: the secure source failed or under-delivered.
  Never retried; the underlying cause is chained via ``__cause__``.

The service layer translates both into ``ServiceError`` payloads.
"""

from __future__ import annotations


class RandctlError(Exception):
    """Base class for every randctl domain error."""


class InvalidConstraintError(RandctlError):
    """A generation request cannot be satisfied as declared.

    Attributes:
        shortfall: How many characters the requested length is missing to
            fit the declared minimums, when that is the cause.
    """

    def __init__(self, message: str, *, shortfall: int | None = None) -> None:
        super().__init__(message)
        self.shortfall = shortfall


class EntropyUnavailableError(RandctlError):
    """The secure random source failed or returned fewer bytes than requested."""
