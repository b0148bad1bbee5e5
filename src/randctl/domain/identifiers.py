"""Identifier byte generation: N raw random bytes, no category logic."""

from __future__ import annotations

from typing import TYPE_CHECKING

from randctl.domain.errors import InvalidConstraintError
from randctl.domain.models import IdentifierRequest, IdentifierResult

if TYPE_CHECKING:
    from randctl.domain.entropy import EntropySource


def generate_identifier(request: IdentifierRequest, source: EntropySource) -> IdentifierResult:
    """Draw ``request.byte_length`` bytes from *source*.

    A 16-byte identifier carries the same uniqueness as a type-4 UUID.

    Raises:
        InvalidConstraintError: If ``byte_length`` is less than 1.
        EntropyUnavailableError: If the source fails or under-delivers.
    """
    if request.byte_length < 1:
        raise InvalidConstraintError(f"byte_length must be >= 1, got {request.byte_length}")
    return IdentifierResult(data=source.random_bytes(request.byte_length))
