"""Constrained random string generation.

Pipeline: VALIDATE → DRAW MINIMUMS → DRAW OPTIONAL → PERMUTE

Each stage is a plain function so it can be exercised on its own.
:func:`generate_string` chains them.

INVARIANT: validation completes before the first entropy read, so an
inconsistent request never consumes the source.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from randctl.domain.errors import InvalidConstraintError
from randctl.domain.models import GenerationRequest, GenerationResult

if TYPE_CHECKING:
    from randctl.domain.entropy import EntropySource

logger = logging.getLogger(__name__)


def validate_request(request: GenerationRequest) -> None:
    """Reject requests that cannot be satisfied.

    Raises:
        InvalidConstraintError: On a non-positive length, a negative
            minimum, a required category with an empty charset, an unknown
            enabled category, a length shorter than the sum of minimums, or
            an empty optional pool while optional characters are needed.
    """
    if request.length < 1:
        raise InvalidConstraintError(f"length must be >= 1, got {request.length}")

    names = {category.name for category in request.categories}
    unknown = sorted(request.enabled - names)
    if unknown:
        raise InvalidConstraintError(f"enabled categories are not declared: {', '.join(unknown)}")

    for category in request.categories:
        if category.minimum < 0:
            raise InvalidConstraintError(
                f"minimum for {category.name!r} must be >= 0, got {category.minimum}"
            )
        if category.minimum > 0 and not category.charset:
            raise InvalidConstraintError(
                f"category {category.name!r} requires {category.minimum} characters "
                "but its charset is empty"
            )

    required = request.required
    if request.length < required:
        shortfall = required - request.length
        raise InvalidConstraintError(
            f"length ({request.length}) must be >= sum of minimums ({required}); "
            f"short by {shortfall}",
            shortfall=shortfall,
        )

    if request.length > required and not optional_pool(request):
        raise InvalidConstraintError(
            f"{request.length - required} characters are needed beyond the minimums "
            "but no category is enabled"
        )


def optional_pool(request: GenerationRequest) -> str:
    """Concatenate the charsets of every enabled category, in declared order."""
    return "".join(
        category.charset for category in request.categories if category.name in request.enabled
    )


def draw_from(charset: str, count: int, source: EntropySource) -> list[str]:
    """Draw *count* characters independently and uniformly from *charset*."""
    bound = len(charset)
    return [charset[source.random_index(bound)] for _ in range(count)]


def draw_minimums(request: GenerationRequest, source: EntropySource) -> list[str]:
    """Draw exactly ``minimum`` characters from each category that has one."""
    drawn: list[str] = []
    for category in request.categories:
        if category.minimum > 0:
            drawn.extend(draw_from(category.charset, category.minimum, source))
    return drawn


def draw_optional(request: GenerationRequest, source: EntropySource) -> list[str]:
    """Fill the remaining length from the optional pool."""
    remaining = request.length - request.required
    if remaining <= 0:
        return []
    return draw_from(optional_pool(request), remaining, source)


def permute(chars: list[str], source: EntropySource) -> list[str]:
    """Return a uniformly shuffled copy of *chars* (Fisher–Yates).

    Swap indices come from ``source.random_index`` so every permutation
    is equally likely; required characters end up anywhere in the output.
    """
    shuffled = list(chars)
    for i in range(len(shuffled) - 1, 0, -1):
        j = source.random_index(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def generate_string(request: GenerationRequest, source: EntropySource) -> GenerationResult:
    """Generate a string satisfying every constraint in *request*.

    Raises:
        InvalidConstraintError: From :func:`validate_request`.
        EntropyUnavailableError: Propagated verbatim from *source*.
    """
    validate_request(request)
    required = draw_minimums(request, source)
    optional = draw_optional(request, source)
    logger.debug(
        "Drew %d required and %d optional characters",
        len(required),
        len(optional),
    )
    return GenerationResult(value="".join(permute(required + optional, source)))
