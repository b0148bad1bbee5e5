"""GenerateService — strings, passwords, and identifiers.

Pipeline: BUILD REQUEST → GENERATE → ENCODE/HASH → RESPOND

Strings and passwords share the constrained generator. They differ only
in how the value is exposed: a string is its own ``id``; a password gets
the constant ``id`` ``"none"`` plus a bcrypt hash.
"""

from __future__ import annotations

import logging
from typing import Any

from randctl.domain.charsets import build_request
from randctl.domain.encoding import presentations, to_b64_url
from randctl.domain.errors import EntropyUnavailableError, InvalidConstraintError
from randctl.domain.generation import generate_string
from randctl.domain.identifiers import generate_identifier
from randctl.domain.models import IdentifierRequest
from randctl.infrastructure.entropy import MeteredEntropySource
from randctl.infrastructure.hashing import hash_password
from randctl.services.base import BaseService
from randctl.services.result import ServiceResult
from randctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

SENSITIVE_ID = "none"


class GenerateService(BaseService):
    """Produces fresh random values from the injected entropy source."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @traced
    def generate_string(
        self,
        length: int,
        *,
        numeric: bool = True,
        lower: bool = True,
        upper: bool = True,
        special: bool = True,
        min_numeric: int = 0,
        min_lower: int = 0,
        min_upper: int = 0,
        min_special: int = 0,
        override_special: str | None = None,
    ) -> ServiceResult:
        """Generate a non-sensitive random string."""
        op = "generate_string"
        knobs = _knobs(
            numeric, lower, upper, special, min_numeric, min_lower, min_upper, min_special,
            override_special,
        )
        value, failure = self._constrained(op, length, knobs)
        if failure is not None:
            return failure
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": value, "result": value, "length": length, **knobs},
        )

    @traced
    def generate_password(
        self,
        length: int,
        *,
        numeric: bool = True,
        lower: bool = True,
        upper: bool = True,
        special: bool = True,
        min_numeric: int = 0,
        min_lower: int = 0,
        min_upper: int = 0,
        min_special: int = 0,
        override_special: str | None = None,
    ) -> ServiceResult:
        """Generate a sensitive random string and its bcrypt hash."""
        op = "generate_password"
        knobs = _knobs(
            numeric, lower, upper, special, min_numeric, min_lower, min_upper, min_special,
            override_special,
        )
        value, failure = self._constrained(op, length, knobs)
        if failure is not None:
            return failure

        with trace_span("hash"):
            try:
                bcrypt_hash = hash_password(value, rounds=self._settings.password.bcrypt_rounds)
            except ValueError as exc:
                return ServiceResult.failure(op, "HASH_FAILED", f"Cannot hash password: {exc}")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": SENSITIVE_ID,
                "result": value,
                "bcrypt_hash": bcrypt_hash,
                "length": length,
                **knobs,
            },
        )

    @traced
    def generate_id(self, byte_length: int, *, prefix: str | None = None) -> ServiceResult:
        """Generate *byte_length* random bytes in every presentation format.

        ``id`` is the unprefixed URL-safe base64 form; the four
        presentations (``b64_url``, ``b64_std``, ``hex``, ``dec``) carry
        *prefix* verbatim.
        """
        op = "generate_id"
        metered = MeteredEntropySource(self._source)
        with trace_span("draw") as span:
            try:
                identifier = generate_identifier(IdentifierRequest(byte_length=byte_length), metered)
            except (InvalidConstraintError, EntropyUnavailableError) as exc:
                return self._domain_failure(op, exc)
            if span is not None:
                span.annotate("entropy_bytes", metered.bytes_read)

        logger.debug("Generated %d-byte identifier", byte_length)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": to_b64_url(identifier.data),
                "byte_length": byte_length,
                "prefix": prefix or None,
                **presentations(identifier.data, prefix or ""),
            },
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _constrained(
        self, op: str, length: int, knobs: dict[str, Any]
    ) -> tuple[str, ServiceResult | None]:
        """Run the constrained generator; return ``(value, failure)``."""
        special_chars = knobs["override_special"] or self._settings.charsets.special
        request = build_request(length, **{**knobs, "override_special": special_chars})
        metered = MeteredEntropySource(self._source)
        with trace_span("generate") as span:
            try:
                result = generate_string(request, metered)
            except (InvalidConstraintError, EntropyUnavailableError) as exc:
                return "", self._domain_failure(op, exc)
            if span is not None:
                span.annotate("entropy_bytes", metered.bytes_read)
                span.annotate("entropy_reads", metered.reads)

        logger.debug("Generated %s of length %d", op, length)
        return result.value, None


def _knobs(
    numeric: bool,
    lower: bool,
    upper: bool,
    special: bool,
    min_numeric: int,
    min_lower: int,
    min_upper: int,
    min_special: int,
    override_special: str | None,
) -> dict[str, Any]:
    """Echo the caller's knobs; an empty override is reported as None."""
    return {
        "numeric": numeric,
        "lower": lower,
        "upper": upper,
        "special": special,
        "min_numeric": min_numeric,
        "min_lower": min_lower,
        "min_upper": min_upper,
        "min_special": min_special,
        "override_special": override_special or None,
    }
