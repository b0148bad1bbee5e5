"""ImportService — adopt values that were generated elsewhere.

Import never calls a generator. Every field is re-derived from the value
itself: a string's length and composition, an identifier's bytes.
"""

from __future__ import annotations

import logging
from typing import Any

from randctl.domain.charsets import count_categories
from randctl.domain.encoding import from_b64_url, presentations
from randctl.infrastructure.hashing import hash_password
from randctl.services.base import BaseService
from randctl.services.generate import SENSITIVE_ID
from randctl.services.result import ServiceResult
from randctl.services.telemetry import traced

logger = logging.getLogger(__name__)


class ImportService(BaseService):
    """Reconstructs the result shape of a previously generated value."""

    @traced
    def import_string(self, value: str) -> ServiceResult:
        """Import a non-sensitive string; it becomes its own ``id``."""
        op = "import_string"
        if not value:
            return ServiceResult.failure(op, "VALIDATION_FAILED", "Import value must not be empty")
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": value, "result": value, **self._string_shape(value)},
        )

    @traced
    def import_password(self, value: str) -> ServiceResult:
        """Import a password and compute a fresh bcrypt hash for it."""
        op = "import_password"
        if not value:
            return ServiceResult.failure(op, "VALIDATION_FAILED", "Import value must not be empty")
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
                **self._string_shape(value),
            },
        )

    @traced
    def import_id(self, import_id: str) -> ServiceResult:
        """Import an identifier given as ``b64url`` or ``prefix,b64url``.

        The prefix is everything before the LAST comma, so prefixes may
        themselves contain commas.
        """
        op = "import_id"
        prefix, sep, encoded = import_id.rpartition(",")
        if not sep:
            prefix = ""
        if not encoded:
            return ServiceResult.failure(
                op, "VALIDATION_FAILED", "Import ID must contain a base64 value"
            )
        try:
            data = from_b64_url(encoded)
        except ValueError as exc:
            return ServiceResult.failure(
                op,
                "IMPORT_DECODE_FAILED",
                "Cannot decode import ID as unpadded URL-safe base64",
                original_error=str(exc),
            )

        logger.debug("Imported %d-byte identifier", len(data))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": encoded,
                "byte_length": len(data),
                "prefix": prefix or None,
                **presentations(data, prefix),
            },
        )

    def _string_shape(self, value: str) -> dict[str, Any]:
        """Default knobs for an imported string, plus its observed composition."""
        return {
            "length": len(value),
            "numeric": True,
            "lower": True,
            "upper": True,
            "special": True,
            "min_numeric": 0,
            "min_lower": 0,
            "min_upper": 0,
            "min_special": 0,
            "override_special": None,
            "composition": count_categories(value, self._settings.charsets.special),
        }
