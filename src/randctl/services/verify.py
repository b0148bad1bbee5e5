"""VerifyService — check a password against a stored bcrypt hash."""

from __future__ import annotations

from randctl.infrastructure.hashing import check_password
from randctl.services.base import BaseService
from randctl.services.result import ServiceResult
from randctl.services.telemetry import traced


class VerifyService(BaseService):
    @traced
    def verify_password(self, value: str, bcrypt_hash: str) -> ServiceResult:
        """Return ``data.match`` telling whether *value* hashes to *bcrypt_hash*."""
        op = "verify_password"
        try:
            match = check_password(value, bcrypt_hash)
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_HASH", f"Not a bcrypt hash: {exc}")
        warnings = [] if match else ["Password does not match hash"]
        return ServiceResult(ok=True, op=op, data={"match": match}, warnings=warnings)
