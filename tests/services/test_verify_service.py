"""Tests for VerifyService.verify_password."""

from __future__ import annotations

import bcrypt
import pytest

from randctl.config.settings import RandSettings
from randctl.services.verify import VerifyService
from tests.conftest import ZeroEntropySource


def _hash(value: str) -> str:
    return bcrypt.hashpw(value.encode(), bcrypt.gensalt(rounds=4)).decode()


@pytest.fixture
def service(settings: RandSettings) -> VerifyService:
    return VerifyService(ZeroEntropySource(), settings)


class TestVerifyPassword:
    def test_match(self, service: VerifyService) -> None:
        result = service.verify_password("s3cret", _hash("s3cret"))
        assert result.ok
        assert result.data == {"match": True}
        assert result.warnings == []

    def test_mismatch_warns(self, service: VerifyService) -> None:
        result = service.verify_password("nope", _hash("s3cret"))
        assert result.ok
        assert result.data == {"match": False}
        assert result.warnings == ["Password does not match hash"]

    def test_invalid_hash(self, service: VerifyService) -> None:
        result = service.verify_password("x", "plain-text")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_HASH"
