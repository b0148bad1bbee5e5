"""Tests for the platform entropy bindings."""

from __future__ import annotations

import os

import pytest

from randctl.domain.errors import EntropyUnavailableError
from randctl.infrastructure.entropy import MeteredEntropySource, SystemEntropySource
from tests.conftest import ReplayEntropySource


class TestSystemEntropySource:
    @pytest.mark.parametrize("n", [1, 16, 4096])
    def test_returns_requested_bytes(self, n: int) -> None:
        assert len(SystemEntropySource().random_bytes(n)) == n

    def test_successive_reads_differ(self) -> None:
        source = SystemEntropySource()
        assert source.random_bytes(32) != source.random_bytes(32)

    def test_os_error_becomes_entropy_unavailable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def broken(n: int) -> bytes:
            raise OSError("getrandom failed")

        monkeypatch.setattr(os, "urandom", broken)
        with pytest.raises(EntropyUnavailableError, match="getrandom failed") as excinfo:
            SystemEntropySource().random_bytes(8)
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_missing_source_becomes_entropy_unavailable(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def missing(n: int) -> bytes:
            raise NotImplementedError("no randomness source")

        monkeypatch.setattr(os, "urandom", missing)
        with pytest.raises(EntropyUnavailableError):
            SystemEntropySource().random_index(10)

    def test_short_platform_read_is_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(os, "urandom", lambda n: b"\x00" * (n - 1))
        with pytest.raises(EntropyUnavailableError, match="7 of 8"):
            SystemEntropySource().random_bytes(8)


class TestMeteredEntropySource:
    def test_counts_bytes_and_reads(self) -> None:
        metered = MeteredEntropySource(ReplayEntropySource(range(10)))
        metered.random_bytes(3)
        metered.random_index(256)
        assert metered.bytes_read == 4
        assert metered.reads == 2

    def test_passes_failures_through(self) -> None:
        metered = MeteredEntropySource(ReplayEntropySource([]))
        with pytest.raises(EntropyUnavailableError):
            metered.random_bytes(1)
        assert metered.bytes_read == 0
