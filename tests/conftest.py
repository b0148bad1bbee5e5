"""Shared pytest fixtures and entropy test doubles for randctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator, Iterable
from pathlib import Path

import pytest
from click.testing import CliRunner

from randctl.config.settings import RandSettings
from randctl.domain.entropy import EntropySource
from randctl.domain.errors import EntropyUnavailableError
from randctl.infrastructure.entropy import SystemEntropySource
from randctl.services.telemetry import disable_telemetry

# ---------------------------------------------------------------------------
# Entropy doubles
# ---------------------------------------------------------------------------


class ReplayEntropySource(EntropySource):
    """Replays a fixed byte sequence; raises once it is exhausted."""

    def __init__(self, data: Iterable[int] | bytes) -> None:
        self._data = bytes(data)
        self._offset = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def _read(self, n: int) -> bytes:
        chunk = self._data[self._offset : self._offset + n]
        self._offset += len(chunk)
        return chunk


class ZeroEntropySource(EntropySource):
    """Always returns zero bytes: every ``random_index`` call yields 0."""

    def _read(self, n: int) -> bytes:
        return bytes(n)


class RecordingEntropySource(EntropySource):
    """Delegates to the system source and records every read size."""

    def __init__(self) -> None:
        self._inner = SystemEntropySource()
        self.reads: list[int] = []

    def _read(self, n: int) -> bytes:
        self.reads.append(n)
        return self._inner.random_bytes(n)


class FailingEntropySource(EntropySource):
    """Fails every read, chaining an OSError like the system source does."""

    def __init__(self) -> None:
        self.attempts = 0

    def _read(self, n: int) -> bytes:
        self.attempts += 1
        try:
            raise OSError("entropy pool unavailable")
        except OSError as exc:
            raise EntropyUnavailableError(f"system entropy source failed: {exc}") from exc


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None]:
    """Run every test from an empty directory with fast bcrypt and clean state."""
    monkeypatch.chdir(tmp_path)
    for name in ("RANDCTL_CONFIG", "RANDCTL_QUIET", "RANDCTL_VERBOSE", "RANDCTL_JSON_OUTPUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("RANDCTL_PASSWORD__BCRYPT_ROUNDS", "4")

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    try:
        yield
    finally:
        disable_telemetry()
        root.handlers = handlers
        root.setLevel(level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings() -> RandSettings:
    """Settings resolved from the isolated temp directory (no TOML)."""
    return RandSettings.from_cli()


@pytest.fixture
def system_source() -> SystemEntropySource:
    return SystemEntropySource()


@pytest.fixture
def recording_source() -> RecordingEntropySource:
    return RecordingEntropySource()


@pytest.fixture
def failing_source() -> FailingEntropySource:
    return FailingEntropySource()
