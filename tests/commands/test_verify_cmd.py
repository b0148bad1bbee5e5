"""Tests for ``randctl verify``."""

from __future__ import annotations

import bcrypt
from click.testing import CliRunner

from randctl.cli import cli

_HASH = bcrypt.hashpw(b"s3cret", bcrypt.gensalt(rounds=4)).decode()


class TestVerifyCommand:
    def test_match(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "verify", "s3cret", _HASH])
        assert result.exit_code == 0
        assert result.stdout == "match\n"

    def test_mismatch_warns_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["verify", "wrong", _HASH])
        assert result.exit_code == 0
        assert "match: no" in result.stdout
        assert "WARNING: Password does not match hash" in result.stderr

    def test_invalid_hash(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["verify", "x", "not-a-hash"])
        assert result.exit_code == 1
        assert "INVALID_HASH" in result.stderr
