"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, randctl.toml only contains
overrides. An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from randctl.domain.charsets import DEFAULT_SPECIAL_CHARS
from randctl.infrastructure.hashing import DEFAULT_ROUNDS


class CharsetsConfig(BaseModel):
    """[charsets] section."""

    model_config = {"frozen": True}

    special: str = DEFAULT_SPECIAL_CHARS


class PasswordConfig(BaseModel):
    """[password] section."""

    model_config = {"frozen": True}

    bcrypt_rounds: int = Field(default=DEFAULT_ROUNDS, ge=4, le=31)
    reveal: bool = False


class IdConfig(BaseModel):
    """[id] section."""

    model_config = {"frozen": True}

    default_byte_length: int = Field(default=8, ge=1)
