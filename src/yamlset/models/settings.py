"""Immutable settings threaded through codec and fetch calls."""

from __future__ import annotations

import os
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

# YAML 1.1 keeps output readable by PyYAML-style consumers and makes
# unquoted `0775` an octal integer on load.
YAML_VERSION: Tuple[int, int] = (1, 1)

MAX_DOWNLOAD_BYTES = 10 * 1024 * 1024

TIMEOUT_ENV_VAR = "YAMLSET_FETCH_TIMEOUT"


class CodecSettings(BaseModel):
    """Serialization and parsing settings.

    The schema version applies to both directions; there is no way to read
    under one version and write under another.
    """

    model_config = ConfigDict(frozen=True)

    version: Tuple[int, int] = YAML_VERSION
    indent: int = Field(default=2, ge=1)
    encoding: str = "utf-8"
    tmp_prefix: str = "yamlset-"
    tmp_filename: str = "temp.yaml"


class FetchSettings(BaseModel):
    """Limits for reading a location."""

    model_config = ConfigDict(frozen=True)

    max_bytes: int = Field(default=MAX_DOWNLOAD_BYTES, gt=0)
    timeout: Optional[float] = None
    chunk_size: int = Field(default=64 * 1024, gt=0)

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError("timeout must be positive")
        return value

    @classmethod
    def from_env(cls) -> "FetchSettings":
        """Build settings, taking the timeout from $YAMLSET_FETCH_TIMEOUT."""
        raw = os.environ.get(TIMEOUT_ENV_VAR)
        if not raw:
            return cls()
        return cls(timeout=float(raw))


DEFAULT_SETTINGS = CodecSettings()
DEFAULT_FETCH_SETTINGS = FetchSettings()


__all__ = [
    "CodecSettings",
    "DEFAULT_FETCH_SETTINGS",
    "DEFAULT_SETTINGS",
    "FetchSettings",
    "MAX_DOWNLOAD_BYTES",
    "TIMEOUT_ENV_VAR",
    "YAML_VERSION",
]
