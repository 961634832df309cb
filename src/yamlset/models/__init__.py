"""Pydantic models for yamlset settings."""

from .settings import (
    DEFAULT_FETCH_SETTINGS,
    DEFAULT_SETTINGS,
    MAX_DOWNLOAD_BYTES,
    TIMEOUT_ENV_VAR,
    YAML_VERSION,
    CodecSettings,
    FetchSettings,
)

__all__ = [
    "CodecSettings",
    "DEFAULT_FETCH_SETTINGS",
    "DEFAULT_SETTINGS",
    "FetchSettings",
    "MAX_DOWNLOAD_BYTES",
    "TIMEOUT_ENV_VAR",
    "YAML_VERSION",
]
