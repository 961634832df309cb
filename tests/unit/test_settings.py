"""Tests for codec and fetch settings."""

import pytest
from pydantic import ValidationError

from yamlset.models import (
    DEFAULT_FETCH_SETTINGS,
    DEFAULT_SETTINGS,
    MAX_DOWNLOAD_BYTES,
    CodecSettings,
    FetchSettings,
)


def test_defaults():
    assert DEFAULT_SETTINGS.version == (1, 1)
    assert DEFAULT_SETTINGS.tmp_prefix == "yamlset-"
    assert DEFAULT_SETTINGS.tmp_filename == "temp.yaml"
    assert DEFAULT_FETCH_SETTINGS.max_bytes == MAX_DOWNLOAD_BYTES == 10 * 1024 * 1024
    assert DEFAULT_FETCH_SETTINGS.timeout is None


def test_settings_are_frozen():
    with pytest.raises(ValidationError):
        DEFAULT_SETTINGS.version = (1, 2)
    with pytest.raises(ValidationError):
        DEFAULT_FETCH_SETTINGS.max_bytes = 1


def test_fetch_settings_validation():
    with pytest.raises(ValidationError):
        FetchSettings(max_bytes=0)
    with pytest.raises(ValidationError):
        FetchSettings(timeout=-1)
    with pytest.raises(ValidationError):
        CodecSettings(indent=0)


def test_fetch_settings_from_env(monkeypatch):
    monkeypatch.setenv("YAMLSET_FETCH_TIMEOUT", "2.5")
    assert FetchSettings.from_env().timeout == 2.5


def test_fetch_settings_from_env_unset(monkeypatch):
    monkeypatch.delenv("YAMLSET_FETCH_TIMEOUT", raising=False)
    assert FetchSettings.from_env() == FetchSettings()


def test_fetch_settings_from_env_invalid(monkeypatch):
    monkeypatch.setenv("YAMLSET_FETCH_TIMEOUT", "0")
    with pytest.raises(ValidationError):
        FetchSettings.from_env()
