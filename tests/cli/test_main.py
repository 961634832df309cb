"""Tests for the CLI group."""

import logging

from yamlset import __version__


def test_cli_help(invoke):
    result = invoke(["--help"])
    assert result.exit_code == 0
    assert "multi-document YAML" in result.output
    for command in ("cat", "put", "tmp"):
        assert command in result.output


def test_cli_version(invoke):
    result = invoke(["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_verbose_enables_debug_logging(invoke, manifests_yaml, monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

    result = invoke(["--verbose", "cat", str(manifests_yaml)])

    assert result.exit_code == 0
    assert calls and calls[0]["level"] == logging.DEBUG
