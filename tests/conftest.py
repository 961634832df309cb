"""Pytest configuration and shared fixtures."""

import tempfile

import pytest
from click.testing import CliRunner

from yamlset.cli import cli

MANIFESTS = """\
apiVersion: v1
kind: Namespace
metadata:
  name: demo
---
---
null
---
[]
---
{}
---
apiVersion: v1
kind: ConfigMap
metadata:
  name: settings
  namespace: demo
data:
  mode: 0775
"""


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["cat", "deploy.yaml"])
        result = invoke(["put", "out.yaml"], input_data='{"a": 1}\\n')
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def manifests_yaml(tmp_path):
    """Multi-document manifest file with empty documents mixed in."""
    path = tmp_path / "manifests.yaml"
    path.write_text(MANIFESTS, encoding="utf-8")
    return path


@pytest.fixture
def private_tmpdir(tmp_path, monkeypatch):
    """Point tempfile at a per-test directory so tmp() output is cleaned up."""
    root = tmp_path / "system-tmp"
    root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(root))
    return root
