"""CLI helper utilities shared across commands."""

import json
import sys
from typing import Any, List, NoReturn

import click


def fail(message: str) -> NoReturn:
    """Print an error to stderr and exit with status 1."""
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def read_ndjson_stdin() -> List[Any]:
    """Read one JSON document per line from stdin.

    Blank lines are skipped; ``null`` lines are kept as None documents.

    Raises:
        click.UsageError: If a line is not valid JSON
    """
    docs = []
    for lineno, line in enumerate(sys.stdin, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            docs.append(json.loads(line))
        except json.JSONDecodeError as e:
            raise click.UsageError(f"Invalid JSON on line {lineno}: {e.msg}")
    return docs
