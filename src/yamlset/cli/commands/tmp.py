"""Tmp command - write NDJSON from stdin to a fresh temp file."""

import click

from ...codec import tmp as save_tmp
from ...errors import YamlSetError
from ..helpers import fail, read_ndjson_stdin


@click.command()
def tmp():
    """Save NDJSON documents from stdin to a new temp file, print its path.

    The file is never removed by yamlset.
    """
    docs = read_ndjson_stdin()
    try:
        path = save_tmp(docs)
    except (YamlSetError, OSError) as e:
        fail(str(e))
    click.echo(path)
