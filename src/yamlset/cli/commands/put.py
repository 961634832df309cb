"""Put command - write NDJSON from stdin to a YAML file."""

import click

from ...codec import save
from ...errors import YamlSetError
from ..helpers import fail, read_ndjson_stdin


@click.command()
@click.argument("output_file", type=click.Path(dir_okay=False))
def put(output_file):
    """Read NDJSON documents from stdin and save them to OUTPUT_FILE.

    Examples:
        yamlset cat https://example.com/app.yaml --json | yamlset put app.yaml
    """
    docs = read_ndjson_stdin()
    try:
        save(output_file, docs)
    except (YamlSetError, OSError) as e:
        fail(str(e))
