"""Cat command - load YAML documents from a file or URL."""

import json

import click

from ...codec import stringify
from ...errors import YamlSetError
from ...loader import load
from ...models import FetchSettings
from ..helpers import fail


@click.command()
@click.argument("location")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Emit NDJSON (one document per line) instead of YAML",
)
def cat(location, as_json):
    """Load non-empty documents from LOCATION and print them.

    Examples:
        yamlset cat deploy.yaml
        yamlset cat https://example.com/manifests.yaml --json
    """
    try:
        docs = load(location, fetch_settings=FetchSettings.from_env())
    except (YamlSetError, ValueError) as e:
        fail(str(e))

    if as_json:
        for doc in docs:
            # Timestamps have no JSON type
            click.echo(json.dumps(doc, default=str))
    else:
        click.echo(stringify(*docs), nl=False)
