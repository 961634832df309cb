"""yamlset CLI main entry point with global options."""

import logging

import click

from .. import __version__


@click.group()
@click.version_option(__version__, prog_name="yamlset")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr")
def cli(verbose):
    """yamlset - read and write multi-document YAML."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Register commands at module level so tests can import cli with commands attached
from .commands.cat import cat
from .commands.put import put
from .commands.tmp import tmp

cli.add_command(cat)
cli.add_command(put)
cli.add_command(tmp)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
