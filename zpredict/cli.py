"""zp: frecency-ranked directory suggestions."""

import click

from . import __version__
from .commands import config_group, query, suggest, top


@click.group()
@click.version_option(__version__, prog_name="zp")
def cli():
    """Suggest directories to cd into, ranked by zoxide frecency.

    Scores come from `zoxide query --list --all --score` unless
    --from-file is given.
    """
    pass


cli.add_command(query)
cli.add_command(suggest)
cli.add_command(top)
cli.add_command(config_group)


if __name__ == "__main__":
    cli()
