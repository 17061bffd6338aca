"""Configuration commands for the zp CLI."""

import click

from ..config import DEFAULTS, get_config_file, get_setting, load_config, set_setting
from ..utils import log_info


@click.group(name="config")
def config_group():
    """View and change predictor settings.

    Settings live in $XDG_CONFIG_HOME/zpredict/config.yaml.
    """
    pass


@config_group.command(name="show")
def show():
    """Show every setting and its current value."""
    config = load_config()
    log_info(click.style(f"# {get_config_file()}", dim=True))
    for key in DEFAULTS:
        value = get_setting(key, config)
        marker = "" if key in config else click.style("  (default)", dim=True)
        log_info(f"{key:<18} {value}{marker}")


@config_group.command(name="set")
@click.argument("key", type=click.Choice(list(DEFAULTS)))
@click.argument("value")
def set_(key: str, value: str):
    """Change a setting.

    Examples:
        zp config set last_component exact
        zp config set tokenizer separators_and_space
        zp config set refresh_interval 60
    """
    try:
        set_setting(key, value)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="VALUE")
    log_info(click.style(f"{key} = {get_setting(key)}", fg="green"))
