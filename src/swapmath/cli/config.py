import json
from pathlib import Path

import click
import tomlkit

from swapmath.cli import cli
from swapmath.config import CONFIG_FILE, save_config_to_file, settings


@cli.group()
def config() -> None:
    """
    Configuration commands
    """


@config.command()
@click.option("--json", "as_json", is_flag=True, help="Display the configuration as JSON.")
@click.option("--toml", "as_toml", is_flag=True, help="Display the configuration as TOML.")
def show(*, as_json: bool, as_toml: bool) -> None:
    """
    Display the active configuration.
    """

    if as_json and as_toml:
        msg = "Choose only one of --json and --toml."
        raise click.UsageError(msg)

    if as_json:
        click.echo(json.dumps(settings.model_dump(), indent=2))
    else:
        click.echo(tomlkit.dumps(settings.model_dump()))


@config.command()
@click.option(
    "--path",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=CONFIG_FILE,
    show_default=True,
    help="Location of the configuration file.",
)
@click.option("--force", is_flag=True, help="Overwrite an existing configuration file.")
def init(*, path: Path, force: bool) -> None:
    """
    Write the active configuration to a file.
    """

    if path.exists() and not force:
        click.echo(f"A configuration file already exists at {path}. Use --force to overwrite it.")
        raise click.Abort

    save_config_to_file(settings, path)
    click.echo(f"Wrote configuration to {path}.")
