"""Click commands for inspecting headinglinks configuration."""

import click
import yaml

from headinglinks.cli.common import handle_cli_errors
from headinglinks.config.loader import load_config


@click.group(name="config")
def config() -> None:
    """Inspect the resolved headinglinks configuration.

    Configuration is read from headinglinks.yml in the working directory
    (or --config), then HEADINGLINKS_* environment variables.
    """
    pass


@config.command(name="show")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Path to a headinglinks.yml configuration file",
)
def show(config_path: str | None) -> None:
    """Print the effective configuration as YAML."""
    with handle_cli_errors():
        resolved = load_config(config_path)
        click.echo(
            yaml.safe_dump(resolved.model_dump(), sort_keys=False, allow_unicode=True),
            nl=False,
        )
