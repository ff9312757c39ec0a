"""Entry point for the headinglinks command line interface."""

import click

from headinglinks import __version__
from headinglinks.cli.commands.annotate import annotate
from headinglinks.cli.commands.build import build
from headinglinks.cli.commands.config import config
from headinglinks.cli.commands.links import links
from headinglinks.config.env_loader import load_env_file


@click.group()
@click.version_option(version=__version__, prog_name="headinglinks")
def main() -> None:
    """Add heading anchors to HTML and render editor-defined link lists."""
    load_env_file()


main.add_command(annotate)
main.add_command(links)
main.add_command(build)
main.add_command(config)


if __name__ == "__main__":  # pragma: no cover
    main()
