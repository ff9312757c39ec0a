"""Click command for annotating document headings with anchor ids.

Implements 'headinglinks annotate', which prints the annotated markup or,
with --table, the heading table built from it.
"""

import json

import click

from headinglinks.cli.common import (
    handle_cli_errors,
    read_document,
    verbosity_options,
    write_output,
)
from headinglinks.config.loader import load_config
from headinglinks.lib.annotator import annotate as annotate_html
from headinglinks.lib.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


@click.command(name="annotate")
@click.argument("document", type=click.Path(allow_dash=True))
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    default=None,
    help="Write the result to this file instead of stdout",
)
@click.option(
    "--levels",
    default=None,
    help="Heading levels to annotate, e.g. '2-6' or '2,3,4'",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Path to a headinglinks.yml configuration file",
)
@click.option(
    "--table",
    "show_table",
    is_flag=True,
    help="Print the heading table as JSON instead of the markup",
)
@verbosity_options
def annotate(
    document: str,
    output: str | None,
    levels: str | None,
    config_path: str | None,
    show_table: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """Add anchor ids to the headings of a document.

    DOCUMENT is an HTML file, or '-' to read from stdin.

    Example:

        headinglinks annotate post.html -o post.annotated.html

        headinglinks annotate post.html --levels 2-6 --table
    """
    setup_logging(verbose=verbose, quiet=quiet)

    with handle_cli_errors():
        config = load_config(config_path, overrides={"heading_levels": levels})
        content = read_document(document)
        result = annotate_html(content, config.heading_levels)
        logger.info(
            f"Annotated {len(result.table.headings)} headings in {document}"
        )

        if show_table:
            payload = {
                "ids": result.table.ids,
                "headings": [
                    heading.model_dump() for heading in result.table.headings
                ],
            }
            write_output(json.dumps(payload, indent=2, ensure_ascii=False), output)
        else:
            write_output(result.html, output)
