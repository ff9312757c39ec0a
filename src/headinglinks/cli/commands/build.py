"""Click command running the full document render.

Annotates headings, resolves the document's labels and replaces each
[link_to_headings] directive with the rendered link list.
"""

import click

from headinglinks.cli.common import (
    handle_cli_errors,
    read_document,
    verbosity_options,
    write_output,
)
from headinglinks.config.loader import load_config
from headinglinks.lib.labels import load_fields_file
from headinglinks.lib.logging_config import get_logger, setup_logging
from headinglinks.lib.pipeline import render_document

logger = get_logger(__name__)


@click.command(name="build")
@click.argument("document", type=click.Path(allow_dash=True))
@click.argument("fields", type=click.Path(exists=True), required=False)
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
    "--title",
    default=None,
    help="List title (use an empty string to omit it)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Path to a headinglinks.yml configuration file",
)
@click.option(
    "--skip",
    is_flag=True,
    help="Treat the document as ineligible: no anchors, directives removed",
)
@verbosity_options
def build(
    document: str,
    fields: str | None,
    output: str | None,
    levels: str | None,
    title: str | None,
    config_path: str | None,
    skip: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """Render a document with heading anchors and its link list.

    DOCUMENT is an HTML file, or '-' to read from stdin. FIELDS is an
    optional YAML or JSON file with the document's label records; without
    it the link list is empty.

    Example:

        headinglinks build post.html post.fields.yaml -o post.out.html

        headinglinks build post.html --skip
    """
    setup_logging(verbose=verbose, quiet=quiet)

    with handle_cli_errors():
        config = load_config(
            config_path,
            overrides={"heading_levels": levels, "list_title": title},
        )
        content = read_document(document)
        field_data = load_fields_file(fields) if fields else None

        result = render_document(content, field_data, config, eligible=not skip)
        logger.info(
            f"Rendered {document}: {len(result.table.headings)} headings, "
            f"{len(result.entries)} links"
        )
        write_output(result.html, output)
