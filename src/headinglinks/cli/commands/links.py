"""Click command for rendering only the heading link list of a document."""

import click

from headinglinks.cli.common import (
    handle_cli_errors,
    read_document,
    verbosity_options,
    write_output,
)
from headinglinks.config.loader import load_config
from headinglinks.lib.labels import labels_from_fields, load_fields_file
from headinglinks.lib.logging_config import get_logger, setup_logging
from headinglinks.lib.pipeline import RenderContext

logger = get_logger(__name__)


@click.command(name="links")
@click.argument("document", type=click.Path(allow_dash=True))
@click.argument("fields", type=click.Path(exists=True))
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
@verbosity_options
def links(
    document: str,
    fields: str,
    title: str | None,
    config_path: str | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Render the link list for a document.

    DOCUMENT is the HTML whose headings are linked; FIELDS is a YAML or JSON
    file holding the document's label records. Prints nothing when no label
    is configured.

    Example:

        headinglinks links post.html post.fields.yaml --title "On this page"
    """
    setup_logging(verbose=verbose, quiet=quiet)

    with handle_cli_errors():
        config = load_config(config_path, overrides={"list_title": title})
        context = RenderContext(config=config)
        context.annotate(read_document(document))

        labels = labels_from_fields(
            load_fields_file(fields),
            config.repeater_field_name,
            config.subfield_name,
        )
        entries = context.resolve(labels)
        logger.info(
            f"Resolved {sum(entry.resolved for entry in entries)} "
            f"of {len(entries)} labels"
        )
        markup = context.render_entries(entries)
        if markup:
            write_output(markup, None)
