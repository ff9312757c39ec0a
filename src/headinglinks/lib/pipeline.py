"""One document-render cycle: annotate, resolve labels, expand directives.

The heading table is carried explicitly in a RenderContext created for each
document, so the renderer always reads the table built from the same markup
it is placed in. Contexts are never shared between documents.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from headinglinks.lib.annotator import annotate
from headinglinks.lib.labels import labels_from_fields
from headinglinks.lib.logging_config import get_logger
from headinglinks.lib.renderer import render_entries, resolve_labels
from headinglinks.lib.shortcode import expand_directives, has_directive
from headinglinks.models.config import LinkListConfig
from headinglinks.models.heading import HeadingTable, LinkEntry

logger = get_logger(__name__)


@dataclass
class RenderContext:
    """Per-document state threaded from annotation to rendering.

    Attributes:
        config: Resolved configuration for this render
        table: Heading table; None until the document has been annotated
    """

    config: LinkListConfig
    table: HeadingTable | None = None

    def annotate(self, content: str) -> str:
        """Annotate the document and keep its table on the context."""
        result = annotate(content, self.config.heading_levels)
        self.table = result.table
        return result.html

    def resolve(self, labels: Sequence[str]) -> list[LinkEntry]:
        """Resolve labels against this document's table.

        Without a table (document not annotated) nothing can resolve and
        the list is empty.
        """
        if self.table is None:
            return []
        return resolve_labels(self.table, labels)

    def render(self, labels: Sequence[str]) -> str:
        """Render the link list markup for this document."""
        return self.render_entries(self.resolve(labels))

    def render_entries(self, entries: list[LinkEntry]) -> str:
        """Render already resolved entries with this context's settings."""
        return render_entries(
            entries,
            self.config.list_title,
            container_class=self.config.container_class,
            title_class=self.config.title_class,
            unresolved_class=self.config.unresolved_class,
            unresolved_suffix=self.config.unresolved_suffix,
        )


@dataclass(frozen=True)
class DocumentResult:
    """Output of rendering one document."""

    html: str
    table: HeadingTable
    entries: list[LinkEntry] = field(default_factory=list)


def render_document(
    content: str,
    fields: Mapping[str, Any] | None,
    config: LinkListConfig | None = None,
    *,
    eligible: bool = True,
) -> DocumentResult:
    """Annotate a document and expand its link list directives.

    Ineligible documents and empty content are not annotated; any directive
    in them expands to nothing.

    Args:
        content: Document markup
        fields: Per-document field data; None when no provider is available
        config: Configuration; defaults apply when omitted
        eligible: Whether this document type should get anchors and links

    Returns:
        DocumentResult with the final markup, the heading table and the
        resolved link entries
    """
    context = RenderContext(config=config or LinkListConfig())
    tag = context.config.directive_tag

    if not eligible or not content:
        logger.debug("Document not eligible for heading links, skipping")
        return DocumentResult(
            html=expand_directives(content, tag, ""),
            table=HeadingTable(),
        )

    annotated = context.annotate(content)
    table = context.table if context.table is not None else HeadingTable()

    if not has_directive(annotated, tag):
        return DocumentResult(html=annotated, table=table)

    labels = labels_from_fields(
        fields,
        context.config.repeater_field_name,
        context.config.subfield_name,
    )
    entries = context.resolve(labels)
    unresolved = [entry.label for entry in entries if not entry.resolved]
    if unresolved:
        logger.info(f"Labels without a matching heading: {unresolved}")

    markup = expand_directives(annotated, tag, context.render_entries(entries))
    return DocumentResult(html=markup, table=table, entries=entries)
