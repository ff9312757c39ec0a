"""Link list rendering from editor labels and a heading table."""

from collections.abc import Iterable
from html import escape

from headinglinks.config.defaults import (
    DEFAULT_CONTAINER_CLASS,
    DEFAULT_TITLE_CLASS,
    DEFAULT_UNRESOLVED_CLASS,
    DEFAULT_UNRESOLVED_SUFFIX,
)
from headinglinks.lib.slugify import slugify
from headinglinks.models.heading import HeadingTable, LinkEntry


def resolve_labels(table: HeadingTable, labels: Iterable[str]) -> list[LinkEntry]:
    """Resolve labels to link entries, in label order.

    Blank labels produce no entry. Labels whose normalized text is missing
    from the table produce an unresolved entry.

    Args:
        table: Heading table from the annotation pass of the same document
        labels: Ordered editor labels

    Returns:
        One LinkEntry per non-blank label
    """
    entries: list[LinkEntry] = []
    for label in labels:
        text = (label or "").strip()
        if not text:
            continue
        entries.append(LinkEntry(label=text, target_id=table.get(slugify(text))))
    return entries


def _render_item(entry: LinkEntry, unresolved_class: str, unresolved_suffix: str) -> str:
    if entry.href is not None:
        return f'<li><a href="{escape(entry.href)}">{escape(entry.label)}</a></li>'
    return (
        f'<li class="{escape(unresolved_class)}" data-heading-resolved="false">'
        f"{escape(entry.label)}{escape(unresolved_suffix)}</li>"
    )


def render_entries(
    entries: list[LinkEntry],
    list_title: str | None = None,
    *,
    container_class: str = DEFAULT_CONTAINER_CLASS,
    title_class: str = DEFAULT_TITLE_CLASS,
    unresolved_class: str = DEFAULT_UNRESOLVED_CLASS,
    unresolved_suffix: str = DEFAULT_UNRESOLVED_SUFFIX,
) -> str:
    """Render resolved entries as the link list markup.

    Returns an empty string when there are no entries.
    """
    if not entries:
        return ""

    parts = [f'<div class="{escape(container_class)}">']
    title = (list_title or "").strip()
    if title:
        parts.append(f'<p class="{escape(title_class)}">{escape(title)}</p>')
    parts.append("<ol>")
    parts.extend(
        _render_item(entry, unresolved_class, unresolved_suffix) for entry in entries
    )
    parts.append("</ol>")
    parts.append("</div>")
    return "".join(parts)


def render_link_list(
    table: HeadingTable,
    labels: Iterable[str],
    list_title: str | None = None,
    *,
    container_class: str = DEFAULT_CONTAINER_CLASS,
    title_class: str = DEFAULT_TITLE_CLASS,
    unresolved_class: str = DEFAULT_UNRESOLVED_CLASS,
    unresolved_suffix: str = DEFAULT_UNRESOLVED_SUFFIX,
) -> str:
    """Render the ordered link list for a document.

    The output is a container holding an optional title and an ``<ol>``.
    Resolved labels become ``<a href="#id">`` links; unresolved labels become
    plain items marked with ``unresolved_class`` and
    ``data-heading-resolved="false"``. The same inputs always give the same
    output.

    Args:
        table: Heading table from annotating the same document
        labels: Ordered editor labels
        list_title: Title above the list; omitted when empty
        container_class: Class of the wrapping ``<div>``
        title_class: Class of the title element
        unresolved_class: Class marking unresolved items
        unresolved_suffix: Text appended to unresolved labels

    Returns:
        Link list markup, or ``""`` when no label is non-blank
    """
    return render_entries(
        resolve_labels(table, labels),
        list_title,
        container_class=container_class,
        title_class=title_class,
        unresolved_class=unresolved_class,
        unresolved_suffix=unresolved_suffix,
    )
