"""Heading anchor annotation for HTML fragments.

Parses a fragment with BeautifulSoup's lenient ``html.parser`` backend, gives
every selected heading a unique ``id`` and builds the HeadingTable used to
resolve editor labels to anchors.

Id assignment, in document order:

1. A heading that already has a non-empty ``id`` keeps it untouched.
2. Otherwise the id is ``slugify(text)``, suffixed ``-1``, ``-2``, ... until
   it differs from every id assigned earlier in the same pass and from every
   id already present on a selected heading.
3. The table maps ``slugify(text)`` to the heading's id. Later headings with
   the same normalized text overwrite earlier entries.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from bs4 import BeautifulSoup

from headinglinks.config.defaults import DEFAULT_HEADING_LEVELS
from headinglinks.lib.logging_config import get_logger
from headinglinks.lib.slugify import slugify
from headinglinks.models.heading import HeadingRecord, HeadingTable

logger = get_logger(__name__)

PARSER = "html.parser"


@dataclass(frozen=True)
class AnnotationResult:
    """Annotated markup and the heading table built while annotating it."""

    html: str
    table: HeadingTable


def heading_tag_names(heading_levels: Iterable[int]) -> list[str]:
    """Return ``h1``..``h6`` tag names for the given levels."""
    return [f"h{level}" for level in sorted(set(heading_levels)) if 1 <= level <= 6]


def unique_id(slug: str, assigned: set[str]) -> str:
    """Return ``slug`` or the first free ``slug-N`` (N from 1).

    Args:
        slug: Base id, possibly empty
        assigned: Ids already used in this pass

    Returns:
        An id not contained in ``assigned``
    """
    candidate = slug
    counter = 1
    while candidate in assigned:
        candidate = f"{slug}-{counter}"
        counter += 1
    return candidate


def annotate(
    html: str,
    heading_levels: Iterable[int] = DEFAULT_HEADING_LEVELS,
) -> AnnotationResult:
    """Inject anchor ids into headings and build the heading table.

    Parsing problems are logged and treated as a document without headings.
    When no heading needed an id, the input string is returned verbatim
    rather than re-serialized.

    Args:
        html: HTML fragment, possibly malformed and without <html>/<body>
        heading_levels: Heading levels that take part (default 1-6)

    Returns:
        AnnotationResult with the annotated markup and a fresh HeadingTable
    """
    table = HeadingTable()
    if not html:
        return AnnotationResult(html="", table=table)

    tag_names = heading_tag_names(heading_levels)
    if not tag_names:
        return AnnotationResult(html=html, table=table)

    try:
        soup = BeautifulSoup(html, PARSER)
        headings = soup.find_all(tag_names)
    except Exception:
        logger.warning(
            "Could not parse document markup, leaving headings unannotated",
            exc_info=True,
        )
        return AnnotationResult(html=html, table=HeadingTable())

    # Editor-set ids are reserved up front so generated ids never reuse them
    assigned: set[str] = {str(h["id"]) for h in headings if h.get("id")}
    modified = False

    for heading in headings:
        raw_text = heading.get_text().strip()
        normalized_key = slugify(raw_text)
        existing_id = heading.get("id")
        preexisting = bool(existing_id)

        if preexisting:
            heading_id = str(existing_id)
        else:
            heading_id = unique_id(normalized_key, assigned)
            heading["id"] = heading_id
            modified = True

        assigned.add(heading_id)
        table.record(
            HeadingRecord(
                raw_text=raw_text,
                normalized_key=normalized_key,
                id=heading_id,
                level=int(heading.name[1]),
                preexisting=preexisting,
            )
        )

    logger.debug(
        f"Annotated {len(table.headings)} headings "
        f"({len(table)} distinct keys, modified={modified})"
    )

    if not modified:
        return AnnotationResult(html=html, table=table)
    return AnnotationResult(html=str(soup), table=table)
