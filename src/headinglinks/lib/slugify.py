"""Heading text normalization shared by the annotator and the renderer.

Both sides of the heading lookup go through ``slugify``: the annotator to
build ids and table keys from heading text, the renderer to turn an editor
label into the same key. Matching is therefore insensitive to case, accents
and punctuation.

Examples:
    >>> slugify("Getting Started!")
    'getting-started'
    >>> slugify("  INTRO ")
    'intro'
    >>> slugify("Café &amp; Résumé")
    'cafe-resume'
"""

import re
import unicodedata

_TAG_RE = re.compile(r"<[^>]*>")
_ENTITY_RE = re.compile(r"&[#\w]+?;")
_SEPARATOR_RE = re.compile(r"[ –—/.]")
_DISALLOWED_RE = re.compile(r"[^\w\s-]")
_WHITESPACE_RE = re.compile(r"\s+")
_HYPHEN_RUN_RE = re.compile(r"-+")


def _fold_accents(text: str) -> str:
    """Drop combining marks after compatibility decomposition (é -> e)."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def slugify(text: str | None) -> str:
    """Return the anchor-safe normalized form of a heading text.

    The result is lowercase, has no punctuation, and uses single hyphens
    between words. It may be empty when the input has no word characters.
    Applying ``slugify`` to its own output returns the same string.

    Args:
        text: Heading text or editor label; ``None`` is treated as empty

    Returns:
        Normalized slug, possibly ``""``
    """
    if not text:
        return ""

    value = _TAG_RE.sub("", text)
    value = _ENTITY_RE.sub("", value)
    value = _fold_accents(value).lower()
    value = _SEPARATOR_RE.sub("-", value)
    value = _DISALLOWED_RE.sub("", value)
    value = _WHITESPACE_RE.sub("-", value.strip())
    value = _HYPHEN_RUN_RE.sub("-", value)
    return value.strip("-")
