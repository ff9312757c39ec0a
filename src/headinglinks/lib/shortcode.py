"""Expansion of the ``[link_to_headings]`` directive in document markup."""

import re
from functools import lru_cache


@lru_cache(maxsize=32)
def _directive_pattern(tag: str) -> re.Pattern[str]:
    # [[tag]] is an escaped literal; [tag], [tag /] and [tag a="b"] expand
    name = re.escape(tag)
    return re.compile(
        rf"\[\[{name}(?:\s[^\]]*)?/?\]\]|\[{name}(?:\s[^\]]*)?/?\]"
    )


def has_directive(html: str, tag: str) -> bool:
    """Return True if the markup contains an unescaped ``[tag]`` directive."""
    return any(
        not match.group(0).startswith("[[")
        for match in _directive_pattern(tag).finditer(html or "")
    )


def expand_directives(html: str, tag: str, replacement: str) -> str:
    """Replace every ``[tag]`` directive with ``replacement``.

    Attributes inside the directive are accepted and ignored. The escaped
    form ``[[tag]]`` is emitted as the literal ``[tag]``.

    Args:
        html: Document markup
        tag: Directive name
        replacement: Markup substituted for each directive

    Returns:
        Markup with directives expanded
    """
    if not html:
        return html

    def _replace(match: re.Match[str]) -> str:
        text = match.group(0)
        if text.startswith("[["):
            return text[1:-1]
        return replacement

    return _directive_pattern(tag).sub(_replace, html)
