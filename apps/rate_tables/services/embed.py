"""
apps.rate_tables.services.embed
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Expansion of ``[rate_table type="..."]`` directives in page content.
"""
from __future__ import annotations

import re
from collections.abc import Callable

from apps.rate_tables.domain import SELECT_ALL, RateTableSet
from .renderer import render_public

#: ``[rate_table]``, ``[rate_table type="savings"]`` or ``type='savings'``.
EMBED_RE = re.compile(
    r"""\[rate_table(?:\s+type=(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<bare>[^\s\]"']+)))?\s*\]"""
)


def embed_selector(match: re.Match) -> str:
    """Return the selector of a matched directive; no ``type`` means all."""
    for value in (match["dq"], match["sq"], match["bare"]):
        if value is not None:
            return value
    return SELECT_ALL


def expand_rate_table_embeds(
    content: str,
    rate_set: RateTableSet,
    escape_text: Callable[[str], str] | None = None,
) -> str:
    """
    Replace every embed directive in *content* with rendered tables.

    Args:
        content: Page content that may contain directives.
        rate_set: Tables to render.
        escape_text: Applied to the content *between* directives, e.g.
            :func:`django.utils.html.escape` for untrusted text.  The
            rendered tables are never passed through it.

    Returns:
        The expanded content.
    """
    if escape_text is None:
        return EMBED_RE.sub(lambda m: render_public(rate_set, embed_selector(m)), content)

    parts: list[str] = []
    position = 0
    for match in EMBED_RE.finditer(content):
        parts.append(escape_text(content[position:match.start()]))
        parts.append(render_public(rate_set, embed_selector(match)))
        position = match.end()
    parts.append(escape_text(content[position:]))
    return "".join(parts)


def has_rate_table_embed(content: str) -> bool:
    return EMBED_RE.search(content) is not None
