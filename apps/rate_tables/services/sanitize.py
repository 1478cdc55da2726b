"""
apps.rate_tables.services.sanitize
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Plain-text cleaning for values submitted through the rate tables editor.
"""
from __future__ import annotations

import re

from django.utils.html import strip_tags

_OCTET_RE = re.compile(r"%[a-f0-9]{2}", re.IGNORECASE)
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")
_WHITESPACE_RE = re.compile(r"\s+")


def sanitize_text_field(value: object) -> str:
    """
    Reduce *value* to a single line of plain text.

    Steps, in order: coerce to :class:`str`, strip HTML tags, remove
    percent-encoded octets, turn control characters (including tabs and line
    breaks) into spaces, collapse whitespace runs and trim.

    Clean input passes through unchanged, so sanitising twice is a no-op.

    Example::

        sanitize_text_field("  <b>5.00</b>\\n")   # -> "5.00"
    """
    if value is None:
        return ""
    text = strip_tags(str(value))
    # Removing one octet can expose another ("%%4141"), so repeat until stable.
    while True:
        stripped = _OCTET_RE.sub("", text)
        if stripped == text:
            break
        text = stripped
    text = _CONTROL_RE.sub(" ", text)
    return _WHITESPACE_RE.sub(" ", text).strip()
