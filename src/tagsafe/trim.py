"""Strip whitespace just inside the boundaries of selected elements."""

import re
from typing import Iterable

from .tags import closing_tag_pattern, is_self_closing, opening_tag_pattern


def trim_elements(html: str, trim: Iterable[str]) -> str:
    """Remove whitespace after each opening tag and before each closing tag.

    Only whitespace touching the tag boundaries is removed; whitespace inside
    the text is kept. Tags that do not occur are a no-op.

    Args:
        html: Markup to trim.
        trim: Tag names, processed in order.

    Returns:
        The trimmed markup.
    """
    for tag in trim:
        leading = re.compile(rf"({opening_tag_pattern(tag).pattern})\s+", re.IGNORECASE)
        trailing = re.compile(rf"(?<!\s)\s+({closing_tag_pattern(tag).pattern})", re.IGNORECASE)

        html = leading.sub(_keep_self_closing, html)
        html = trailing.sub(r"\1", html)

    return html


def _keep_self_closing(match: re.Match) -> str:
    # <p/> has no content to trim, so the whitespace after it belongs to the parent
    tag = match.group(1)
    if is_self_closing(tag):
        return match.group(0)
    return tag
