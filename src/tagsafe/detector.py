"""Detect whether content contains HTML markup.

HTML element names begin with a letter and continue with letters or digits
(https://w3c.github.io/html-reference/syntax.html#tag-name).

Custom element names are lowercase, begin with a letter, contain at least one
hyphen, and may contain digits, periods and underscores
(https://html.spec.whatwg.org/multipage/custom-elements.html#valid-custom-element-name).
"""

import re

from .tags import ATTRIBUTE_REGION

_ELEMENT = r"[A-Za-z][A-Za-z0-9]*"
_CUSTOM_ELEMENT = r"[a-z][a-z0-9._]*-[a-z0-9._-]+"

OPENING_ELEMENT_RE = re.compile(rf"<(?P<element>{_ELEMENT})(?:\s{ATTRIBUTE_REGION})?>")
OPENING_CUSTOM_ELEMENT_RE = re.compile(rf"<(?P<element>{_CUSTOM_ELEMENT})(?:\s{ATTRIBUTE_REGION})?>")
CLOSING_TAG_RE = re.compile(r"</([^\s<>/]+)>")


def _has_closed_element(content: str, opening: re.Pattern) -> bool:
    """Check for an opening tag followed somewhere later by its closing tag."""
    last_close = {}
    for match in CLOSING_TAG_RE.finditer(content):
        last_close[match.group(1)] = match.start()

    return any(
        match.end() <= last_close.get(match.group("element"), -1)
        for match in opening.finditer(content)
    )


def is_html(content: str) -> bool:
    """Check if content contains at least one HTML element or custom element."""
    return (
        OPENING_ELEMENT_RE.search(content) is not None
        or _has_closed_element(content, OPENING_ELEMENT_RE)
        or _has_closed_element(content, OPENING_CUSTOM_ELEMENT_RE)
    )
