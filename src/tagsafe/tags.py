"""Tag-matching patterns shared by the protection and trim passes.

Everything here is text-level pattern matching, not parsing. Malformed
markup (unbalanced quotes, stray brackets) is handled best-effort: the
patterns may match oddly shaped regions, but the encoders built on them
stay reversible because they never add or remove quotes or brackets.
"""

import re
from typing import Callable, List, Tuple

# Opening tag names start with a letter (covers custom elements and
# namespaced names like svg:rect)
TAG_NAME = r"[A-Za-z][\w:.\-]*"

# Everything between a tag name and the tag's own ">". Quoted values may
# hold any character, including "<" and ">"; unquoted text stops at the next
# "<" so a tag that never closes fails fast instead of scanning to the end.
ATTRIBUTE_REGION = r"(?:\"[^\"]*\"|'[^']*'|[^'\"<>])*"

OPENING_TAG_RE = re.compile(rf"<(?P<name>{TAG_NAME})(?P<attrs>{ATTRIBUTE_REGION})>")

# Characters that may not follow a tag name, so "pre" never matches "<prefix>"
_NAME_BOUNDARY = r"(?![\w:.\-])"

Span = Tuple[int, int]


def map_attribute_regions(html: str, func: Callable[[str], str]) -> str:
    """Apply ``func`` to the attribute region of every opening tag."""
    def replace(match: re.Match) -> str:
        attrs = match.group("attrs")
        if not attrs:
            return match.group(0)
        return f"<{match.group('name')}{func(attrs)}>"

    return OPENING_TAG_RE.sub(replace, html)


def element_token_pattern(tag: str) -> re.Pattern:
    """Compile a pattern matching opening and closing tags named ``tag``."""
    return re.compile(
        rf"<(?P<closing>/)?{re.escape(tag)}{_NAME_BOUNDARY}(?P<attrs>{ATTRIBUTE_REGION})>",
        re.IGNORECASE,
    )


def opening_tag_pattern(tag: str) -> re.Pattern:
    """Compile a pattern matching only opening tags named ``tag``."""
    return re.compile(
        rf"<{re.escape(tag)}{_NAME_BOUNDARY}{ATTRIBUTE_REGION}>",
        re.IGNORECASE,
    )


def closing_tag_pattern(tag: str) -> re.Pattern:
    """Compile a pattern matching only closing tags named ``tag``."""
    return re.compile(rf"</{re.escape(tag)}\s*>", re.IGNORECASE)


def is_self_closing(tag_text: str) -> bool:
    """Check whether an opening tag's text ends in "/>"."""
    return tag_text[:-1].rstrip().endswith("/")


def find_element_spans(html: str, tag: str) -> List[Span]:
    """Find the inner-content span of every ``tag`` element.

    Each opening tag is paired with the nearest closing tag after it, so a
    nested element of the same name ends the span early and a "<script>"
    string literal inside a script does not swallow the rest of the document.
    Elements that are never closed are not reported.

    Returns:
        ``(start, end)`` offsets of the inner content, in document order.
    """
    spans: List[Span] = []
    start = None

    for match in element_token_pattern(tag).finditer(html):
        if match.group("closing"):
            if start is not None:
                spans.append((start, match.start()))
                start = None
        elif start is None and not is_self_closing(match.group(0)):
            start = match.end()

    return spans


def map_spans(html: str, spans: List[Span], func: Callable[[str], str]) -> str:
    """Rebuild ``html`` with ``func`` applied to each (non-overlapping) span."""
    if not spans:
        return html

    parts = []
    cursor = 0
    for start, end in spans:
        parts.append(html[cursor:start])
        parts.append(func(html[start:end]))
        cursor = end
    parts.append(html[cursor:])
    return "".join(parts)
