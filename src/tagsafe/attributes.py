"""Protect characters inside opening-tag attribute regions.

Two independent encode/decode pairs share the ``ATTRIBUTE_IGNORE_STRING``
marker:

- whitespace: ``\\n`` -> ``<marker>nl!``, ``\\r`` -> ``<marker>cr!``,
  space -> ``<marker>ws!``, other whitespace -> ``<marker>ws<hex>!``
- brackets: ``<`` -> ``<marker>lt!``, ``>`` -> ``<marker>gt!``

Neither pair adds or removes quotes or brackets from the tag itself, so the
attribute regions found before and after encoding are the same and the pairs
can be applied and undone in either order.
"""

import re

from .constants import ATTRIBUTE_IGNORE_STRING
from .tags import map_attribute_regions

_MARKER = re.escape(ATTRIBUTE_IGNORE_STRING)

_WHITESPACE_RE = re.compile(r"\s")
_BRACKET_RE = re.compile(r"[<>]")

_ENCODED_WHITESPACE_RE = re.compile(_MARKER + r"(nl|cr|ws[0-9a-f]*)!")
_ENCODED_BRACKET_RE = re.compile(_MARKER + r"(lt|gt)!")

CHAR_CODES = {"\n": "nl", "\r": "cr", " ": "ws", "<": "lt", ">": "gt"}
CODE_CHARS = {code: char for char, code in CHAR_CODES.items()}


def encode_char(char: str) -> str:
    """Return the code for a protected character (``ws<hex>`` for rare whitespace)."""
    return CHAR_CODES.get(char) or f"ws{ord(char):x}"


def decode_code(code: str) -> str:
    """Inverse of :func:`encode_char`."""
    if code in CODE_CHARS:
        return CODE_CHARS[code]
    return chr(int(code[2:], 16))


def _encode_whitespace(attrs: str) -> str:
    return _WHITESPACE_RE.sub(
        lambda m: f"{ATTRIBUTE_IGNORE_STRING}{encode_char(m.group(0))}!", attrs
    )


def _decode_whitespace(attrs: str) -> str:
    return _ENCODED_WHITESPACE_RE.sub(lambda m: decode_code(m.group(1)), attrs)


def _encode_brackets(attrs: str) -> str:
    return _BRACKET_RE.sub(
        lambda m: f"{ATTRIBUTE_IGNORE_STRING}{encode_char(m.group(0))}!", attrs
    )


def _decode_brackets(attrs: str) -> str:
    return _ENCODED_BRACKET_RE.sub(lambda m: decode_code(m.group(1)), attrs)


def protect_attributes(html: str) -> str:
    """Encode whitespace inside attribute regions so reformatting can't touch it."""
    return map_attribute_regions(html, _encode_whitespace)


def unprotect_attributes(html: str) -> str:
    """Restore whitespace encoded by :func:`protect_attributes`."""
    return map_attribute_regions(html, _decode_whitespace)


def protect_brackets(html: str) -> str:
    """Encode literal ``<`` and ``>`` that appear inside attribute values."""
    return map_attribute_regions(html, _encode_brackets)


def unprotect_brackets(html: str) -> str:
    """Restore brackets encoded by :func:`protect_brackets`."""
    return map_attribute_regions(html, _decode_brackets)
