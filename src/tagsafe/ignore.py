"""Freeze the inner content of ignored elements.

Inside each ignored element, ``<``, ``>`` and whitespace are replaced by
dash-delimited tokens built from ``config.ignore_with``, e.g. with the marker
``X``: ``<`` -> ``-Xlt-``, newline -> ``-Xnl-``, tab -> ``-Xws9-``. The tags
themselves are left alone so the element still looks like an element to the
reformatting step.
"""

import re

from .attributes import decode_code, encode_char
from .config import Config
from .log import get_logger
from .tags import find_element_spans, map_spans

_STRUCTURAL_RE = re.compile(r"[<>\s]")


def _encoded_token_pattern(marker: str) -> re.Pattern:
    return re.compile("-" + re.escape(marker) + r"(lt|gt|nl|cr|ws[0-9a-f]*)-")


def encode_ignored_elements(html: str, config: Config) -> str:
    """Encode the inner content of every element named in ``config.ignore``."""
    marker = config.ignore_with

    def encode(content: str) -> str:
        return _STRUCTURAL_RE.sub(lambda m: f"-{marker}{encode_char(m.group(0))}-", content)

    for tag in config.ignore:
        spans = find_element_spans(html, tag)
        get_logger().debug("Ignoring %d <%s> element(s)", len(spans), tag)
        html = map_spans(html, spans, encode)

    return html


def decode_ignored_elements(html: str, config: Config) -> str:
    """Restore content encoded by :func:`encode_ignored_elements`."""
    token_re = _encoded_token_pattern(config.ignore_with)

    def decode(content: str) -> str:
        return token_re.sub(lambda m: decode_code(m.group(1)), content)

    for tag in config.ignore:
        html = map_spans(html, find_element_spans(html, tag), decode)

    return html
