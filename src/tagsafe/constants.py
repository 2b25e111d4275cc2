"""Shared constants: default configuration values, sentinels and void elements."""

# Default configuration values. Lists are stored as tuples so the defaults
# can be shared without being mutated.
DEFAULTS = {
    "ignore": (),
    "ignore_with": "_!i-£___£%_",
    "strict": False,
    "tab_size": 2,
    "tag_wrap": False,
    "tag_wrap_width": 80,
    "trim": (),
}

CONFIG_KEYS = tuple(DEFAULTS)

# Marker used to encode characters inside opening-tag attribute regions.
# Collisions with real content are undefined behaviour.
ATTRIBUTE_IGNORE_STRING = "!i-£___£%_"

# Largest integer a double can represent exactly (2**53 - 1)
MAX_SAFE_INTEGER = 9007199254740991

TAB_SIZE_MIN = 1
TAB_SIZE_MAX = 16

VOID_ELEMENTS = frozenset([
    "area", "base", "br", "col", "embed", "hr",
    "img", "input", "link", "meta",
    "param", "source", "track", "wbr",
])


def is_void_element(name: str) -> bool:
    """Return True if ``name`` is an element that never has content or a closing tag."""
    return name.lower() in VOID_ELEMENTS
