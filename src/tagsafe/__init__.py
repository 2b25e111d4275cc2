"""Protect attribute values and ignored elements while reformatting HTML."""

from .attributes import (
    protect_attributes,
    protect_brackets,
    unprotect_attributes,
    unprotect_brackets,
)
from .config import DEFAULT_CONFIG, Config, merge_config, merge_objects, validate_config
from .config_loader import ConfigLoader
from .constants import ATTRIBUTE_IGNORE_STRING, VOID_ELEMENTS, is_void_element
from .detector import is_html
from .errors import (
    ConfigError,
    ConfigFileError,
    ConfigRangeError,
    ConfigTypeError,
    ConfigValidationError,
)
from .ignore import decode_ignored_elements, encode_ignored_elements
from .pipeline import (
    AttributeProtector,
    BracketProtector,
    ElementIgnorer,
    ProtectionChain,
    ProtectionStage,
    format_html,
    identity_formatter,
)
from .trim import trim_elements

__all__ = [
    "ATTRIBUTE_IGNORE_STRING",
    "AttributeProtector",
    "BracketProtector",
    "Config",
    "ConfigError",
    "ConfigFileError",
    "ConfigLoader",
    "ConfigRangeError",
    "ConfigTypeError",
    "ConfigValidationError",
    "DEFAULT_CONFIG",
    "ElementIgnorer",
    "ProtectionChain",
    "ProtectionStage",
    "VOID_ELEMENTS",
    "decode_ignored_elements",
    "encode_ignored_elements",
    "format_html",
    "identity_formatter",
    "is_html",
    "is_void_element",
    "merge_config",
    "merge_objects",
    "protect_attributes",
    "protect_brackets",
    "trim_elements",
    "unprotect_attributes",
    "unprotect_brackets",
    "validate_config",
]
