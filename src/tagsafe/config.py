"""Configuration model, deep merge and validation.

A configuration is either exactly ``DEFAULT_CONFIG`` or the deep merge of a
validated partial override onto it. Configs are frozen; every merge builds a
new object and never writes through to the defaults or the caller's input.
"""

import copy
import math
import numbers
import re
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from typing import Any, Tuple, Union

from .constants import (
    CONFIG_KEYS,
    DEFAULTS,
    MAX_SAFE_INTEGER,
    TAB_SIZE_MAX,
    TAB_SIZE_MIN,
)
from .errors import ConfigRangeError, ConfigTypeError, ConfigValidationError
from .log import get_logger

# A bare tag name: no brackets, slashes or whitespace
_TAG_NAME_RE = re.compile(r"[^\s<>/]+")


@dataclass(frozen=True)
class Config:
    """Validated formatter configuration."""

    ignore: Tuple[str, ...] = DEFAULTS["ignore"]
    """Elements whose inner content is left untouched."""

    ignore_with: str = DEFAULTS["ignore_with"]
    """Marker used to encode the content of ignored elements."""

    strict: bool = DEFAULTS["strict"]
    tab_size: int = DEFAULTS["tab_size"]
    tag_wrap: bool = DEFAULTS["tag_wrap"]
    tag_wrap_width: Union[int, float] = DEFAULTS["tag_wrap_width"]

    trim: Tuple[str, ...] = DEFAULTS["trim"]
    """Elements whose leading/trailing inner whitespace is removed."""

    def to_dict(self) -> dict:
        """Return a plain dict copy, with lists in place of tuples."""
        data = asdict(self)
        data["ignore"] = list(self.ignore)
        data["trim"] = list(self.trim)
        return data

    @classmethod
    def from_dict(cls, data: Mapping) -> "Config":
        """Build a Config from a mapping holding every recognised key."""
        values = {}
        for f in fields(cls):
            value = data[f.name]
            if isinstance(value, list):
                value = tuple(value)
            values[f.name] = value
        return cls(**values)


DEFAULT_CONFIG = Config()


def merge_objects(current: Any, updates: Any) -> Any:
    """Structurally deep-merge ``updates`` onto ``current``.

    Sequences are concatenated (``current`` first), mappings are merged key
    by key, and anything else in ``updates`` replaces the existing value.
    Neither argument is modified.
    """
    if current is None or updates is None:
        raise ValueError("Both 'current' and 'updates' must be passed to merge_objects()")

    if _is_sequence(current):
        return list(copy.deepcopy(current)) + list(copy.deepcopy(updates))

    if isinstance(current, Mapping):
        merged = copy.deepcopy(dict(current))
        for key, value in updates.items():
            if isinstance(value, Mapping):
                merged[key] = merge_objects(merged.get(key) or {}, value)
            elif _is_sequence(value):
                existing = merged.get(key)
                merged[key] = merge_objects(existing if _is_sequence(existing) else [], value)
            else:
                merged[key] = value
        return merged

    return copy.deepcopy(updates)


def merge_config(defaults: Union[Config, Mapping], overrides: Mapping) -> Config:
    """Merge a validated partial config onto ``defaults``.

    A mapping of defaults may be partial; missing keys come from ``DEFAULTS``.
    """
    if isinstance(defaults, Config):
        base = defaults.to_dict()
    else:
        base = DEFAULT_CONFIG.to_dict()
        base.update(copy.deepcopy(dict(defaults)))
    return Config.from_dict(merge_objects(base, overrides))


def validate_config(config: Any) -> Config:
    """Validate a partial configuration and merge it with the defaults.

    Args:
        config: A mapping holding any of the recognised keys, or a Config.

    Returns:
        ``DEFAULT_CONFIG`` when no recognised key is present, otherwise a new
        merged Config.

    Raises:
        ConfigTypeError: ``config`` is not a mapping.
        ConfigValidationError: a field has the wrong type.
        ConfigRangeError: ``tab_size`` is unsafe or outside 1-16.
    """
    if isinstance(config, Config):
        return config

    if not isinstance(config, Mapping):
        raise ConfigTypeError(f"Config must be a mapping, not {type(config).__name__}.")

    unknown = [str(key) for key in config if key not in CONFIG_KEYS]
    if unknown:
        get_logger().debug("Ignoring unknown config keys: %s", ", ".join(sorted(unknown)))

    if not any(key in config for key in CONFIG_KEYS):
        return DEFAULT_CONFIG

    # None means "not set", e.g. an empty key in a YAML file
    partial = {key: config[key] for key in CONFIG_KEYS if config.get(key) is not None}

    if "tab_size" in partial:
        partial["tab_size"] = _validate_tab_size(partial["tab_size"])

    for key in ("ignore", "trim"):
        if key in partial:
            partial[key] = _validate_tag_list(key, partial[key])

    if "ignore_with" in partial:
        ignore_with = partial["ignore_with"]
        if not isinstance(ignore_with, str):
            raise ConfigValidationError(
                f"ignore_with config must be a string, not {type(ignore_with).__name__}.",
                field="ignore_with",
            )
        if not ignore_with:
            raise ConfigValidationError("ignore_with config must not be empty.", field="ignore_with")

    for key in ("strict", "tag_wrap"):
        if key in partial and not isinstance(partial[key], bool):
            raise ConfigValidationError(
                f"{key} config must be a boolean, not {type(partial[key]).__name__}.",
                field=key,
            )

    if "tag_wrap_width" in partial and not _is_number(partial["tag_wrap_width"]):
        raise ConfigValidationError(
            f"tag_wrap_width config must be a number, not {type(partial['tag_wrap_width']).__name__}.",
            field="tag_wrap_width",
        )

    return merge_config(DEFAULT_CONFIG, partial)


def _validate_tab_size(tab_size: Any) -> int:
    if not _is_number(tab_size):
        raise ConfigValidationError(
            f"tab_size must be a number, not {type(tab_size).__name__}.",
            field="tab_size",
        )

    if not _is_safe(tab_size):
        raise ConfigRangeError(
            f"Tab size {tab_size} is not safe. Expecting a finite value no larger "
            f"than {MAX_SAFE_INTEGER} in magnitude.",
            field="tab_size",
        )

    # Round down, so a value like 4.0 or 4.9 becomes 4
    tab_size = math.floor(tab_size)
    if tab_size < TAB_SIZE_MIN or tab_size > TAB_SIZE_MAX:
        raise ConfigRangeError(
            f"Tab size {tab_size} out of range. Expecting {TAB_SIZE_MIN} to {TAB_SIZE_MAX}.",
            field="tab_size",
        )

    return tab_size


def _validate_tag_list(key: str, value: Any) -> list:
    label = key.capitalize()
    if not _is_sequence(value) or not all(isinstance(item, str) for item in value):
        raise ConfigValidationError(f"{label} config must be a list of strings.", field=key)

    for item in value:
        if not _TAG_NAME_RE.fullmatch(item):
            raise ConfigValidationError(
                f"{label} config entries must be bare tag names, got {item!r}.",
                field=key,
            )

    return list(value)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_safe(value: numbers.Real) -> bool:
    if isinstance(value, numbers.Integral):
        return abs(value) <= MAX_SAFE_INTEGER
    return math.isfinite(value) and abs(value) <= MAX_SAFE_INTEGER
