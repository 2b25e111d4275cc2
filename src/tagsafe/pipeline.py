"""Protection stages and the formatting pipeline.

A formatting request runs:

    validate config -> detect HTML -> protect attributes -> protect brackets
    -> encode ignored elements -> formatter -> trim -> decode ignored elements
    -> unprotect brackets -> unprotect attributes

Stages are undone in exactly the reverse order they were applied, because each
stage relies on the earlier ones having neutralised the characters it must not
misinterpret.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from .attributes import (
    protect_attributes,
    protect_brackets,
    unprotect_attributes,
    unprotect_brackets,
)
from .config import DEFAULT_CONFIG, Config, validate_config
from .detector import is_html
from .ignore import decode_ignored_elements, encode_ignored_elements
from .log import get_logger
from .trim import trim_elements

# The reformatting step. It receives protected markup and must treat marker
# text as opaque and never introduce the markers itself.
Formatter = Callable[[str, Config], str]


def identity_formatter(html: str, config: Config) -> str:
    """Formatter that returns the markup unchanged."""
    return html


class ProtectionStage(ABC):
    """Base class for a reversible encoding stage."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable stage name."""
        pass

    @property
    @abstractmethod
    def slug(self) -> str:
        """Canonical short identifier (e.g., 'attributes')."""
        pass

    @abstractmethod
    def protect(self, html: str, config: Config) -> str:
        """Encode characters that later stages must not see."""
        pass

    @abstractmethod
    def restore(self, html: str, config: Config) -> str:
        """Reverse :meth:`protect`."""
        pass

    def should_apply(self, config: Config) -> bool:
        """Return True if this stage has anything to do for ``config``."""
        return True


class AttributeProtector(ProtectionStage):
    """Encode whitespace inside opening-tag attribute regions."""

    @property
    def name(self) -> str:
        return "AttributeProtector"

    @property
    def slug(self) -> str:
        return "attributes"

    def protect(self, html: str, config: Config) -> str:
        return protect_attributes(html)

    def restore(self, html: str, config: Config) -> str:
        return unprotect_attributes(html)


class BracketProtector(ProtectionStage):
    """Encode literal ``<`` and ``>`` inside attribute values."""

    @property
    def name(self) -> str:
        return "BracketProtector"

    @property
    def slug(self) -> str:
        return "brackets"

    def protect(self, html: str, config: Config) -> str:
        return protect_brackets(html)

    def restore(self, html: str, config: Config) -> str:
        return unprotect_brackets(html)


class ElementIgnorer(ProtectionStage):
    """Freeze the inner content of the elements listed in ``config.ignore``."""

    @property
    def name(self) -> str:
        return "ElementIgnorer"

    @property
    def slug(self) -> str:
        return "ignore"

    def should_apply(self, config: Config) -> bool:
        return bool(config.ignore)

    def protect(self, html: str, config: Config) -> str:
        return encode_ignored_elements(html, config)

    def restore(self, html: str, config: Config) -> str:
        return decode_ignored_elements(html, config)


class ProtectionChain:
    """Ordered protection stages, restored in reverse order."""

    def __init__(self, stages: Optional[list[ProtectionStage]] = None):
        self.stages = stages or []

    @classmethod
    def default(cls) -> "ProtectionChain":
        """Attributes, then brackets, then ignored elements."""
        return cls([AttributeProtector(), BracketProtector(), ElementIgnorer()])

    def add(self, stage: ProtectionStage) -> None:
        self.stages.append(stage)

    def protect(self, html: str, config: Config) -> str:
        """Apply every stage in order."""
        for stage in self.stages:
            if stage.should_apply(config):
                get_logger().debug("Protecting with %s", stage.name)
                html = stage.protect(html, config)
        return html

    def restore(self, html: str, config: Config) -> str:
        """Undo every stage, last applied first."""
        for stage in reversed(self.stages):
            if stage.should_apply(config):
                get_logger().debug("Restoring with %s", stage.name)
                html = stage.restore(html, config)
        return html


def format_html(
    html: str,
    config: Any = None,
    formatter: Optional[Formatter] = None,
    check_html: bool = True,
    chain: Optional[ProtectionChain] = None,
) -> str:
    """Run ``formatter`` over ``html`` with attributes and ignored elements protected.

    Args:
        html: Markup to format.
        config: Partial config mapping, a Config, or None for the defaults.
        formatter: Reformatting step. Defaults to :func:`identity_formatter`.
        check_html: Return the input unchanged when it contains no HTML.
        chain: Protection stages to use. Defaults to :meth:`ProtectionChain.default`.

    Returns:
        The formatted markup.

    Raises:
        ConfigError: If ``config`` does not validate.
    """
    validated = DEFAULT_CONFIG if config is None else validate_config(config)

    if check_html and not is_html(html):
        get_logger().debug("No HTML found, returning input unchanged")
        return html

    formatter = formatter or identity_formatter
    chain = chain or ProtectionChain.default()

    protected = chain.protect(html, validated)
    formatted = formatter(protected, validated)

    # Trim before restoring so ignored content can't be trimmed
    if validated.trim:
        formatted = trim_elements(formatted, validated.trim)

    return chain.restore(formatted, validated)
