"""Exceptions raised while validating and loading configuration."""

from typing import Optional


class ConfigError(ValueError):
    """Base class for configuration errors."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class ConfigTypeError(ConfigError, TypeError):
    """The configuration itself has the wrong shape (not a mapping)."""


class ConfigValidationError(ConfigError):
    """A recognised field holds a value of the wrong type."""


class ConfigRangeError(ConfigError):
    """A numeric field is out of range or not a safely representable integer."""


class ConfigFileError(ConfigError):
    """A configuration file could not be parsed."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
