"""Error taxonomy for the viewport engine and its surroundings."""
from __future__ import annotations


class ViewportError(Exception):
    """Base class for every recoverable viewer condition."""


class SingularTransformError(ViewportError):
    """The view transform cannot be inverted (zero zoom or zero scale rate)."""


class UnsupportedOperationError(ViewportError):
    """The operation is not available for the current coordinate regime."""


class InvalidArgumentError(ViewportError, ValueError):
    """A magnitude or bound was rejected before any state was touched."""


class ConfigError(ViewportError, ValueError):
    """A configuration or scenario file could not be understood."""
