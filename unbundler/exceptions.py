"""Custom exception hierarchy for the unpacker."""

from __future__ import annotations


class UnbundleError(Exception):
    """Base class for all unpacking related errors."""


class BundleLoadError(UnbundleError):
    """Raised when no bundle text could be read."""


class BundleParseError(UnbundleError):
    """Raised when the bundle text is not valid ECMAScript."""


class WrapperNotFoundError(UnbundleError):
    """Raised when the bundle does not contain a webpack registry call."""


class UnsupportedNodeError(UnbundleError):
    """Raised when the code generator meets a node kind it cannot print."""


__all__ = [
    "BundleLoadError",
    "BundleParseError",
    "UnbundleError",
    "UnsupportedNodeError",
    "WrapperNotFoundError",
]
