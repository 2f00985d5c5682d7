"""Split webpack bundles back into named module sources."""

from __future__ import annotations

from .exceptions import (
    BundleLoadError,
    BundleParseError,
    UnbundleError,
    UnsupportedNodeError,
    WrapperNotFoundError,
)
from .extractor import build_module_table, extract_webpack_expression_modules
from .locator import find_webpack_expression
from .parser import parse_bundle

__version__ = "0.1.0"

__all__ = [
    "BundleLoadError",
    "BundleParseError",
    "UnbundleError",
    "UnsupportedNodeError",
    "WrapperNotFoundError",
    "__version__",
    "build_module_table",
    "extract_webpack_expression_modules",
    "find_webpack_expression",
    "parse_bundle",
]
