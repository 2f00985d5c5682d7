"""Input and output helpers for bundle files."""

from .loader import BundleSource, load_bundle, load_bundle_file
from .writer import WriteResult, module_path, replace_file, write_module

__all__ = [
    "BundleSource",
    "WriteResult",
    "load_bundle",
    "load_bundle_file",
    "module_path",
    "replace_file",
    "write_module",
]
