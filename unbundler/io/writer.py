"""Write extracted modules to ``<output>/<name>.js`` files."""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

LOGGER = logging.getLogger(__name__)

MODULE_SUFFIX = ".js"


@dataclass
class WriteResult:
    name: str
    path: Path
    success: bool
    error: Optional[str] = None


def module_path(output_dir: Path, name: str) -> Path:
    """Destination for module ``name``; names may contain ``/`` separators."""

    return output_dir / f"{name}{MODULE_SUFFIX}"


def replace_file(path: Path, text: str) -> None:
    """Swap ``text`` into ``path`` through a temporary sibling file.

    Readers never observe a half-written module; missing parent directories
    are created first.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    staging = tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", suffix=".part", delete=False
    )
    try:
        with staging:
            staging.write(text)
        os.replace(staging.name, path)
    except OSError:
        Path(staging.name).unlink(missing_ok=True)
        raise


def _inside(path: Path, root: Path) -> bool:
    try:
        path.resolve().relative_to(root.resolve())
    except ValueError:
        return False
    return True


def write_module(output_dir: Path, name: str, content: str) -> WriteResult:
    destination = module_path(output_dir, name)
    if not _inside(destination, output_dir):
        message = "module path escapes the output directory"
        LOGGER.warning("refusing to write %s: %s", destination, message)
        return WriteResult(name=name, path=destination, success=False, error=message)
    try:
        replace_file(destination, content)
    except OSError as exc:
        LOGGER.error("failed to write %s: %s", destination, exc)
        return WriteResult(name=name, path=destination, success=False, error=str(exc))
    LOGGER.debug("wrote %d characters to %s", len(content), destination)
    return WriteResult(name=name, path=destination, success=True)


__all__ = ["MODULE_SUFFIX", "WriteResult", "module_path", "replace_file", "write_module"]
