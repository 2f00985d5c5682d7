"""Read bundle text from a file or standard input."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

from ..exceptions import BundleLoadError

LOGGER = logging.getLogger(__name__)

STDIN_MARKER = "-"


@dataclass
class BundleSource:
    """Bundle text together with a label describing where it came from."""

    text: str
    origin: str

    @property
    def from_stdin(self) -> bool:
        return self.origin == "<stdin>"


def load_bundle_file(path: Path, *, encoding: str = "utf-8") -> BundleSource:
    if not path.is_file():
        raise BundleLoadError(f"input file not found: {path}")
    try:
        text = path.read_text(encoding=encoding, errors="replace")
    except OSError as exc:
        raise BundleLoadError(f"failed to read {path}: {exc}") from exc
    LOGGER.debug("read %d characters from %s", len(text), path)
    return BundleSource(text=text, origin=str(path))


def load_bundle(input_path: Optional[str], *, stdin: Optional[TextIO] = None) -> BundleSource:
    """Load the bundle named by ``input_path``.

    ``"-"`` reads standard input explicitly.  Without a path, standard input
    is used only when it is not an interactive terminal.
    """

    stream = sys.stdin if stdin is None else stdin
    if input_path and input_path != STDIN_MARKER:
        return load_bundle_file(Path(input_path))
    if input_path == STDIN_MARKER or (stream is not None and not stream.isatty()):
        text = stream.read() if stream is not None else ""
        LOGGER.debug("read %d characters from standard input", len(text))
        return BundleSource(text=text, origin="<stdin>")
    raise BundleLoadError("Missing input path!")


__all__ = ["BundleSource", "STDIN_MARKER", "load_bundle", "load_bundle_file"]
