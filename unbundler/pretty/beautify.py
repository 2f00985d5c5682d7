"""Pretty-print generated module sources with :mod:`jsbeautifier`."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import jsbeautifier

LOG = logging.getLogger(__name__)

DEFAULT_INDENT_SIZE = 2


@dataclass
class BeautifyResult:
    text: str
    changed: bool


def _options(indent_size: int):
    opts = jsbeautifier.default_options()
    opts.indent_size = indent_size
    opts.end_with_newline = True
    opts.preserve_newlines = True
    opts.max_preserve_newlines = 2
    return opts


def beautify(source: str, *, indent_size: int = DEFAULT_INDENT_SIZE) -> BeautifyResult:
    """Reformat ``source``; the result always ends with a newline."""

    text = jsbeautifier.beautify(source, _options(indent_size))
    if not text.endswith("\n"):
        text += "\n"
    return BeautifyResult(text=text, changed=text != source)


def beautify_module(source: str, *, indent_size: int = DEFAULT_INDENT_SIZE, enabled: bool = True) -> str:
    """Text written to a module file.

    The beautified body is followed by one blank line.
    """

    if not enabled:
        return source if source.endswith("\n") else source + "\n"
    result = beautify(source, indent_size=indent_size)
    if not result.changed:
        LOG.debug("beautifier left module source unchanged")
    return result.text + "\n"


__all__ = ["BeautifyResult", "DEFAULT_INDENT_SIZE", "beautify", "beautify_module"]
