"""Thin wrapper turning bundle source text into a :class:`~unbundler.js_ast.Node` tree."""

from __future__ import annotations

import logging

import esprima
from esprima.error_handler import Error as EsprimaError

from .exceptions import BundleParseError
from .js_ast import Node, from_estree

LOG = logging.getLogger(__name__)


def parse_bundle(source: str, *, tolerant: bool = False) -> Node:
    """Parse ``source`` as an ECMAScript script.

    Node ranges are kept so that the code generator can fall back to the
    original text for syntax it does not know how to print.
    """

    try:
        tree = esprima.parseScript(source, {"range": True, "tolerant": tolerant})
    except EsprimaError as exc:
        raise BundleParseError(f"failed to parse bundle: {exc}") from exc
    LOG.debug("parsed bundle (%d characters, %d top-level statements)", len(source), len(tree.body))
    return from_estree(tree.toDict())


__all__ = ["parse_bundle"]
