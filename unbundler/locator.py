"""Locate the webpack bootstrap call inside a parsed bundle."""

from __future__ import annotations

import logging
from typing import Any, Optional

from .js_ast import Node, Syntax, is_function_literal

LOG = logging.getLogger(__name__)


def is_webpack_wrapper(node: Any) -> bool:
    """Return ``True`` when ``node`` looks like ``(function(modules){...})([...])``.

    The callee must be a function literal taking a single parameter (the
    module array) and the call must pass exactly one array literal.  The
    array elements are not inspected.
    """

    if Syntax.of(node) is not Syntax.CALL_EXPRESSION:
        return False
    callee = node.get("callee")
    arguments = node.get("arguments") or ()
    return (
        is_function_literal(callee)
        and len(callee.get("params") or ()) == 1
        and len(arguments) == 1
        and Syntax.of(arguments[0]) is Syntax.ARRAY_EXPRESSION
    )


def find_webpack_expression(node: Any) -> Optional[Node]:
    """Depth-first search for the first webpack wrapper call in ``node``.

    The search does not backtrack: a call that is not a wrapper is only
    searched through its callee, so wrappers passed as arguments are never
    considered.
    """

    kind = Syntax.of(node)
    if kind is Syntax.CALL_EXPRESSION:
        if is_webpack_wrapper(node):
            LOG.debug("found webpack wrapper with %d modules", len(node["arguments"][0].get("elements") or ()))
            return node
        return find_webpack_expression(node.get("callee"))

    # Minifiers turn the IIFE into ``!function(e){...}([...])``.
    if kind is Syntax.UNARY_EXPRESSION:
        return find_webpack_expression(node.get("argument"))

    if kind is Syntax.EXPRESSION_STATEMENT:
        return find_webpack_expression(node.get("expression"))

    if isinstance(node, Node):
        body = node.get("body")
        if isinstance(body, tuple):
            for child in body:
                result = find_webpack_expression(child)
                if result is not None:
                    return result
        elif Syntax.of(body) is Syntax.BLOCK_STATEMENT:
            return find_webpack_expression(body)

    return None


__all__ = ["find_webpack_expression", "is_webpack_wrapper"]
