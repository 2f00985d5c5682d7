"""Module name inference from ``exports`` assignments."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .js_ast import Node, Syntax, is_function_literal, iter_children

LOG = logging.getLogger(__name__)

_EXPORTS_PATH_RE = re.compile(r"^(.+\.)?exports$")
_SUFFIX_FORMAT = "{base}__{index}"


def fallback_module_name(module_id: int) -> str:
    return f"module-{module_id}"


def literal_text(value: Any) -> str:
    """Render a literal's value the way JavaScript stringifies it."""

    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def flatten_member_expression(node: Any) -> str:
    """Collapse identifiers, literals and member chains into a dotted path."""

    kind = Syntax.of(node)
    if kind is Syntax.FUNCTION_EXPRESSION:
        function_id = node.get("id")
        return function_id["name"] if Syntax.of(function_id) is Syntax.IDENTIFIER else ""
    if kind is Syntax.LITERAL:
        return literal_text(node.get("value"))
    if kind is Syntax.IDENTIFIER:
        return node["name"]
    if kind is Syntax.MEMBER_EXPRESSION:
        owner = node.get("object")
        if node.get("computed"):
            head = owner["name"] if Syntax.of(owner) is Syntax.IDENTIFIER else ""
        else:
            head = flatten_member_expression(owner)
        return f"{head}.{flatten_member_expression(node.get('property'))}"
    return ""


def _unique_name(base: str, taken: Any) -> str:
    candidate = base
    index = 0
    while candidate in taken:
        index += 1
        candidate = _SUFFIX_FORMAT.format(base=base, index=index)
    return candidate


def find_module_exports(node: Any, module_exports: Optional[Dict[str, bool]] = None) -> Dict[str, bool]:
    """Return candidate module names found in ``exports`` assignments.

    Keys keep discovery order; the first one is the primary candidate.
    Repeated candidates are suffixed ``__1``, ``__2`` and so on.
    """

    if module_exports is None:
        module_exports = {}
    if isinstance(node, tuple):
        for element in node:
            find_module_exports(element, module_exports)
    elif isinstance(node, Node):
        if node.kind is Syntax.ASSIGNMENT_EXPRESSION:
            if _EXPORTS_PATH_RE.match(flatten_member_expression(node.get("left"))):
                inferred = flatten_member_expression(node.get("right"))
                module_exports[_unique_name(inferred, module_exports)] = True
        for _, child in iter_children(node):
            find_module_exports(child, module_exports)
    return module_exports


def primary_export_name(module: Any) -> str:
    """First export candidate of a function-literal module, or ``""``."""

    if not is_function_literal(module) or module.get("body") is None:
        return ""
    candidates = list(find_module_exports(module["body"]))
    return candidates[0] if candidates else ""


@dataclass
class ExportNameRegistry:
    """Names chosen for the modules of one extraction run.

    Only export-derived names take part in bundle-wide disambiguation.  A
    derived name equal to another module's ``module-<id>`` fallback is kept
    as-is.
    """

    names: Dict[int, str] = field(default_factory=dict)
    _claimed: Dict[str, int] = field(default_factory=dict)

    def claim(self, module_id: int, candidate: str) -> str:
        if not candidate:
            name = fallback_module_name(module_id)
            LOG.debug("module %d has no export assignment, using %s", module_id, name)
        else:
            name = _unique_name(candidate, self._claimed)
            if name != candidate:
                LOG.debug("module %d export name %r already taken, using %r", module_id, candidate, name)
            self._claimed[name] = module_id
        self.names[module_id] = name
        return name

    def resolve(self, module_id: Any) -> Optional[str]:
        """Name for a ``require`` argument value, or ``None`` when unknown."""

        index = module_index(module_id)
        if index is None:
            return None
        return self.names.get(index)


def module_index(value: Any) -> Optional[int]:
    """Interpret a ``require`` argument literal as a module id."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    # Module ids are object keys, so only the canonical spelling of an id matches.
    if isinstance(value, str) and value.isascii() and value.isdigit() and str(int(value)) == value:
        return int(value)
    return None


__all__ = [
    "ExportNameRegistry",
    "fallback_module_name",
    "find_module_exports",
    "flatten_member_expression",
    "literal_text",
    "module_index",
    "primary_export_name",
]
