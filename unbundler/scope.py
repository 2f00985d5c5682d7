"""Function-scope declaration discovery.

Webpack emits ES5 modules where ``var`` declarations and function
declarations are hoisted to the enclosing function.  The extractor uses the
names found here to stop substituting a module parameter once a nested scope
re-declares it.
"""

from __future__ import annotations

from typing import Any, List

from .js_ast import Node, Syntax, iter_children


def binding_names(pattern: Any) -> List[str]:
    """Return the identifiers bound by a parameter or declarator ``pattern``."""

    kind = Syntax.of(pattern)
    if kind is Syntax.IDENTIFIER:
        return [pattern["name"]]
    if kind is Syntax.ASSIGNMENT_PATTERN:
        return binding_names(pattern.get("left"))
    if kind is Syntax.REST_ELEMENT:
        return binding_names(pattern.get("argument"))
    if kind is Syntax.ARRAY_PATTERN:
        names: List[str] = []
        for element in pattern.get("elements") or ():
            names.extend(binding_names(element))
        return names
    if kind is Syntax.OBJECT_PATTERN:
        names = []
        for prop in pattern.get("properties") or ():
            if Syntax.of(prop) is Syntax.PROPERTY:
                names.extend(binding_names(prop.get("value")))
            else:
                names.extend(binding_names(prop))
        return names
    return []


def get_scope_variables(node: Any, scope_variables: List[str] | None = None) -> List[str]:
    """Collect names declared with function scope anywhere below ``node``.

    ``var`` declarators and function declaration names are reported;
    ``let``/``const`` declarations are skipped.  A variable declaration is
    not searched any further, so functions nested in its initialisers do not
    contribute.  Names may repeat in the returned list.
    """

    if scope_variables is None:
        scope_variables = []
    if isinstance(node, tuple):
        for element in node:
            get_scope_variables(element, scope_variables)
    elif isinstance(node, Node):
        kind = node.kind
        if kind is Syntax.VARIABLE_DECLARATION:
            if node.get("kind") == "var":
                for declaration in node.get("declarations") or ():
                    scope_variables.extend(binding_names(declaration.get("id")))
            return scope_variables
        if kind is Syntax.FUNCTION_DECLARATION:
            scope_variables.extend(binding_names(node.get("id")))
        for _, child in iter_children(node):
            get_scope_variables(child, scope_variables)
    return scope_variables


def function_param_names(function: Node) -> List[str]:
    """Names bound by the formal parameter list of ``function``."""

    names: List[str] = []
    for param in function.get("params") or ():
        names.extend(binding_names(param))
    return names


__all__ = ["binding_names", "function_param_names", "get_scope_variables"]
