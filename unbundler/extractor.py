"""Split a webpack module array into standalone, named module sources.

Extraction runs in two passes.  Every module is named first (see
:mod:`unbundler.exports`) so that ``require`` calls can be rewritten no
matter where the target module sits in the array.  The second pass rewrites
each module body:

* the webpack runtime parameters (``function(e, t, n)``) are renamed to
  ``module``, ``exports`` and ``require`` unless a nested scope shadows them;
* ``require(<id>)`` calls naming a known module become ``require('./<name>')``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .codegen import generate
from .exports import ExportNameRegistry, primary_export_name
from .js_ast import Node, NodeTransformer, Syntax, is_function_literal, map_children
from .scope import binding_names, function_param_names, get_scope_variables

LOG = logging.getLogger(__name__)


class Role(str, Enum):
    """Canonical names of the webpack module function parameters."""

    MODULE = "module"
    EXPORTS = "exports"
    REQUIRE = "require"


WEBPACK_MODULE_PARAMS: Tuple[Role, ...] = (Role.MODULE, Role.EXPORTS, Role.REQUIRE)

Renderer = Callable[[Any], str]


class ParameterMap(Mapping[str, Role]):
    """Read-only name → role mapping threaded through one module's rewrite.

    Entries are only ever removed; :meth:`without` returns ``self`` when none
    of the given names are mapped so unchanged scopes share the same map.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Mapping[str, Role]] = None) -> None:
        self._entries: Mapping[str, Role] = MappingProxyType(dict(entries or {}))

    @classmethod
    def for_params(cls, params: Iterable[Any]) -> "ParameterMap":
        """Bind the first three identifier parameters positionally to their roles."""

        entries: Dict[str, Role] = {}
        for role, param in zip(WEBPACK_MODULE_PARAMS, params):
            if Syntax.of(param) is Syntax.IDENTIFIER:
                entries[param["name"]] = role
        return cls(entries)

    def __getitem__(self, name: str) -> Role:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def role_of(self, name: Any) -> Optional[Role]:
        if not isinstance(name, str):
            return None
        return self._entries.get(name)

    def without(self, names: Iterable[str]) -> "ParameterMap":
        dropped = {name for name in names if name in self._entries}
        if not dropped:
            return self
        return ParameterMap({key: role for key, role in self._entries.items() if key not in dropped})

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"ParameterMap({dict(self._entries)!r})"


def _require_literal(value: str) -> Node:
    return Node.make(Syntax.LITERAL.value, value=value)


class ParamRemapper(NodeTransformer):
    """Copy-on-write rewrite of one module body under a :class:`ParameterMap`."""

    def __init__(self, param_map: ParameterMap, registry: ExportNameRegistry) -> None:
        self.param_map = param_map
        self.registry = registry
        self.renamed = 0
        self.requires_rewritten = 0
        self.requires_unresolved = 0

    def _with_map(self, value: Any, param_map: ParameterMap) -> Any:
        if param_map is self.param_map:
            return self.visit(value)
        outer = self.param_map
        self.param_map = param_map
        try:
            return self.visit(value)
        finally:
            self.param_map = outer

    def _recurse(self, node: Node, skip: Iterable[str] = ("params",)) -> Node:
        return map_children(node, self.visit, skip=skip)

    def visit(self, value: Any) -> Any:
        if not self.param_map:
            return value
        return super().visit(value)

    # -- arrays ----------------------------------------------------------
    def visit_array(self, value: Tuple[Any, ...]) -> Any:
        scoped = self.param_map.without(get_scope_variables(value))
        if scoped is self.param_map:
            return map_children(value, self.visit)
        return map_children(value, lambda item: self._with_map(item, scoped))

    # -- functions -------------------------------------------------------
    def _visit_function(self, node: Node) -> Node:
        scoped = self.param_map.without(function_param_names(node))
        return map_children(node, lambda item: self._with_map(item, scoped), skip=("params",))

    visit_FunctionExpression = _visit_function
    visit_FunctionDeclaration = _visit_function
    visit_ArrowFunctionExpression = _visit_function

    def visit_CatchClause(self, node: Node) -> Node:
        scoped = self.param_map.without(binding_names(node.get("param")))
        return map_children(node, lambda item: self._with_map(item, scoped), skip=("param",))

    # -- references ------------------------------------------------------
    def visit_Identifier(self, node: Node) -> Node:
        role = self.param_map.role_of(node.get("name"))
        if role is None:
            return node
        self.renamed += 1
        return node.replace(name=role.value)

    def visit_CallExpression(self, node: Node) -> Node:
        callee = node.get("callee")
        arguments = node.get("arguments") or ()
        if (
            Syntax.of(callee) is Syntax.IDENTIFIER
            and self.param_map.role_of(callee.get("name")) is Role.REQUIRE
            and len(arguments) == 1
            and Syntax.of(arguments[0]) is Syntax.LITERAL
        ):
            module_id = arguments[0].get("value")
            module_name = self.registry.resolve(module_id)
            if module_name is not None:
                node = node.replace(arguments=(_require_literal(f"./{module_name}"),))
                self.requires_rewritten += 1
            else:
                LOG.debug("leaving unresolved require(%r) untouched", module_id)
                self.requires_unresolved += 1
        return self._recurse(node)

    # Property names and labels are not variable references.
    def visit_MemberExpression(self, node: Node) -> Node:
        if node.get("computed"):
            return self._recurse(node)
        return self._recurse(node, skip=("property",))

    def _visit_keyed(self, node: Node) -> Node:
        if node.get("computed"):
            return self._recurse(node)
        if node.get("shorthand") and Syntax.of(node.get("value")) is Syntax.IDENTIFIER:
            value = self.visit(node["value"])
            return node.replace(value=value) if value is not node["value"] else node
        return self._recurse(node, skip=("key",))

    visit_Property = _visit_keyed
    visit_MethodDefinition = _visit_keyed

    def _visit_labelled(self, node: Node) -> Node:
        return self._recurse(node, skip=("label",))

    visit_LabeledStatement = _visit_labelled
    visit_BreakStatement = _visit_labelled
    visit_ContinueStatement = _visit_labelled

    def visit_MetaProperty(self, node: Node) -> Node:
        return node

    def generic_visit(self, node: Node) -> Node:
        return self._recurse(node)


@dataclass
class ModuleDescriptor:
    """One entry of the webpack module array."""

    id: int
    body: Any
    name: str = ""
    processed: Any = None
    source: str = ""
    error: Optional[str] = None
    stats: Dict[str, int] = field(default_factory=dict)

    @property
    def is_function_module(self) -> bool:
        return is_function_literal(self.body) and self.body.get("body") is not None


@dataclass
class ModuleTable:
    """Modules of one bundle, indexed by their webpack id."""

    modules: List[ModuleDescriptor]
    registry: ExportNameRegistry

    @classmethod
    def from_elements(cls, elements: Iterable[Any]) -> "ModuleTable":
        """Build the table and name every module before any rewrite happens."""

        registry = ExportNameRegistry()
        modules: List[ModuleDescriptor] = []
        for module_id, element in enumerate(elements):
            if element is None:
                LOG.debug("module slot %d is empty, skipping", module_id)
                continue
            name = registry.claim(module_id, primary_export_name(element))
            modules.append(ModuleDescriptor(id=module_id, body=element, name=name))
        return cls(modules=modules, registry=registry)

    def __len__(self) -> int:
        return len(self.modules)

    def __iter__(self) -> Iterator[ModuleDescriptor]:
        return iter(self.modules)

    def sources_by_name(self) -> Dict[str, str]:
        """Rendered sources keyed by module name; a reused name keeps the later module."""

        modules_by_name: Dict[str, str] = {}
        for module in self.modules:
            if module.name in modules_by_name:
                LOG.warning("module %d reuses name %r; earlier module output is replaced", module.id, module.name)
            modules_by_name[module.name] = module.source
        return modules_by_name


def process_webpack_module(module: Any, registry: ExportNameRegistry) -> Tuple[Any, Dict[str, int]]:
    """Rewrite one module function; non-function modules are returned untouched."""

    if not is_function_literal(module) or module.get("body") is None:
        return module, {}
    param_map = ParameterMap.for_params(module.get("params") or ())
    remapper = ParamRemapper(param_map, registry)
    body = remapper.visit(module["body"])
    stats = {
        "identifiers_renamed": remapper.renamed,
        "requires_rewritten": remapper.requires_rewritten,
        "requires_unresolved": remapper.requires_unresolved,
    }
    return module.replace(body=body), stats


def render_module(module: Any, render: Renderer) -> str:
    """Render a processed module without its wrapping function."""

    if is_function_literal(module) and module.get("body") is not None:
        body = module["body"]
        if Syntax.of(body) is Syntax.BLOCK_STATEMENT:
            return "\n".join(render(statement) for statement in body.get("body") or ())
        return render(body)
    return render(module)


def _module_array(expression: Node) -> Tuple[Any, ...]:
    if Syntax.of(expression) is Syntax.ARRAY_EXPRESSION:
        return expression.get("elements") or ()
    return expression["arguments"][0].get("elements") or ()


def build_module_table(expression: Node, render: Optional[Renderer] = None) -> ModuleTable:
    """Name, rewrite and render every module of a located wrapper call.

    ``expression`` is either the wrapper call or its array argument.  A module
    that fails to render keeps an empty source and records the error; the
    remaining modules are still processed.  ``render`` defaults to
    :func:`unbundler.codegen.generate`.
    """

    if render is None:
        render = generate
    table = ModuleTable.from_elements(_module_array(expression))
    LOG.info("extracting %d modules", len(table))
    for module in table:
        module.processed, module.stats = process_webpack_module(module.body, table.registry)
        try:
            module.source = render_module(module.processed, render)
        except Exception as exc:
            module.error = f"{type(exc).__name__}: {exc}"
            LOG.warning("failed to render module %d (%s): %s", module.id, module.name, exc)
        LOG.debug("module %d -> %s %s", module.id, module.name, module.stats)
    return table


def extract_webpack_expression_modules(expression: Node, render: Optional[Renderer] = None) -> Dict[str, str]:
    """Return ``{module name: source}`` for every module of the wrapper call.

    Names produced by export inference are not checked against other
    modules' ``module-<id>`` fallbacks; when the two coincide the later
    module replaces the earlier one in the result.
    """

    return build_module_table(expression, render).sources_by_name()


__all__ = [
    "ModuleDescriptor",
    "ModuleTable",
    "ParamRemapper",
    "ParameterMap",
    "Role",
    "WEBPACK_MODULE_PARAMS",
    "build_module_table",
    "extract_webpack_expression_modules",
    "process_webpack_module",
    "render_module",
]
