"""Immutable ECMAScript syntax tree used by the unpacking passes.

Parsed bundles arrive as ESTree dictionaries (see :mod:`unbundler.parser`).
They are converted once into :class:`Node` instances so that every later
pass works on the same read-only structure.  A tree value is one of three
shapes:

* an *array* (``tuple``) of child values, e.g. ``Program.body``;
* a *composite* :class:`Node` carrying a ``type`` tag and named fields;
* a *leaf* (``str``, ``int``, ``float``, ``bool``, ``None`` or a read-only
  mapping such as a template element's ``value``).

Rewrites are copy-on-write: :meth:`Node.replace` and :func:`map_children`
build new nodes and share every subtree that did not change.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Iterator, Mapping, Tuple


class Syntax(str, Enum):
    """ESTree node kinds understood by the unpacker and code generator."""

    ARRAY_EXPRESSION = "ArrayExpression"
    ARRAY_PATTERN = "ArrayPattern"
    ARROW_FUNCTION_EXPRESSION = "ArrowFunctionExpression"
    ASSIGNMENT_EXPRESSION = "AssignmentExpression"
    ASSIGNMENT_PATTERN = "AssignmentPattern"
    AWAIT_EXPRESSION = "AwaitExpression"
    BINARY_EXPRESSION = "BinaryExpression"
    BLOCK_STATEMENT = "BlockStatement"
    BREAK_STATEMENT = "BreakStatement"
    CALL_EXPRESSION = "CallExpression"
    CATCH_CLAUSE = "CatchClause"
    CLASS_BODY = "ClassBody"
    CLASS_DECLARATION = "ClassDeclaration"
    CLASS_EXPRESSION = "ClassExpression"
    CONDITIONAL_EXPRESSION = "ConditionalExpression"
    CONTINUE_STATEMENT = "ContinueStatement"
    DEBUGGER_STATEMENT = "DebuggerStatement"
    DO_WHILE_STATEMENT = "DoWhileStatement"
    EMPTY_STATEMENT = "EmptyStatement"
    EXPRESSION_STATEMENT = "ExpressionStatement"
    FOR_IN_STATEMENT = "ForInStatement"
    FOR_OF_STATEMENT = "ForOfStatement"
    FOR_STATEMENT = "ForStatement"
    FUNCTION_DECLARATION = "FunctionDeclaration"
    FUNCTION_EXPRESSION = "FunctionExpression"
    IDENTIFIER = "Identifier"
    IF_STATEMENT = "IfStatement"
    LABELED_STATEMENT = "LabeledStatement"
    LITERAL = "Literal"
    LOGICAL_EXPRESSION = "LogicalExpression"
    MEMBER_EXPRESSION = "MemberExpression"
    META_PROPERTY = "MetaProperty"
    METHOD_DEFINITION = "MethodDefinition"
    NEW_EXPRESSION = "NewExpression"
    OBJECT_EXPRESSION = "ObjectExpression"
    OBJECT_PATTERN = "ObjectPattern"
    PROGRAM = "Program"
    PROPERTY = "Property"
    REST_ELEMENT = "RestElement"
    RETURN_STATEMENT = "ReturnStatement"
    SEQUENCE_EXPRESSION = "SequenceExpression"
    SPREAD_ELEMENT = "SpreadElement"
    SUPER = "Super"
    SWITCH_CASE = "SwitchCase"
    SWITCH_STATEMENT = "SwitchStatement"
    TAGGED_TEMPLATE_EXPRESSION = "TaggedTemplateExpression"
    TEMPLATE_ELEMENT = "TemplateElement"
    TEMPLATE_LITERAL = "TemplateLiteral"
    THIS_EXPRESSION = "ThisExpression"
    THROW_STATEMENT = "ThrowStatement"
    TRY_STATEMENT = "TryStatement"
    UNARY_EXPRESSION = "UnaryExpression"
    UPDATE_EXPRESSION = "UpdateExpression"
    VARIABLE_DECLARATION = "VariableDeclaration"
    VARIABLE_DECLARATOR = "VariableDeclarator"
    WHILE_STATEMENT = "WhileStatement"
    WITH_STATEMENT = "WithStatement"
    YIELD_EXPRESSION = "YieldExpression"
    UNKNOWN = ""

    @classmethod
    def of(cls, value: Any) -> "Syntax":
        """Return the kind of ``value``; non-nodes and unknown tags map to ``UNKNOWN``."""

        if not isinstance(value, Node):
            return cls.UNKNOWN
        return cls._value2member_map_.get(value.type, cls.UNKNOWN)  # type: ignore[return-value]


FUNCTION_LITERAL_KINDS = frozenset({Syntax.FUNCTION_EXPRESSION, Syntax.ARROW_FUNCTION_EXPRESSION})


@dataclass(frozen=True)
class Node:
    """A tagged, read-only syntax tree node."""

    type: str
    fields: Mapping[str, Any]

    @classmethod
    def make(cls, type: str, **fields: Any) -> "Node":
        return cls(type, MappingProxyType(dict(fields)))

    @property
    def kind(self) -> Syntax:
        return Syntax.of(self)

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.fields[key]

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def keys(self) -> Iterable[str]:
        return self.fields.keys()

    def replace(self, **changes: Any) -> "Node":
        """Return a copy of this node with ``changes`` applied."""

        if not changes:
            return self
        merged = dict(self.fields)
        merged.update(changes)
        return Node(self.type, MappingProxyType(merged))

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        name = self.fields.get("name")
        if name is not None:
            return f"Node({self.type}:{name})"
        return f"Node({self.type})"


def is_function_literal(value: Any) -> bool:
    """``function (...) {...}`` or ``(...) => ...`` in expression position."""

    return Syntax.of(value) in FUNCTION_LITERAL_KINDS


# ---------------------------------------------------------------------------
# Conversion


def from_estree(value: Any) -> Any:
    """Convert ESTree dictionaries/lists into :class:`Node` trees."""

    if isinstance(value, Node):
        return value
    if isinstance(value, Mapping):
        converted = {key: from_estree(item) for key, item in value.items()}
        node_type = converted.pop("type", None)
        if isinstance(node_type, str):
            return Node(node_type, MappingProxyType(converted))
        return MappingProxyType(converted)
    if isinstance(value, (list, tuple)):
        return tuple(from_estree(item) for item in value)
    return value


# ---------------------------------------------------------------------------
# Structural recursion helpers


def iter_children(value: Any, *, skip: Iterable[str] = ()) -> Iterator[Tuple[str, Any]]:
    """Yield ``(field, child)`` pairs of ``value`` that may hold nodes.

    Arrays yield ``(index, element)`` pairs using the stringified index.
    """

    if isinstance(value, tuple):
        for index, item in enumerate(value):
            yield str(index), item
        return
    if isinstance(value, Node):
        skipped = set(skip)
        for key, item in value.fields.items():
            if key in skipped:
                continue
            if isinstance(item, (Node, tuple)):
                yield key, item


def walk(value: Any) -> Iterator[Node]:
    """Depth-first pre-order iteration over every node below ``value``."""

    stack = [value]
    while stack:
        current = stack.pop()
        if isinstance(current, Node):
            yield current
            children = [child for _, child in iter_children(current)]
        elif isinstance(current, tuple):
            children = list(current)
        else:
            continue
        stack.extend(reversed(children))


def map_children(
    value: Any,
    fn: Callable[[Any], Any],
    *,
    skip: Iterable[str] = (),
) -> Any:
    """Apply ``fn`` to the children of ``value`` and rebuild it copy-on-write.

    Fields listed in ``skip`` are carried over untouched.  When ``fn`` returns
    every child unchanged (by identity) the original value is returned.
    """

    if isinstance(value, tuple):
        mapped = tuple(fn(item) for item in value)
        if all(new is old for new, old in zip(mapped, value)):
            return value
        return mapped
    if isinstance(value, Node):
        skipped = set(skip)
        changes: Dict[str, Any] = {}
        for key, item in value.fields.items():
            if key in skipped or not isinstance(item, (Node, tuple)):
                continue
            new_item = fn(item)
            if new_item is not item:
                changes[key] = new_item
        return value.replace(**changes)
    return value


# ---------------------------------------------------------------------------
# Visitor dispatch


def _method_suffix(kind: Syntax) -> str:
    return kind.value if kind is not Syntax.UNKNOWN else "unknown"


class NodeVisitor:
    """Dispatch on :class:`Syntax` to ``visit_<Type>`` methods.

    Kinds without a dedicated method, including tags this module does not
    know about, fall through to :meth:`generic_visit`.
    """

    def visit(self, value: Any) -> Any:
        if isinstance(value, tuple):
            return self.visit_array(value)
        if not isinstance(value, Node):
            return self.visit_leaf(value)
        method = getattr(self, f"visit_{_method_suffix(value.kind)}", None)
        if method is None:
            return self.generic_visit(value)
        return method(value)

    def visit_array(self, value: Tuple[Any, ...]) -> Any:
        for item in value:
            self.visit(item)
        return None

    def visit_leaf(self, value: Any) -> Any:
        return None

    def generic_visit(self, node: Node) -> Any:
        for _, child in iter_children(node):
            self.visit(child)
        return None


class NodeTransformer(NodeVisitor):
    """A :class:`NodeVisitor` whose visits return (possibly new) tree values."""

    def visit_array(self, value: Tuple[Any, ...]) -> Any:
        return map_children(value, self.visit)

    def visit_leaf(self, value: Any) -> Any:
        return value

    def generic_visit(self, node: Node) -> Any:
        return map_children(node, self.visit)


__all__ = [
    "FUNCTION_LITERAL_KINDS",
    "Node",
    "NodeTransformer",
    "NodeVisitor",
    "Syntax",
    "from_estree",
    "is_function_literal",
    "iter_children",
    "map_children",
    "walk",
]
