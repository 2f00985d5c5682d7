"""Render :class:`~unbundler.js_ast.Node` trees back to JavaScript source.

The output is syntactically valid but only lightly formatted; the pipeline
hands it to :mod:`unbundler.pretty.beautify` for the final layout.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, List, Optional, Tuple

from .exceptions import UnsupportedNodeError
from .js_ast import Node, Syntax

# Operator precedence, lowest binds loosest.
SEQUENCE = 0
YIELD = 1
ASSIGNMENT = 1
CONDITIONAL = 2
ARROW_FUNCTION = 2
LOGICAL_OR = 3
LOGICAL_AND = 4
BITWISE_OR = 5
BITWISE_XOR = 6
BITWISE_AND = 7
EQUALITY = 8
RELATIONAL = 9
BITWISE_SHIFT = 10
ADDITIVE = 11
MULTIPLICATIVE = 12
EXPONENT = 13
UNARY = 14
POSTFIX = 15
CALL = 16
NEW = 17
MEMBER = 19
PRIMARY = 20

BINARY_PRECEDENCE: Dict[str, int] = {
    "||": LOGICAL_OR,
    "&&": LOGICAL_AND,
    "|": BITWISE_OR,
    "^": BITWISE_XOR,
    "&": BITWISE_AND,
    "==": EQUALITY,
    "!=": EQUALITY,
    "===": EQUALITY,
    "!==": EQUALITY,
    "<": RELATIONAL,
    ">": RELATIONAL,
    "<=": RELATIONAL,
    ">=": RELATIONAL,
    "in": RELATIONAL,
    "instanceof": RELATIONAL,
    "<<": BITWISE_SHIFT,
    ">>": BITWISE_SHIFT,
    ">>>": BITWISE_SHIFT,
    "+": ADDITIVE,
    "-": ADDITIVE,
    "*": MULTIPLICATIVE,
    "/": MULTIPLICATIVE,
    "%": MULTIPLICATIVE,
    "**": EXPONENT,
}

_STATEMENT_PREFIXES_NEEDING_PARENS = ("function", "async function", "class", "{", "let[", "let [")

_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
    "\v": "\\v",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def quote_string(value: str) -> str:
    """Return ``value`` as a single-quoted JavaScript string literal."""

    parts: List[str] = []
    for char in value:
        escaped = _ESCAPES.get(char)
        if escaped is not None:
            parts.append(escaped)
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            parts.append(f"\\x{ord(char):02x}")
        else:
            parts.append(char)
    return "'" + "".join(parts) + "'"


def format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _literal_source(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, str):
        return quote_string(value)
    raise UnsupportedNodeError(f"cannot render literal value {value!r}")


class CodeGenerator:
    """Turns statements and expressions into JavaScript text.

    ``source`` is the text the tree was parsed from.  When given, node kinds
    without a printer are emitted verbatim from their ``range`` instead of
    raising :class:`UnsupportedNodeError`.
    """

    def __init__(self, *, indent: str = "  ", source: Optional[str] = None) -> None:
        self.indent = indent
        self.source = source
        # Set while printing a for(;;) initialiser, where a bare `in` would end the init.
        self._no_in = False
        self._statements: Dict[Syntax, Callable[[Node, int], str]] = {
            Syntax.PROGRAM: self._program,
            Syntax.BLOCK_STATEMENT: self._block,
            Syntax.EXPRESSION_STATEMENT: self._expression_statement,
            Syntax.EMPTY_STATEMENT: lambda node, level: ";",
            Syntax.VARIABLE_DECLARATION: self._variable_declaration,
            Syntax.FUNCTION_DECLARATION: self._function_declaration,
            Syntax.CLASS_DECLARATION: self._class_declaration,
            Syntax.RETURN_STATEMENT: self._return_statement,
            Syntax.IF_STATEMENT: self._if_statement,
            Syntax.FOR_STATEMENT: self._for_statement,
            Syntax.FOR_IN_STATEMENT: self._for_in_statement,
            Syntax.FOR_OF_STATEMENT: self._for_in_statement,
            Syntax.WHILE_STATEMENT: self._while_statement,
            Syntax.DO_WHILE_STATEMENT: self._do_while_statement,
            Syntax.BREAK_STATEMENT: self._jump_statement,
            Syntax.CONTINUE_STATEMENT: self._jump_statement,
            Syntax.THROW_STATEMENT: self._throw_statement,
            Syntax.TRY_STATEMENT: self._try_statement,
            Syntax.SWITCH_STATEMENT: self._switch_statement,
            Syntax.LABELED_STATEMENT: self._labeled_statement,
            Syntax.DEBUGGER_STATEMENT: lambda node, level: "debugger;",
            Syntax.WITH_STATEMENT: self._with_statement,
        }
        self._expressions: Dict[Syntax, Callable[[Node, int], Tuple[str, int]]] = {
            Syntax.IDENTIFIER: lambda node, level: (node["name"], PRIMARY),
            Syntax.LITERAL: self._literal,
            Syntax.THIS_EXPRESSION: lambda node, level: ("this", PRIMARY),
            Syntax.SUPER: lambda node, level: ("super", PRIMARY),
            Syntax.ARRAY_EXPRESSION: self._array,
            Syntax.ARRAY_PATTERN: self._array,
            Syntax.OBJECT_EXPRESSION: self._object,
            Syntax.OBJECT_PATTERN: self._object_pattern,
            Syntax.FUNCTION_EXPRESSION: self._function_expression,
            Syntax.ARROW_FUNCTION_EXPRESSION: self._arrow_function,
            Syntax.CLASS_EXPRESSION: self._class_expression,
            Syntax.UNARY_EXPRESSION: self._unary,
            Syntax.UPDATE_EXPRESSION: self._update,
            Syntax.BINARY_EXPRESSION: self._binary,
            Syntax.LOGICAL_EXPRESSION: self._binary,
            Syntax.ASSIGNMENT_EXPRESSION: self._assignment,
            Syntax.ASSIGNMENT_PATTERN: self._assignment_pattern,
            Syntax.CONDITIONAL_EXPRESSION: self._conditional,
            Syntax.CALL_EXPRESSION: self._call,
            Syntax.NEW_EXPRESSION: self._new,
            Syntax.MEMBER_EXPRESSION: self._member,
            Syntax.SEQUENCE_EXPRESSION: self._sequence,
            Syntax.TEMPLATE_LITERAL: self._template_literal,
            Syntax.TAGGED_TEMPLATE_EXPRESSION: self._tagged_template,
            Syntax.SPREAD_ELEMENT: self._spread,
            Syntax.REST_ELEMENT: self._spread,
            Syntax.YIELD_EXPRESSION: self._yield,
            Syntax.AWAIT_EXPRESSION: self._await,
            Syntax.META_PROPERTY: self._meta_property,
        }

    # -- public API ------------------------------------------------------
    def generate(self, node: Any) -> str:
        kind = Syntax.of(node)
        if kind in self._statements:
            return self.statement(node, 0)
        return self.expression(node, SEQUENCE, 0)

    def statement(self, node: Node, level: int) -> str:
        handler = self._statements.get(Syntax.of(node))
        if handler is None:
            if Syntax.of(node) in self._expressions:
                return self._expression_statement(Node.make("ExpressionStatement", expression=node), level)
            return self._verbatim(node)
        return handler(node, level)

    def expression(self, node: Any, precedence: int, level: int) -> str:
        handler = self._expressions.get(Syntax.of(node))
        if handler is None:
            return self._verbatim(node)
        text, own = handler(node, level)
        if own < precedence:
            return f"({text})"
        return text

    # -- helpers ---------------------------------------------------------
    def _pad(self, level: int) -> str:
        return self.indent * level

    def _verbatim(self, node: Any) -> str:
        span = node.get("range") if isinstance(node, Node) else None
        if self.source is not None and span:
            start, end = span
            return self.source[start:end]
        kind = node.type if isinstance(node, Node) else type(node).__name__
        raise UnsupportedNodeError(f"no printer for {kind} node")

    def _statement_list(self, statements: Any, level: int) -> str:
        pad = self._pad(level)
        return "\n".join(pad + self.statement(stmt, level) for stmt in statements or ())

    def _substatement(self, node: Node, level: int) -> str:
        if Syntax.of(node) is Syntax.BLOCK_STATEMENT:
            return " " + self._block(node, level)
        return "\n" + self._pad(level + 1) + self.statement(node, level + 1)

    def _join_after(self, node: Node, level: int) -> str:
        """Separator placed after a substatement before ``else``/``while``."""

        if Syntax.of(node) is Syntax.BLOCK_STATEMENT:
            return " "
        return "\n" + self._pad(level)

    def _params(self, params: Any, level: int) -> str:
        return ", ".join(self.expression(param, ASSIGNMENT, level) for param in params or ())

    def _property_key(self, node: Node, level: int) -> str:
        key = node.get("key")
        if node.get("computed"):
            return f"[{self.expression(key, ASSIGNMENT, level)}]"
        return self.expression(key, PRIMARY, level)

    def _function_head(self, node: Node) -> str:
        head = "async function" if node.get("async") else "function"
        if node.get("generator"):
            head += "*"
        function_id = node.get("id")
        if function_id is not None:
            head += " " + function_id["name"]
        return head

    def _function_tail(self, node: Node, level: int) -> str:
        return f"({self._params(node.get('params'), level)}) {self._block(node['body'], level)}"

    # -- statements ------------------------------------------------------
    def _program(self, node: Node, level: int) -> str:
        return self._statement_list(node.get("body"), level)

    def _block(self, node: Node, level: int) -> str:
        body = node.get("body") or ()
        if not body:
            return "{}"
        return "{\n" + self._statement_list(body, level + 1) + "\n" + self._pad(level) + "}"

    def _expression_statement(self, node: Node, level: int) -> str:
        text = self.expression(node.get("expression"), SEQUENCE, level)
        if text.startswith(_STATEMENT_PREFIXES_NEEDING_PARENS):
            text = f"({text})"
        return text + ";"

    def _declaration(self, node: Node, level: int) -> str:
        parts = []
        for declarator in node.get("declarations") or ():
            text = self.expression(declarator["id"], ASSIGNMENT, level)
            init = declarator.get("init")
            if init is not None:
                text += " = " + self.expression(init, ASSIGNMENT, level)
            parts.append(text)
        return f"{node.get('kind', 'var')} " + ", ".join(parts)

    def _variable_declaration(self, node: Node, level: int) -> str:
        return self._declaration(node, level) + ";"

    def _function_declaration(self, node: Node, level: int) -> str:
        return self._function_head(node) + self._function_tail(node, level)

    def _class_declaration(self, node: Node, level: int) -> str:
        return self._class(node, level)

    def _return_statement(self, node: Node, level: int) -> str:
        argument = node.get("argument")
        if argument is None:
            return "return;"
        return f"return {self.expression(argument, SEQUENCE, level)};"

    def _if_statement(self, node: Node, level: int) -> str:
        consequent = node["consequent"]
        alternate = node.get("alternate")
        if alternate is not None and _ends_with_open_if(consequent):
            consequent = Node.make("BlockStatement", body=(consequent,))
        text = f"if ({self.expression(node['test'], SEQUENCE, level)})" + self._substatement(consequent, level)
        if alternate is None:
            return text
        text += self._join_after(consequent, level) + "else"
        if Syntax.of(alternate) is Syntax.IF_STATEMENT:
            return text + " " + self._if_statement(alternate, level)
        return text + self._substatement(alternate, level)

    def _loop_head(self, value: Any, level: int) -> str:
        if value is None:
            return ""
        if Syntax.of(value) is Syntax.VARIABLE_DECLARATION:
            return self._declaration(value, level)
        return self.expression(value, SEQUENCE, level)

    def _for_statement(self, node: Node, level: int) -> str:
        outer, self._no_in = self._no_in, True
        try:
            init = self._loop_head(node.get("init"), level)
        finally:
            self._no_in = outer
        test = self._loop_head(node.get("test"), level)
        update = self._loop_head(node.get("update"), level)
        head = f"for ({init};{' ' + test if test else ''};{' ' + update if update else ''})"
        return head + self._substatement(node["body"], level)

    def _for_in_statement(self, node: Node, level: int) -> str:
        keyword = "of" if Syntax.of(node) is Syntax.FOR_OF_STATEMENT else "in"
        left = self._loop_head(node["left"], level)
        right = self.expression(node["right"], ASSIGNMENT if keyword == "of" else SEQUENCE, level)
        return f"for ({left} {keyword} {right})" + self._substatement(node["body"], level)

    def _while_statement(self, node: Node, level: int) -> str:
        return f"while ({self.expression(node['test'], SEQUENCE, level)})" + self._substatement(node["body"], level)

    def _do_while_statement(self, node: Node, level: int) -> str:
        body = node["body"]
        test = self.expression(node["test"], SEQUENCE, level)
        return "do" + self._substatement(body, level) + self._join_after(body, level) + f"while ({test});"

    def _jump_statement(self, node: Node, level: int) -> str:
        keyword = "break" if Syntax.of(node) is Syntax.BREAK_STATEMENT else "continue"
        label = node.get("label")
        if label is not None:
            return f"{keyword} {label['name']};"
        return keyword + ";"

    def _throw_statement(self, node: Node, level: int) -> str:
        return f"throw {self.expression(node['argument'], SEQUENCE, level)};"

    def _try_statement(self, node: Node, level: int) -> str:
        text = "try " + self._block(node["block"], level)
        handler = node.get("handler")
        if handler is not None:
            param = handler.get("param")
            clause = " catch" if param is None else f" catch ({self.expression(param, ASSIGNMENT, level)})"
            text += clause + " " + self._block(handler["body"], level)
        finalizer = node.get("finalizer")
        if finalizer is not None:
            text += " finally " + self._block(finalizer, level)
        return text

    def _switch_statement(self, node: Node, level: int) -> str:
        lines = [f"switch ({self.expression(node['discriminant'], SEQUENCE, level)}) {{"]
        case_pad = self._pad(level + 1)
        for case in node.get("cases") or ():
            test = case.get("test")
            header = "default:" if test is None else f"case {self.expression(test, SEQUENCE, level + 1)}:"
            lines.append(case_pad + header)
            consequent = case.get("consequent") or ()
            if consequent:
                lines.append(self._statement_list(consequent, level + 2))
        lines.append(self._pad(level) + "}")
        return "\n".join(lines)

    def _labeled_statement(self, node: Node, level: int) -> str:
        return f"{node['label']['name']}: " + self.statement(node["body"], level)

    def _with_statement(self, node: Node, level: int) -> str:
        return f"with ({self.expression(node['object'], SEQUENCE, level)})" + self._substatement(node["body"], level)

    # -- expressions -----------------------------------------------------
    def _literal(self, node: Node, level: int) -> Tuple[str, int]:
        raw = node.get("raw")
        if isinstance(raw, str):
            return raw, PRIMARY
        return _literal_source(node.get("value")), PRIMARY

    def _array(self, node: Node, level: int) -> Tuple[str, int]:
        elements = node.get("elements") or ()
        parts = ["" if element is None else self.expression(element, ASSIGNMENT, level) for element in elements]
        text = ", ".join(parts)
        if elements and elements[-1] is None:
            text += ","
        return f"[{text}]", PRIMARY

    def _property(self, node: Node, level: int) -> str:
        kind = node.get("kind", "init")
        value = node.get("value")
        key = self._property_key(node, level)
        if kind in ("get", "set"):
            return f"{kind} {key}" + self._function_tail(value, level)
        if node.get("method"):
            prefix = "async " if value.get("async") else ""
            star = "*" if value.get("generator") else ""
            return f"{prefix}{star}{key}" + self._function_tail(value, level)
        if node.get("shorthand") and not node.get("computed"):
            key_name = node["key"].get("name")
            value_kind = Syntax.of(value)
            if value_kind is Syntax.IDENTIFIER and value.get("name") == key_name:
                return key
            if value_kind is Syntax.ASSIGNMENT_PATTERN and value["left"].get("name") == key_name:
                return self.expression(value, ASSIGNMENT, level)
        return f"{key}: {self.expression(value, ASSIGNMENT, level)}"

    def _object(self, node: Node, level: int) -> Tuple[str, int]:
        properties = node.get("properties") or ()
        if not properties:
            return "{}", PRIMARY
        pad = self._pad(level + 1)
        rendered = []
        for prop in properties:
            if Syntax.of(prop) is Syntax.PROPERTY:
                rendered.append(pad + self._property(prop, level + 1))
            else:
                rendered.append(pad + self.expression(prop, ASSIGNMENT, level + 1))
        return "{\n" + ",\n".join(rendered) + "\n" + self._pad(level) + "}", PRIMARY

    def _object_pattern(self, node: Node, level: int) -> Tuple[str, int]:
        parts = []
        for prop in node.get("properties") or ():
            if Syntax.of(prop) is Syntax.PROPERTY:
                parts.append(self._property(prop, level))
            else:
                parts.append(self.expression(prop, ASSIGNMENT, level))
        return "{" + ", ".join(parts) + "}", PRIMARY

    def _function_expression(self, node: Node, level: int) -> Tuple[str, int]:
        return self._function_head(node) + self._function_tail(node, level), PRIMARY

    def _arrow_function(self, node: Node, level: int) -> Tuple[str, int]:
        prefix = "async " if node.get("async") else ""
        head = f"{prefix}({self._params(node.get('params'), level)}) => "
        body = node["body"]
        if Syntax.of(body) is Syntax.BLOCK_STATEMENT:
            return head + self._block(body, level), ARROW_FUNCTION
        text = self.expression(body, ASSIGNMENT, level)
        if text.startswith("{"):
            text = f"({text})"
        return head + text, ARROW_FUNCTION

    def _class(self, node: Node, level: int) -> str:
        text = "class"
        class_id = node.get("id")
        if class_id is not None:
            text += " " + class_id["name"]
        superclass = node.get("superClass")
        if superclass is not None:
            text += " extends " + self.expression(superclass, CALL, level)
        members = node["body"].get("body") or ()
        if not members:
            return text + " {}"
        pad = self._pad(level + 1)
        lines = [pad + self._method_definition(member, level + 1) for member in members]
        return text + " {\n" + "\n".join(lines) + "\n" + self._pad(level) + "}"

    def _class_expression(self, node: Node, level: int) -> Tuple[str, int]:
        return self._class(node, level), PRIMARY

    def _method_definition(self, node: Node, level: int) -> str:
        if Syntax.of(node) is not Syntax.METHOD_DEFINITION:
            return self._verbatim(node)
        value = node["value"]
        prefix = "static " if node.get("static") else ""
        kind = node.get("kind")
        if kind in ("get", "set"):
            prefix += kind + " "
        if value.get("async"):
            prefix += "async "
        if value.get("generator"):
            prefix += "*"
        return prefix + self._property_key(node, level) + self._function_tail(value, level)

    def _unary(self, node: Node, level: int) -> Tuple[str, int]:
        operator = node["operator"]
        argument = self.expression(node["argument"], UNARY, level)
        if operator.isalpha():
            return f"{operator} {argument}", UNARY
        if argument.startswith(operator[-1]) and operator[-1] in "+-":
            return f"{operator} {argument}", UNARY
        return operator + argument, UNARY

    def _update(self, node: Node, level: int) -> Tuple[str, int]:
        operator = node["operator"]
        argument = self.expression(node["argument"], POSTFIX, level)
        if node.get("prefix"):
            return operator + argument, UNARY
        return argument + operator, POSTFIX

    def _binary(self, node: Node, level: int) -> Tuple[str, int]:
        operator = node["operator"]
        precedence = BINARY_PRECEDENCE.get(operator, SEQUENCE)
        if operator == "**":
            left = self.expression(node["left"], POSTFIX, level)
            right = self.expression(node["right"], precedence, level)
        else:
            left = self.expression(node["left"], precedence, level)
            right = self.expression(node["right"], precedence + 1, level)
        if operator == "in" and self._no_in:
            return f"({left} in {right})", PRIMARY
        return f"{left} {operator} {right}", precedence

    def _assignment(self, node: Node, level: int) -> Tuple[str, int]:
        left = self.expression(node["left"], CALL, level)
        right = self.expression(node["right"], ASSIGNMENT, level)
        return f"{left} {node['operator']} {right}", ASSIGNMENT

    def _assignment_pattern(self, node: Node, level: int) -> Tuple[str, int]:
        left = self.expression(node["left"], CALL, level)
        return f"{left} = {self.expression(node['right'], ASSIGNMENT, level)}", ASSIGNMENT

    def _conditional(self, node: Node, level: int) -> Tuple[str, int]:
        test = self.expression(node["test"], LOGICAL_OR, level)
        consequent = self.expression(node["consequent"], ASSIGNMENT, level)
        alternate = self.expression(node["alternate"], ASSIGNMENT, level)
        return f"{test} ? {consequent} : {alternate}", CONDITIONAL

    def _arguments(self, node: Node, level: int) -> str:
        return "(" + ", ".join(self.expression(arg, ASSIGNMENT, level) for arg in node.get("arguments") or ()) + ")"

    def _call(self, node: Node, level: int) -> Tuple[str, int]:
        return self.expression(node["callee"], CALL, level) + self._arguments(node, level), CALL

    def _new(self, node: Node, level: int) -> Tuple[str, int]:
        callee = node["callee"]
        text = self.expression(callee, NEW, level)
        if _contains_call(callee) and not text.startswith("("):
            text = f"({text})"
        return "new " + text + self._arguments(node, level), NEW

    def _member(self, node: Node, level: int) -> Tuple[str, int]:
        owner = node["object"]
        text = self.expression(owner, CALL, level)
        if Syntax.of(owner) is Syntax.LITERAL and isinstance(owner.get("value"), (int, float)):
            if text.isdigit():
                text = f"({text})"
        if node.get("computed"):
            return f"{text}[{self.expression(node['property'], SEQUENCE, level)}]", MEMBER
        return f"{text}.{node['property']['name']}", MEMBER

    def _sequence(self, node: Node, level: int) -> Tuple[str, int]:
        return ", ".join(self.expression(item, ASSIGNMENT, level) for item in node["expressions"]), SEQUENCE

    def _template_literal(self, node: Node, level: int) -> Tuple[str, int]:
        quasis = node.get("quasis") or ()
        expressions = node.get("expressions") or ()
        parts = ["`"]
        for index, quasi in enumerate(quasis):
            parts.append(quasi["value"]["raw"])
            if index < len(expressions):
                parts.append("${" + self.expression(expressions[index], SEQUENCE, level) + "}")
        parts.append("`")
        return "".join(parts), PRIMARY

    def _tagged_template(self, node: Node, level: int) -> Tuple[str, int]:
        tag = self.expression(node["tag"], CALL, level)
        quasi, _ = self._template_literal(node["quasi"], level)
        return tag + quasi, CALL

    def _spread(self, node: Node, level: int) -> Tuple[str, int]:
        return "..." + self.expression(node["argument"], ASSIGNMENT, level), ASSIGNMENT

    def _yield(self, node: Node, level: int) -> Tuple[str, int]:
        text = "yield*" if node.get("delegate") else "yield"
        argument = node.get("argument")
        if argument is not None:
            text += " " + self.expression(argument, YIELD, level)
        return text, YIELD

    def _await(self, node: Node, level: int) -> Tuple[str, int]:
        return "await " + self.expression(node["argument"], UNARY, level), UNARY

    def _meta_property(self, node: Node, level: int) -> Tuple[str, int]:
        return f"{node['meta']['name']}.{node['property']['name']}", PRIMARY


def _contains_call(node: Any) -> bool:
    while True:
        kind = Syntax.of(node)
        if kind is Syntax.CALL_EXPRESSION:
            return True
        if kind is Syntax.MEMBER_EXPRESSION:
            node = node.get("object")
        elif kind is Syntax.TAGGED_TEMPLATE_EXPRESSION:
            node = node.get("tag")
        else:
            return False


def _ends_with_open_if(node: Any) -> bool:
    """``True`` when a trailing ``if`` without ``else`` would capture an outer ``else``."""

    while True:
        kind = Syntax.of(node)
        if kind is Syntax.IF_STATEMENT:
            alternate = node.get("alternate")
            if alternate is None:
                return True
            node = alternate
        elif kind in (
            Syntax.FOR_STATEMENT,
            Syntax.FOR_IN_STATEMENT,
            Syntax.FOR_OF_STATEMENT,
            Syntax.WHILE_STATEMENT,
            Syntax.WITH_STATEMENT,
            Syntax.LABELED_STATEMENT,
        ):
            node = node.get("body")
        else:
            return False


def generate(node: Any, *, indent: str = "  ", source: Optional[str] = None) -> str:
    """Render ``node`` (statement or expression) as JavaScript source."""

    return CodeGenerator(indent=indent, source=source).generate(node)


__all__ = ["CodeGenerator", "format_number", "generate", "quote_string"]
