"""Syntax tree for Monkey programs.

Every node keeps the token it was parsed from (`token_literal()`) and renders
to a canonical source form via `str()`. The rendering is chosen so that
parsing a rendered program and rendering it again is a fixed point.

Expression fields the parser could not fill are left as None; the evaluator
treats a missing expression as the null value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from io import StringIO
from typing import Optional

from monkey.reader.token import Token


class Node:
    token: Token

    def token_literal(self) -> str:
        return self.token.literal


class Statement(Node):
    pass


class Expression(Node):
    pass


def _render(node: Optional[Node]) -> str:
    return "" if node is None else str(node)


def join_statements(statements: list[Statement]) -> str:
    """Render a statement sequence so that it re-parses into the same sequence."""
    with StringIO() as buffer:
        previous = None
        for stmt in statements:
            text = str(stmt)
            if previous is not None:
                # let/return already carry their terminator
                buffer.write(" " if previous.endswith(";") else "; ")
            buffer.write(text)
            previous = text
        return buffer.getvalue()


# --- Statements ---


@dataclass
class Program(Node):
    statements: list[Statement] = field(default_factory=list)

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def __str__(self) -> str:
        return join_statements(self.statements)


@dataclass
class LetStatement(Statement):
    token: Token
    name: Optional[Identifier] = None
    value: Optional[Expression] = None

    def __str__(self) -> str:
        return f"{self.token_literal()} {_render(self.name)} = {_render(self.value)};"


@dataclass
class ReturnStatement(Statement):
    token: Token
    return_value: Optional[Expression] = None

    def __str__(self) -> str:
        return f"{self.token_literal()} {_render(self.return_value)};"


@dataclass
class ExpressionStatement(Statement):
    token: Token
    expression: Optional[Expression] = None

    def __str__(self) -> str:
        return _render(self.expression)


@dataclass
class BlockStatement(Statement):
    token: Token
    statements: list[Statement] = field(default_factory=list)

    def __str__(self) -> str:
        if not self.statements:
            return "{ }"
        return f"{{ {join_statements(self.statements)} }}"


# --- Expressions ---


@dataclass
class Identifier(Expression):
    token: Token
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class IntegerLiteral(Expression):
    token: Token
    value: int

    def __str__(self) -> str:
        return self.token.literal


@dataclass
class StringLiteral(Expression):
    token: Token
    value: str

    def __str__(self) -> str:
        return f'"{self.value}"'


@dataclass
class BooleanLiteral(Expression):
    token: Token
    value: bool

    def __str__(self) -> str:
        return self.token.literal


@dataclass
class PrefixExpression(Expression):
    token: Token
    operator: str
    right: Optional[Expression] = None

    def __str__(self) -> str:
        return f"({self.operator}{_render(self.right)})"


@dataclass
class InfixExpression(Expression):
    token: Token
    left: Optional[Expression]
    operator: str
    right: Optional[Expression] = None

    def __str__(self) -> str:
        return f"({_render(self.left)} {self.operator} {_render(self.right)})"


@dataclass
class IndexExpression(Expression):
    token: Token
    left: Optional[Expression]
    index: Optional[Expression] = None

    def __str__(self) -> str:
        return f"({_render(self.left)}[{_render(self.index)}])"


@dataclass
class IfExpression(Expression):
    token: Token
    condition: Optional[Expression] = None
    consequence: Optional[BlockStatement] = None
    alternative: Optional[BlockStatement] = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("if ")
            # prefix/infix/index render with their own outer parentheses
            if isinstance(self.condition, (PrefixExpression, InfixExpression, IndexExpression)):
                buffer.write(str(self.condition))
            else:
                buffer.write(f"({_render(self.condition)})")
            buffer.write(" ")
            buffer.write(_render(self.consequence))
            if self.alternative is not None:
                buffer.write(" else ")
                buffer.write(str(self.alternative))
            return buffer.getvalue()


class _ParameterisedLiteral(Expression):
    """Shared rendering for `fn(...) {...}` and `macro(...) {...}`."""

    token: Token
    parameters: list[Identifier]
    body: Optional[BlockStatement]

    def __str__(self) -> str:
        params = ", ".join(str(p) for p in self.parameters)
        return f"{self.token_literal()}({params}) {_render(self.body)}"


@dataclass
class FunctionLiteral(_ParameterisedLiteral):
    token: Token
    parameters: list[Identifier] = field(default_factory=list)
    body: Optional[BlockStatement] = None


@dataclass
class MacroLiteral(_ParameterisedLiteral):
    token: Token
    parameters: list[Identifier] = field(default_factory=list)
    body: Optional[BlockStatement] = None


@dataclass
class CallExpression(Expression):
    token: Token  # the '(' token
    function: Optional[Expression]
    arguments: list[Expression] = field(default_factory=list)

    def __str__(self) -> str:
        args = ", ".join(_render(a) for a in self.arguments)
        return f"{_render(self.function)}({args})"


@dataclass
class ArrayLiteral(Expression):
    token: Token
    elements: list[Expression] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ", ".join(_render(e) for e in self.elements) + "]"


@dataclass
class HashLiteral(Expression):
    token: Token
    pairs: list[tuple[Expression, Expression]] = field(default_factory=list)

    def __str__(self) -> str:
        items = ", ".join(f"{_render(k)}: {_render(v)}" for k, v in self.pairs)
        return "{" + items + "}"
