from __future__ import annotations

from typing import Optional

from monkey import EvaluatorFn
from monkey.reader import ast_nodes as ast
from monkey.reader.rewrite import modify
from monkey.reader.token import Token, TokenType
from monkey.types.environment import Environment
from monkey.types.objects import (
    Object,
    Integer,
    String,
    Boolean,
    Array,
    Hash,
    Error,
    Quote,
    is_error,
)


def is_unquote_call(node: ast.Node) -> bool:
    return (
        isinstance(node, ast.CallExpression)
        and isinstance(node.function, ast.Identifier)
        and node.function.value == "unquote"
    )


def object_to_node(obj: Object) -> Optional[ast.Expression]:
    """Rebuild syntax for an evaluated value; None when the value has no literal form."""
    match obj:
        case Integer():
            return ast.IntegerLiteral(Token(TokenType.INT, str(obj.value)), obj.value)
        case String():
            return ast.StringLiteral(Token(TokenType.STRING, obj.value), obj.value)
        case Boolean():
            kind = TokenType.TRUE if obj.value else TokenType.FALSE
            return ast.BooleanLiteral(Token(kind, obj.inspect()), obj.value)
        case Quote():
            return obj.node
        case Array():
            elements = [object_to_node(e) for e in obj.elements]
            if any(e is None for e in elements):
                return None
            return ast.ArrayLiteral(Token(TokenType.LBRACKET, "["), elements)
        case Hash():
            pairs = [(object_to_node(p.key), object_to_node(p.value)) for p in obj.pairs.values()]
            if any(k is None or v is None for k, v in pairs):
                return None
            return ast.HashLiteral(Token(TokenType.LBRACE, "{"), pairs)
    return None


def quote(node: ast.Node, env: Environment, evaluate_fn: EvaluatorFn) -> Object:
    """
    Capture `node` unevaluated, splicing in the value of every `unquote(x)`.

    Each `x` is evaluated in `env`, left to right. The first Error stops the
    splicing and is returned in place of the Quote.
    """
    failure: list[Error] = []

    def _splice(n: ast.Node) -> ast.Node:
        if failure or not is_unquote_call(n) or len(n.arguments) != 1:
            return n
        value = evaluate_fn(n.arguments[0], env)
        if is_error(value):
            failure.append(value)
            return n
        converted = object_to_node(value)
        if converted is None:
            failure.append(Error(f"cannot unquote {value.object_type} into syntax"))
            return n
        return converted

    quoted = modify(node, _splice)
    if failure:
        return failure[0]
    return Quote(quoted)


def quote_form(
    arguments: list[ast.Expression], env: Environment, evaluate_fn: EvaluatorFn
) -> Object:
    if len(arguments) != 1:
        return Error(f"wrong number of arguments. got={len(arguments)}, want=1")
    return quote(arguments[0], env, evaluate_fn)


def unquote_form(
    arguments: list[ast.Expression], env: Environment, evaluate_fn: EvaluatorFn
) -> Object:
    return Error("unquote called outside of quote")
