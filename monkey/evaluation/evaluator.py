"""Core evaluator for the Monkey interpreter.

`evaluate(node, env)` maps a syntax tree to a runtime value by recursive
descent. There is no exception-based control flow: a `return` travels
outward as a ReturnValue and a failure as an Error value, and every place
that sequences evaluation checks for both and stops at the first one.
"""

from __future__ import annotations

from typing import Optional

from monkey.builtin.builtins import lookup_builtin
from monkey.evaluation.apply import apply_function
from monkey.evaluation.special_forms import SPECIAL_FORMS
from monkey.reader import ast_nodes as ast
from monkey.types.environment import Environment
from monkey.types.function import Function
from monkey.types.nil import NULL, is_truthy
from monkey.types.objects import (
    Object,
    Integer,
    String,
    Array,
    Hash,
    HashPair,
    Hashable,
    Error,
    ReturnValue,
    TRUE,
    FALSE,
    INTEGER_OBJ,
    STRING_OBJ,
    ARRAY_OBJ,
    HASH_OBJ,
    RETURN_VALUE_OBJ,
    ERROR_OBJ,
    is_error,
    native_bool_to_boolean,
)


def evaluate(node: Optional[ast.Node], env: Environment) -> Object:
    """Evaluate `node` in `env`. Total over the grammar: unknown nodes yield NULL."""
    match node:
        case None:
            return NULL

        # --- Statements ---
        case ast.Program():
            return eval_program(node.statements, env)
        case ast.ExpressionStatement():
            return evaluate(node.expression, env)
        case ast.BlockStatement():
            return eval_block_statement(node.statements, env)
        case ast.ReturnStatement():
            value = evaluate(node.return_value, env)
            if is_error(value):
                return value
            return ReturnValue(value)
        case ast.LetStatement():
            value = evaluate(node.value, env)
            if is_error(value):
                return value
            return env.define(node.name.value, value)

        # --- Literals ---
        case ast.IntegerLiteral():
            return Integer(node.value)
        case ast.StringLiteral():
            return String(node.value)
        case ast.BooleanLiteral():
            return native_bool_to_boolean(node.value)
        case ast.ArrayLiteral():
            elements = eval_expressions(node.elements, env)
            if isinstance(elements, Error):
                return elements
            return Array(elements)
        case ast.HashLiteral():
            return eval_hash_literal(node, env)
        case ast.FunctionLiteral():
            return Function(node.parameters, node.body, env)

        # --- Expressions ---
        case ast.Identifier():
            return eval_identifier(node, env)
        case ast.PrefixExpression():
            right = evaluate(node.right, env)
            if is_error(right):
                return right
            return eval_prefix_expression(node.operator, right)
        case ast.InfixExpression():
            left = evaluate(node.left, env)
            if is_error(left):
                return left
            right = evaluate(node.right, env)
            if is_error(right):
                return right
            return eval_infix_expression(node.operator, left, right)
        case ast.IfExpression():
            return eval_if_expression(node, env)
        case ast.CallExpression(function=ast.Identifier(value=name)) if name in SPECIAL_FORMS:
            return SPECIAL_FORMS[name](node.arguments, env, evaluate)
        case ast.CallExpression():
            fn = evaluate(node.function, env)
            if is_error(fn):
                return fn
            args = eval_expressions(node.arguments, env)
            if isinstance(args, Error):
                return args
            return apply_function(fn, args, evaluate)
        case ast.IndexExpression():
            left = evaluate(node.left, env)
            if is_error(left):
                return left
            index = evaluate(node.index, env)
            if is_error(index):
                return index
            return eval_index_expression(left, index)

    # Macro literals outside a top-level let, and anything unknown
    return NULL


def eval_program(statements: list[ast.Statement], env: Environment) -> Object:
    result: Object = NULL
    for stmt in statements:
        result = evaluate(stmt, env)
        if isinstance(result, ReturnValue):
            return result.value
        if isinstance(result, Error):
            return result
    return result


def eval_block_statement(statements: list[ast.Statement], env: Environment) -> Object:
    # The ReturnValue wrapper is kept so that it reaches the enclosing call.
    result: Object = NULL
    for stmt in statements:
        result = evaluate(stmt, env)
        if result.object_type in (RETURN_VALUE_OBJ, ERROR_OBJ):
            return result
    return result


def eval_expressions(exps: list[ast.Expression], env: Environment) -> list[Object] | Error:
    """Evaluate left to right; the first Error is returned instead of the list."""
    result: list[Object] = []
    for exp in exps:
        evaluated = evaluate(exp, env)
        if is_error(evaluated):
            return evaluated
        result.append(evaluated)
    return result


def eval_identifier(node: ast.Identifier, env: Environment) -> Object:
    value = env.get(node.value)
    if value is not None:
        return value
    builtin = lookup_builtin(node.value)
    if builtin is not None:
        return builtin
    return Error(f"identifier not found: {node.value}")


def eval_prefix_expression(operator: str, right: Object) -> Object:
    match operator:
        case "!":
            return eval_bang_operator_expression(right)
        case "-":
            return eval_minus_prefix_operator_expression(right)
    return Error(f"unknown operator: {operator}{right.object_type}")


def eval_bang_operator_expression(right: Object) -> Object:
    if right is TRUE:
        return FALSE
    if right is FALSE or right is NULL:
        return TRUE
    return FALSE


def eval_minus_prefix_operator_expression(right: Object) -> Object:
    if right.object_type != INTEGER_OBJ:
        return Error(f"unknown operator: -{right.object_type}")
    return Integer(_to_i64(-right.value))


def eval_infix_expression(operator: str, left: Object, right: Object) -> Object:
    if left.object_type == INTEGER_OBJ and right.object_type == INTEGER_OBJ:
        return eval_integer_infix_expression(operator, left, right)
    if left.object_type == STRING_OBJ and right.object_type == STRING_OBJ:
        return eval_string_infix_expression(operator, left, right)
    # Identity, not structure: booleans and null are singletons
    if operator == "==":
        return native_bool_to_boolean(left is right)
    if operator == "!=":
        return native_bool_to_boolean(left is not right)
    if left.object_type != right.object_type:
        return Error(f"type mismatch: {left.object_type} {operator} {right.object_type}")
    return Error(f"unknown operator: {left.object_type} {operator} {right.object_type}")


_INT_BITS = 64


def _to_i64(value: int) -> int:
    """Wrap `value` to signed 64-bit two's complement."""
    value &= (1 << _INT_BITS) - 1
    return value - (1 << _INT_BITS) if value >> (_INT_BITS - 1) else value


def _truncating_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def eval_integer_infix_expression(operator: str, left: Integer, right: Integer) -> Object:
    a, b = left.value, right.value
    match operator:
        case "+":
            return Integer(_to_i64(a + b))
        case "-":
            return Integer(_to_i64(a - b))
        case "*":
            return Integer(_to_i64(a * b))
        case "/":
            if b == 0:
                return Error("division by zero")
            return Integer(_to_i64(_truncating_div(a, b)))
        case "<":
            return native_bool_to_boolean(a < b)
        case ">":
            return native_bool_to_boolean(a > b)
        case "==":
            return native_bool_to_boolean(a == b)
        case "!=":
            return native_bool_to_boolean(a != b)
    return Error(f"unknown operator: {left.object_type} {operator} {right.object_type}")


def eval_string_infix_expression(operator: str, left: String, right: String) -> Object:
    if operator != "+":
        return Error(f"unknown operator: {left.object_type} {operator} {right.object_type}")
    return String(left.value + right.value)


def eval_if_expression(node: ast.IfExpression, env: Environment) -> Object:
    condition = evaluate(node.condition, env)
    if is_error(condition):
        return condition
    if is_truthy(condition):
        return evaluate(node.consequence, env)
    if node.alternative is not None:
        return evaluate(node.alternative, env)
    return NULL


def eval_index_expression(left: Object, index: Object) -> Object:
    if left.object_type == ARRAY_OBJ and index.object_type == INTEGER_OBJ:
        return eval_array_index_expression(left, index)
    if left.object_type == HASH_OBJ:
        return eval_hash_index_expression(left, index)
    return Error(f"index operator not supported: {left.object_type}")


def eval_array_index_expression(array: Array, index: Integer) -> Object:
    idx = index.value
    max_index = len(array.elements) - 1
    if idx < 0 or idx > max_index:
        return NULL
    return array.elements[idx]


def eval_hash_index_expression(hash_obj: Hash, index: Object) -> Object:
    if not isinstance(index, Hashable):
        return Error(f"unusable as hash key: {index.object_type}")
    pair = hash_obj.pairs.get(index.hash_key())
    return NULL if pair is None else pair.value


def eval_hash_literal(node: ast.HashLiteral, env: Environment) -> Object:
    pairs: dict = {}
    for key_node, value_node in node.pairs:
        key = evaluate(key_node, env)
        if is_error(key):
            return key
        if not isinstance(key, Hashable):
            return Error(f"unusable as hash key: {key.object_type}")
        value = evaluate(value_node, env)
        if is_error(value):
            return value
        pairs[key.hash_key()] = HashPair(key, value)
    return Hash(pairs)
