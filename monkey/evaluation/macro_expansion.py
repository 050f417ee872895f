"""Macro definition and expansion over Monkey syntax trees.

Expansion is a separate pass that runs after parsing and before ordinary
evaluation:

1) `define_macros` moves every top-level `let name = macro(...) {...}` out of
   the program and into a MacroEnvironment.
2) `expand_macros` rewrites each call to a known macro. The macro body runs
   with its parameters bound to Quote objects wrapping the *unevaluated*
   argument syntax, and must itself produce a Quote; the quoted node replaces
   the call site.
"""

from __future__ import annotations

import logging

from monkey.errors import MonkeyArityError, MonkeyMacroError
from monkey.evaluation.apply import unwrap_return_value
from monkey.evaluation.evaluator import evaluate
from monkey.reader import ast_nodes as ast
from monkey.reader.rewrite import modify
from monkey.types.function import Macro
from monkey.types.macro_environment import MacroEnvironment
from monkey.types.objects import Quote, is_error

log = logging.getLogger("monkey.macros")


def is_macro_definition(node: ast.Statement) -> bool:
    return isinstance(node, ast.LetStatement) and isinstance(node.value, ast.MacroLiteral)


def add_macro(stmt: ast.LetStatement, macro_env: MacroEnvironment) -> None:
    literal: ast.MacroLiteral = stmt.value
    macro = Macro(literal.parameters, literal.body, macro_env)
    macro_env.define_macro(stmt.name.value, macro)
    log.debug("defined macro %s(%s)", stmt.name.value, ", ".join(str(p) for p in literal.parameters))


def define_macros(program: ast.Program, macro_env: MacroEnvironment) -> None:
    """Collect top-level macro definitions into `macro_env` and drop them from `program`.

    Only the program's own statement list is scanned; macro literals nested
    in blocks or bound later at runtime are left alone.
    """
    kept: list[ast.Statement] = []
    for stmt in program.statements:
        if is_macro_definition(stmt):
            add_macro(stmt, macro_env)
        else:
            kept.append(stmt)
    program.statements = kept


def _macro_for_call(node: ast.Node, macro_env: MacroEnvironment) -> Macro | None:
    if not isinstance(node, ast.CallExpression):
        return None
    if not isinstance(node.function, ast.Identifier):
        return None
    return macro_env.get_macro(node.function.value)


def expand_macro_call(call: ast.CallExpression, macro: Macro) -> ast.Node:
    """Run `macro` over the quoted arguments of `call` and return the syntax it builds."""
    name = call.function.value
    if len(call.arguments) != macro.arity:
        raise MonkeyArityError(
            f"macro {name} expects {macro.arity} arguments, got {len(call.arguments)}"
        )

    args = [Quote(arg) for arg in call.arguments]
    eval_env = macro.extend_env(args)
    evaluated = unwrap_return_value(evaluate(macro.body, eval_env))

    if is_error(evaluated):
        raise MonkeyMacroError(f"error expanding macro {name}: {evaluated.message}")
    if not isinstance(evaluated, Quote):
        raise MonkeyMacroError(
            f"macro {name} must return quoted syntax, got {evaluated.object_type}"
        )
    log.debug("expanded %s into %s", call, evaluated.node)
    return evaluated.node


def expand_macros(program: ast.Node, macro_env: MacroEnvironment) -> ast.Node:
    """Return a copy of `program` with every macro call replaced by its expansion."""

    def _expand(node: ast.Node) -> ast.Node:
        macro = _macro_for_call(node, macro_env)
        if macro is None:
            return node
        return expand_macro_call(node, macro)

    return modify(program, _expand)
