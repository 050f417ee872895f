"""Generic post-order rewriting of Monkey syntax trees.

`modify` is shared by quoting (splicing unquoted values back into syntax) and
macro expansion (replacing macro call sites). Children are rewritten first,
then the modifier sees the rebuilt parent. Parents are rebuilt with
`dataclasses.replace`, so the tree passed in is never mutated and a subtree
reachable from two places cannot be rewritten twice through aliasing.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Optional

from monkey.reader import ast_nodes as ast

ModifierFn = Callable[[ast.Node], ast.Node]


def _modify_opt(node: Optional[ast.Node], modifier: ModifierFn) -> Optional[ast.Node]:
    return None if node is None else modify(node, modifier)


def _modify_all(nodes: list, modifier: ModifierFn) -> list:
    return [_modify_opt(n, modifier) for n in nodes]


def modify(node: ast.Node, modifier: ModifierFn) -> ast.Node:
    """Rebuild `node` bottom-up, applying `modifier` to every node on the way out."""
    match node:
        case ast.Program():
            node = replace(node, statements=_modify_all(node.statements, modifier))
        case ast.ExpressionStatement():
            node = replace(node, expression=_modify_opt(node.expression, modifier))
        case ast.BlockStatement():
            node = replace(node, statements=_modify_all(node.statements, modifier))
        case ast.ReturnStatement():
            node = replace(node, return_value=_modify_opt(node.return_value, modifier))
        case ast.LetStatement():
            node = replace(node, value=_modify_opt(node.value, modifier))
        case ast.PrefixExpression():
            node = replace(node, right=_modify_opt(node.right, modifier))
        case ast.InfixExpression():
            node = replace(
                node,
                left=_modify_opt(node.left, modifier),
                right=_modify_opt(node.right, modifier),
            )
        case ast.IndexExpression():
            node = replace(
                node,
                left=_modify_opt(node.left, modifier),
                index=_modify_opt(node.index, modifier),
            )
        case ast.IfExpression():
            node = replace(
                node,
                condition=_modify_opt(node.condition, modifier),
                consequence=_modify_opt(node.consequence, modifier),
                alternative=_modify_opt(node.alternative, modifier),
            )
        case ast.FunctionLiteral() | ast.MacroLiteral():
            # parameters are binding sites, not expressions; only the body is rewritten
            node = replace(node, body=_modify_opt(node.body, modifier))
        case ast.CallExpression():
            node = replace(
                node,
                function=_modify_opt(node.function, modifier),
                arguments=_modify_all(node.arguments, modifier),
            )
        case ast.ArrayLiteral():
            node = replace(node, elements=_modify_all(node.elements, modifier))
        case ast.HashLiteral():
            node = replace(
                node,
                pairs=[(_modify_opt(k, modifier), _modify_opt(v, modifier)) for k, v in node.pairs],
            )

    return modifier(node)
