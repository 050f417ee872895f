"""Function (closure) and macro values, and their argument binding."""

from __future__ import annotations

from io import StringIO

from monkey import MonkeyValue
from monkey.reader import ast_nodes as ast
from monkey.types.environment import Environment
from monkey.types.objects import Object, FUNCTION_OBJ, MACRO_OBJ


class Function(Object):
    """A first-class function with formal parameters, body, and closure env."""

    __slots__ = ("parameters", "body", "env")
    object_type = FUNCTION_OBJ
    keyword = "fn"

    def __init__(
        self,
        parameters: list[ast.Identifier],
        body: ast.BlockStatement | None,
        env: Environment,
    ):
        self.parameters: list[ast.Identifier] = parameters
        self.body: ast.BlockStatement | None = body
        # The environment active where the literal was evaluated
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def inspect(self) -> str:
        with StringIO() as buffer:
            buffer.write(self.keyword)
            buffer.write("(")
            buffer.write(", ".join(str(p) for p in self.parameters))
            buffer.write(") ")
            buffer.write(str(self.body) if self.body is not None else "{ }")
            return buffer.getvalue()

    def extend_env(self, args: list[MonkeyValue]) -> Environment:
        """
        Bind `args` positionally to this function's parameters in a new
        Environment enclosed by the captured one. Callers check the arity.
        """
        env = self.env.enclosed()
        for param, arg in zip(self.parameters, args):
            env.define(param.value, arg)
        return env


class Macro(Function):
    """A macro transformer: receives quoted argument syntax, returns a Quote."""

    __slots__ = ()
    object_type = MACRO_OBJ
    keyword = "macro"
