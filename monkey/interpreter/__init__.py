from __future__ import annotations

import logging
from typing import Callable, TextIO

from monkey.errors import MonkeySyntaxError
from monkey.evaluation.evaluator import evaluate
from monkey.evaluation.macro_expansion import define_macros, expand_macros
from monkey.reader import ast_nodes as ast
from monkey.reader.lexer import Lexer
from monkey.reader.parser import Parser
from monkey.types.environment import Environment
from monkey.types.macro_environment import MacroEnvironment
from monkey.types.nil import NULL
from monkey.types.objects import Object

log = logging.getLogger("monkey.interpreter")


class Interpreter:
    """
    Orchestrates lexing, parsing, macro expansion and evaluation of Monkey code.
    Maintains an Environment and a MacroEnvironment across calls, so names and
    macros defined by one `eval` are visible to the next.
    """

    def __init__(
        self,
        eval_fn: Callable[[ast.Node, Environment], Object] | None = None,
        prelude: str | None = None,
        dump_to: TextIO | None = None,
    ):
        self.eval_fn = eval_fn or evaluate
        self.env: Environment = Environment()
        self.macros: MacroEnvironment = MacroEnvironment()
        # Program of the most recent eval, after macro expansion
        self.last_program: ast.Node | None = None
        # When set, each expanded program is written here before evaluation
        self.dump_to = dump_to

        if prelude:
            self.eval(prelude)

    def parse(self, code: str) -> ast.Program:
        """Parse `code`; raises MonkeySyntaxError carrying every diagnostic."""
        parser = Parser(Lexer(code))
        program = parser.parse_program()
        if parser.errors:
            raise MonkeySyntaxError(parser.errors)
        log.debug("parsed %d statement(s)", len(program.statements))
        return program

    def expand(self, program: ast.Program) -> ast.Node:
        define_macros(program, self.macros)
        return expand_macros(program, self.macros)

    def run(self, program: ast.Program) -> Object:
        """Expand and evaluate an already parsed program."""
        expanded = self.expand(program)
        if self.dump_to is not None:
            self.dump_to.write(f"=== AST ===\n{expanded}\n=== END AST ===\n")
        self.last_program = expanded
        result = self.eval_fn(expanded, self.env)
        return NULL if result is None else result

    def eval(self, code: str) -> Object:
        return self.run(self.parse(code))
