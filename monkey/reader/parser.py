"""
  Monkey Parser

- Pratt (precedence-climbing) expression parsing driven by two tables:
  prefix handlers keyed by the token that starts an expression, infix
  handlers keyed by the token that continues one
- Never raises on bad input: diagnostics accumulate in `Parser.errors` and
  parsing resumes at the next statement
"""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Optional

from monkey.reader import ast_nodes as ast
from monkey.reader.lexer import Lexer
from monkey.reader.token import Token, TokenType


class Precedence(IntEnum):
    LOWEST = 1
    EQUALS = 2  # ==
    LESSGREATER = 3  # > or <
    SUM = 4  # +
    PRODUCT = 5  # *
    PREFIX = 6  # -X or !X
    CALL = 7  # myFunction(X)
    INDEX = 8  # array[index]


PRECEDENCES: dict[TokenType, Precedence] = {
    TokenType.EQ: Precedence.EQUALS,
    TokenType.NOT_EQ: Precedence.EQUALS,
    TokenType.LT: Precedence.LESSGREATER,
    TokenType.GT: Precedence.LESSGREATER,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.SLASH: Precedence.PRODUCT,
    TokenType.ASTERISK: Precedence.PRODUCT,
    TokenType.LPAREN: Precedence.CALL,
    TokenType.LBRACKET: Precedence.INDEX,
}

# Largest literal an Integer may hold (signed 64-bit)
INT_MAX = 2**63 - 1

PrefixParseFn = Callable[[], Optional[ast.Expression]]
InfixParseFn = Callable[[ast.Expression], Optional[ast.Expression]]


class Parser:
    """Turns a token stream into a Program, collecting diagnostics on the way."""

    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.errors: list[str] = []

        self.cur_token: Token = lexer.next_token()
        self.peek_token: Token = lexer.next_token()

        self.prefix_parse_fns: dict[TokenType, PrefixParseFn] = {}
        self.infix_parse_fns: dict[TokenType, InfixParseFn] = {}

        self.register_prefix(TokenType.IDENT, self.parse_identifier)
        self.register_prefix(TokenType.INT, self.parse_integer_literal)
        self.register_prefix(TokenType.STRING, self.parse_string_literal)
        self.register_prefix(TokenType.TRUE, self.parse_boolean)
        self.register_prefix(TokenType.FALSE, self.parse_boolean)
        self.register_prefix(TokenType.BANG, self.parse_prefix_expression)
        self.register_prefix(TokenType.MINUS, self.parse_prefix_expression)
        self.register_prefix(TokenType.LPAREN, self.parse_grouped_expression)
        self.register_prefix(TokenType.IF, self.parse_if_expression)
        self.register_prefix(TokenType.FUNCTION, self.parse_function_literal)
        self.register_prefix(TokenType.MACRO, self.parse_macro_literal)
        self.register_prefix(TokenType.LBRACKET, self.parse_array_literal)
        self.register_prefix(TokenType.LBRACE, self.parse_hash_literal)

        for kind in (
            TokenType.PLUS,
            TokenType.MINUS,
            TokenType.SLASH,
            TokenType.ASTERISK,
            TokenType.EQ,
            TokenType.NOT_EQ,
            TokenType.LT,
            TokenType.GT,
        ):
            self.register_infix(kind, self.parse_infix_expression)
        self.register_infix(TokenType.LPAREN, self.parse_call_expression)
        self.register_infix(TokenType.LBRACKET, self.parse_index_expression)

    def register_prefix(self, kind: TokenType, fn: PrefixParseFn) -> None:
        self.prefix_parse_fns[kind] = fn

    def register_infix(self, kind: TokenType, fn: InfixParseFn) -> None:
        self.infix_parse_fns[kind] = fn

    # --- Token cursor ---

    def next_token(self) -> None:
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def cur_token_is(self, kind: TokenType) -> bool:
        return self.cur_token.kind is kind

    def peek_token_is(self, kind: TokenType) -> bool:
        return self.peek_token.kind is kind

    def expect_peek(self, kind: TokenType) -> bool:
        """Advance if the next token is `kind`, otherwise record a diagnostic."""
        if self.peek_token_is(kind):
            self.next_token()
            return True
        self.peek_error(kind)
        return False

    def peek_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.peek_token.kind, Precedence.LOWEST)

    def cur_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.cur_token.kind, Precedence.LOWEST)

    # --- Diagnostics ---

    def peek_error(self, kind: TokenType) -> None:
        self.errors.append(
            f"expected next token to be {kind.value}, got {self.peek_token.kind.value} instead"
        )

    def no_prefix_parse_fn_error(self, kind: TokenType) -> None:
        self.errors.append(f"no prefix parse function for {kind.value} found")

    # --- Statements ---

    def parse_program(self) -> ast.Program:
        program = ast.Program()
        while not self.cur_token_is(TokenType.EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                program.statements.append(stmt)
            self.next_token()
        return program

    def parse_statement(self) -> Optional[ast.Statement]:
        match self.cur_token.kind:
            case TokenType.LET:
                return self.parse_let_statement()
            case TokenType.RETURN:
                return self.parse_return_statement()
            case _:
                return self.parse_expression_statement()

    def parse_let_statement(self) -> Optional[ast.LetStatement]:
        stmt = ast.LetStatement(self.cur_token)

        if not self.expect_peek(TokenType.IDENT):
            return None
        stmt.name = ast.Identifier(self.cur_token, self.cur_token.literal)

        if not self.expect_peek(TokenType.ASSIGN):
            return None

        self.next_token()
        stmt.value = self.parse_expression(Precedence.LOWEST)

        if self.peek_token_is(TokenType.SEMICOLON):
            self.next_token()
        return stmt

    def parse_return_statement(self) -> ast.ReturnStatement:
        stmt = ast.ReturnStatement(self.cur_token)
        self.next_token()
        stmt.return_value = self.parse_expression(Precedence.LOWEST)

        if self.peek_token_is(TokenType.SEMICOLON):
            self.next_token()
        return stmt

    def parse_expression_statement(self) -> ast.ExpressionStatement:
        stmt = ast.ExpressionStatement(self.cur_token)
        stmt.expression = self.parse_expression(Precedence.LOWEST)

        if self.peek_token_is(TokenType.SEMICOLON):
            self.next_token()
        return stmt

    def parse_block_statement(self) -> ast.BlockStatement:
        block = ast.BlockStatement(self.cur_token)
        self.next_token()

        while not self.cur_token_is(TokenType.RBRACE) and not self.cur_token_is(TokenType.EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                block.statements.append(stmt)
            self.next_token()
        return block

    # --- Expressions ---

    def parse_expression(self, precedence: Precedence) -> Optional[ast.Expression]:
        prefix = self.prefix_parse_fns.get(self.cur_token.kind)
        if prefix is None:
            self.no_prefix_parse_fn_error(self.cur_token.kind)
            return None
        left = prefix()

        while not self.peek_token_is(TokenType.SEMICOLON) and precedence < self.peek_precedence():
            infix = self.infix_parse_fns.get(self.peek_token.kind)
            if infix is None:
                return left
            self.next_token()
            left = infix(left)
        return left

    def parse_identifier(self) -> ast.Expression:
        return ast.Identifier(self.cur_token, self.cur_token.literal)

    def parse_integer_literal(self) -> Optional[ast.Expression]:
        literal = self.cur_token.literal
        try:
            value = int(literal)
        except ValueError:
            value = None
        if value is None or value > INT_MAX:
            self.errors.append(f"could not parse {literal} as an integer")
            return None
        return ast.IntegerLiteral(self.cur_token, value)

    def parse_string_literal(self) -> ast.Expression:
        return ast.StringLiteral(self.cur_token, self.cur_token.literal)

    def parse_boolean(self) -> ast.Expression:
        return ast.BooleanLiteral(self.cur_token, self.cur_token_is(TokenType.TRUE))

    def parse_prefix_expression(self) -> ast.Expression:
        expression = ast.PrefixExpression(self.cur_token, self.cur_token.literal)
        self.next_token()
        expression.right = self.parse_expression(Precedence.PREFIX)
        return expression

    def parse_infix_expression(self, left: ast.Expression) -> ast.Expression:
        expression = ast.InfixExpression(self.cur_token, left, self.cur_token.literal)
        precedence = self.cur_precedence()
        self.next_token()
        expression.right = self.parse_expression(precedence)
        return expression

    def parse_grouped_expression(self) -> Optional[ast.Expression]:
        self.next_token()
        expression = self.parse_expression(Precedence.LOWEST)
        if not self.expect_peek(TokenType.RPAREN):
            return None
        return expression

    def parse_if_expression(self) -> Optional[ast.Expression]:
        expression = ast.IfExpression(self.cur_token)

        if not self.expect_peek(TokenType.LPAREN):
            return None
        self.next_token()
        expression.condition = self.parse_expression(Precedence.LOWEST)

        if not self.expect_peek(TokenType.RPAREN):
            return None
        if not self.expect_peek(TokenType.LBRACE):
            return None
        expression.consequence = self.parse_block_statement()

        if self.peek_token_is(TokenType.ELSE):
            self.next_token()
            if not self.expect_peek(TokenType.LBRACE):
                return None
            expression.alternative = self.parse_block_statement()
        return expression

    def parse_function_literal(self) -> Optional[ast.Expression]:
        return self._parse_parameterised_literal(ast.FunctionLiteral)

    def parse_macro_literal(self) -> Optional[ast.Expression]:
        return self._parse_parameterised_literal(ast.MacroLiteral)

    def _parse_parameterised_literal(self, node_cls):
        literal = node_cls(self.cur_token)

        if not self.expect_peek(TokenType.LPAREN):
            return None
        parameters = self.parse_function_parameters()
        if parameters is None:
            return None
        literal.parameters = parameters

        if not self.expect_peek(TokenType.LBRACE):
            return None
        literal.body = self.parse_block_statement()
        return literal

    def parse_function_parameters(self) -> Optional[list[ast.Identifier]]:
        identifiers: list[ast.Identifier] = []

        if self.peek_token_is(TokenType.RPAREN):
            self.next_token()
            return identifiers

        if not self.expect_peek(TokenType.IDENT):
            return None
        identifiers.append(ast.Identifier(self.cur_token, self.cur_token.literal))

        while self.peek_token_is(TokenType.COMMA):
            self.next_token()
            if not self.expect_peek(TokenType.IDENT):
                return None
            identifiers.append(ast.Identifier(self.cur_token, self.cur_token.literal))

        if not self.expect_peek(TokenType.RPAREN):
            return None
        return identifiers

    def parse_call_expression(self, function: ast.Expression) -> Optional[ast.Expression]:
        expression = ast.CallExpression(self.cur_token, function)
        arguments = self.parse_expression_list(TokenType.RPAREN)
        if arguments is None:
            return None
        expression.arguments = arguments
        return expression

    def parse_expression_list(self, end: TokenType) -> Optional[list[ast.Expression]]:
        """Comma-separated expressions up to `end`; shared by calls and arrays."""
        items: list[ast.Expression] = []

        if self.peek_token_is(end):
            self.next_token()
            return items

        self.next_token()
        items.append(self.parse_expression(Precedence.LOWEST))

        while self.peek_token_is(TokenType.COMMA):
            self.next_token()
            self.next_token()
            items.append(self.parse_expression(Precedence.LOWEST))

        if not self.expect_peek(end):
            return None
        return items

    def parse_array_literal(self) -> Optional[ast.Expression]:
        array = ast.ArrayLiteral(self.cur_token)
        elements = self.parse_expression_list(TokenType.RBRACKET)
        if elements is None:
            return None
        array.elements = elements
        return array

    def parse_index_expression(self, left: ast.Expression) -> Optional[ast.Expression]:
        expression = ast.IndexExpression(self.cur_token, left)
        self.next_token()
        expression.index = self.parse_expression(Precedence.LOWEST)

        if not self.expect_peek(TokenType.RBRACKET):
            return None
        return expression

    def parse_hash_literal(self) -> Optional[ast.Expression]:
        hash_literal = ast.HashLiteral(self.cur_token)

        while not self.peek_token_is(TokenType.RBRACE):
            self.next_token()
            key = self.parse_expression(Precedence.LOWEST)

            if not self.expect_peek(TokenType.COLON):
                return None

            self.next_token()
            value = self.parse_expression(Precedence.LOWEST)
            hash_literal.pairs.append((key, value))

            if not self.peek_token_is(TokenType.RBRACE) and not self.expect_peek(TokenType.COMMA):
                return None

        if not self.expect_peek(TokenType.RBRACE):
            return None
        return hash_literal


def parse(source: str) -> tuple[ast.Program, list[str]]:
    """Parse `source`, returning the program and any diagnostics."""
    parser = Parser(Lexer(source))
    program = parser.parse_program()
    return program, parser.errors
