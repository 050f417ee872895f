"""
  Monkey Lexer

- One character of lookahead, no backtracking
- Never raises: anything unrecognised becomes an ILLEGAL token and is
  reported later by the parser
- EOF is returned repeatedly once the input is exhausted
"""

from __future__ import annotations

from typing import Iterator

from monkey.reader.token import Token, TokenType, SINGLE_CHAR_TOKENS, lookup_ident


_EOF_CHAR = ""
_WHITESPACE = " \t\r\n"


def is_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    """Streams Monkey source text into tokens."""

    __slots__ = ("source", "position", "read_position", "ch")

    def __init__(self, source: str):
        self.source = source
        self.position = 0  # index of self.ch
        self.read_position = 0  # index of the next character
        self.ch = _EOF_CHAR
        self._read_char()

    def _read_char(self) -> None:
        if self.read_position >= len(self.source):
            self.ch = _EOF_CHAR
        else:
            self.ch = self.source[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def _peek_char(self) -> str:
        if self.read_position >= len(self.source):
            return _EOF_CHAR
        return self.source[self.read_position]

    def _skip_whitespace(self) -> None:
        while self.ch and self.ch in _WHITESPACE:
            self._read_char()

    def _read_while(self, predicate) -> str:
        start = self.position
        while self.ch and predicate(self.ch):
            self._read_char()
        return self.source[start:self.position]

    def _read_string(self) -> str:
        start = self.position + 1
        while True:
            self._read_char()
            if self.ch == '"' or self.ch == _EOF_CHAR:
                break
        return self.source[start:self.position]

    def next_token(self) -> Token:
        self._skip_whitespace()
        ch = self.ch

        if ch == _EOF_CHAR:
            return Token(TokenType.EOF, "")

        # two-character operators
        if ch in "=!" and self._peek_char() == "=":
            self._read_char()
            literal = ch + self.ch
            self._read_char()
            return Token(TokenType.EQ if ch == "=" else TokenType.NOT_EQ, literal)

        if ch in SINGLE_CHAR_TOKENS:
            self._read_char()
            return Token(SINGLE_CHAR_TOKENS[ch], ch)

        if ch == '"':
            literal = self._read_string()
            self._read_char()  # step past the closing quote
            return Token(TokenType.STRING, literal)

        # identifiers, keywords and integers stop on the first character they
        # do not own, so no extra _read_char() here
        if is_letter(ch):
            ident = self._read_while(is_letter)
            return Token(lookup_ident(ident), ident)

        if is_digit(ch):
            return Token(TokenType.INT, self._read_while(is_digit))

        self._read_char()
        return Token(TokenType.ILLEGAL, ch)

    def __iter__(self) -> Iterator[Token]:
        return lex_tokens(self)


def lex_tokens(lexer: Lexer) -> Iterator[Token]:
    """Yield tokens from `lexer` up to and including the first EOF."""
    while True:
        tok = lexer.next_token()
        yield tok
        if tok.kind is TokenType.EOF:
            break


def lex(source: str) -> Iterator[Token]:
    """Token generator over `source`; the final token is always EOF."""
    return lex_tokens(Lexer(source))
