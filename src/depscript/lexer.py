"""
Scanner for depscript files.

Converts raw script text into a stream of tokens with source positions.
Tokens are produced on demand through ``next_token()``; the end of input is
an ``EOF`` token, never an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from .errors import ScanError


class TokenKind(Enum):
    """Token kinds in the depscript language."""

    # Keywords
    CLONE = "Clone"
    RUN = "Run"
    EXTRACT = "Extract"
    SET = "Set"
    AS = "As"

    # Literals
    STRING = "String"

    # Punctuation
    SEMICOLON = "Semicolon"

    # Special
    COMMENT = "Comment"
    EOF = "EOF"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


KEYWORDS: dict[str, TokenKind] = {
    "clone": TokenKind.CLONE,
    "run": TokenKind.RUN,
    "extract": TokenKind.EXTRACT,
    "set": TokenKind.SET,
    "as": TokenKind.AS,
}

_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "t": "\t",
}


@dataclass(frozen=True)
class Position:
    """A 1-indexed line and column in the source text."""

    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """A single token with its literal text and source position."""

    kind: TokenKind
    text: str
    position: Position

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.text!r}, {self.position})"


class TokenSource(Protocol):
    """Anything that can hand out tokens one at a time."""

    def next_token(self) -> Token: ...


class Lexer:
    """Tokenizer for depscript text."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1

    @property
    def position(self) -> Position:
        return Position(self.line, self.column)

    def _peek(self, offset: int = 0) -> str:
        pos = self.pos + offset
        if pos >= len(self.text):
            return ""
        return self.text[pos]

    def _advance(self) -> str:
        char = self.text[self.pos]
        self.pos += 1
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def _skip_whitespace(self) -> None:
        while self._peek() in (" ", "\t", "\r", "\n"):
            self._advance()

    def _read_comment(self, start: Position) -> Token:
        # consume the leading '//'
        self._advance()
        self._advance()
        chars = []
        while self._peek() not in ("", "\n"):
            chars.append(self._advance())
        return Token(TokenKind.COMMENT, "".join(chars).strip(), start)

    def _read_string(self, start: Position) -> Token:
        self._advance()
        chars = []
        while True:
            char = self._peek()
            if char == "":
                raise ScanError("unterminated string literal", start)
            if char == "\n":
                raise ScanError("newline in string literal", self.position)
            if char == '"':
                self._advance()
                return Token(TokenKind.STRING, "".join(chars), start)
            if char == "\\":
                escape_pos = self.position
                self._advance()
                code = self._peek()
                if code not in _ESCAPES:
                    raise ScanError(f"invalid escape sequence '\\{code}'", escape_pos)
                self._advance()
                chars.append(_ESCAPES[code])
                continue
            chars.append(self._advance())

    def _read_word(self, start: Position) -> Token:
        chars = []
        while self._peek().isalnum() or self._peek() in ("_", "-"):
            chars.append(self._advance())
        word = "".join(chars)
        return Token(KEYWORDS.get(word, TokenKind.UNKNOWN), word, start)

    def next_token(self) -> Token:
        """Return the next token, or an EOF token once the input is exhausted.

        Raises:
            ScanError: If the input contains a character that starts no token.
        """
        self._skip_whitespace()
        start = self.position
        char = self._peek()

        if char == "":
            return Token(TokenKind.EOF, "", start)
        if char == "/" and self._peek(1) == "/":
            return self._read_comment(start)
        if char == ";":
            self._advance()
            return Token(TokenKind.SEMICOLON, ";", start)
        if char == '"':
            return self._read_string(start)
        if char.isalpha() or char == "_":
            return self._read_word(start)

        raise ScanError(f"unexpected character {char!r}", start)

    def tokenize(self) -> list[Token]:
        """Scan the whole input, including the trailing EOF token."""
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                return tokens
