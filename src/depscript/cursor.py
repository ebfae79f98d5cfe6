"""Token cursor — one-token lookahead over a token source."""

from __future__ import annotations

import logging

from .errors import InvalidTokenError, ScanError, UnexpectedTokenError
from .lexer import Position, Token, TokenKind, TokenSource

logger = logging.getLogger(__name__)


class TokenCursor:
    """Keeps the current and previous token and enforces expected kinds.

    The cursor is primed on construction, so ``current`` always holds the
    next unconsumed token.
    """

    def __init__(self, source: TokenSource, filename: str = "<script>") -> None:
        self._source = source
        self.filename = filename
        self.previous = Token(TokenKind.EOF, "", Position())
        self.current = Token(TokenKind.EOF, "", Position())
        self.advance()

    def advance(self) -> Token:
        """Pull the next token from the source and return the one it replaces."""
        try:
            token = self._source.next_token()
        except ScanError as exc:
            raise InvalidTokenError(self.filename, exc.position, exc.message) from exc
        self.previous, self.current = self.current, token
        return self.previous

    def peek_kind(self) -> TokenKind:
        """Return the current token kind, discarding any comments first."""
        while self.current.kind == TokenKind.COMMENT:
            logger.debug("Skipping comment at %s", self.current.position)
            self.advance()
        return self.current.kind

    def expect(self, kind: TokenKind) -> Token:
        """Consume the current token, which must be of the given kind.

        Raises:
            UnexpectedTokenError: If the consumed token has another kind.
        """
        self.peek_kind()
        token = self.advance()
        if token.kind != kind:
            raise UnexpectedTokenError(self.filename, token.position, kind, token.kind)
        return token

    def allow(self, kind: TokenKind) -> bool:
        """Consume the current token only if it is of the given kind."""
        if self.peek_kind() == kind:
            self.advance()
            return True
        return False
