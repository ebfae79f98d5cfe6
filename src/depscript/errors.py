"""Error types for depscript scanning, parsing, and execution."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .lexer import Position, TokenKind


class DepscriptError(Exception):
    """Base exception for all depscript errors."""


class ScanError(DepscriptError):
    """Raised by the scanner when the input cannot be tokenized."""

    def __init__(self, message: str, position: Position) -> None:
        self.message = message
        self.position = position
        super().__init__(message)


class ParseError(DepscriptError):
    """A fatal script error, reported as ``<filename>(<line>:<column>) <message>``."""

    def __init__(self, filename: str, position: Position, message: str) -> None:
        self.filename = filename
        self.position = position
        self.message = message
        super().__init__(self.format())

    def format(self) -> str:
        return f"{self.filename}({self.position.line}:{self.position.column}) {self.message}"


class InvalidTokenError(ParseError):
    """The token source reported a lexical error."""

    def __init__(self, filename: str, position: Position, detail: str) -> None:
        self.detail = detail
        super().__init__(filename, position, f"found invalid token: {detail}")


class UnexpectedTokenError(ParseError):
    """A required token kind was not found."""

    def __init__(
        self,
        filename: str,
        position: Position,
        expected: TokenKind,
        actual: TokenKind,
    ) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(filename, position, f"expected token {expected}, got {actual}")


class ArgumentCountError(ParseError):
    """An ``extract`` or ``set`` argument did not split into two parts."""

    def __init__(self, filename: str, position: Position, message: str, count: int) -> None:
        self.count = count
        super().__init__(filename, position, message)


class ScriptLoadError(DepscriptError):
    """A script file could not be read or decoded."""


class TemplateRenderError(DepscriptError):
    """A script could not be rendered as a template."""


class SettingsError(DepscriptError):
    """A settings file could not be loaded or validated."""


class CommandError(DepscriptError):
    """A compiled command exited with a non-zero status."""

    def __init__(self, command: str, returncode: int) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(f"command failed with exit status {returncode}: {command}")
