"""Declaration interpreter — compile a token stream into shell commands.

Grammar::

    script  := (decl [';'])* [';'] EOF
    decl    := 'clone' STRING ['as' STRING]
             | 'run' STRING
             | 'extract' STRING
             | 'set' STRING

Each declaration either appends exactly one command to the plan or binds
exactly one variable. The first error aborts the whole script.
"""

from __future__ import annotations

import logging
import os
import posixpath
import random
from collections.abc import Callable, Mapping

from .config import Settings
from .cursor import TokenCursor
from .errors import ArgumentCountError
from .lexer import Lexer, Token, TokenKind, TokenSource
from .plan import Plan
from .resolve import Resolver

logger = logging.getLogger(__name__)

STAGING_ID_RANGE = 10**12


class Interpreter:
    """Recursive-descent interpreter owning the state of a single script."""

    def __init__(
        self,
        source: TokenSource,
        *,
        filename: str = "<script>",
        settings: Settings | None = None,
        variables: Mapping[str, str] | None = None,
        cwd: str | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.filename = filename
        self.settings = settings or Settings()
        self.variables: dict[str, str] = {**self.settings.variables, **(variables or {})}
        self.commands: list[str] = []
        self._cwd = cwd
        self._rng = rng or random.Random()
        self._resolver = Resolver(self.variables)
        self._source = source
        self._cursor: TokenCursor
        self._handlers: dict[TokenKind, Callable[[], None]] = {
            TokenKind.CLONE: self._clone_decl,
            TokenKind.RUN: self._run_decl,
            TokenKind.EXTRACT: self._extract_decl,
            TokenKind.SET: self._set_decl,
        }

    def parse(self) -> Plan:
        """Interpret every declaration and return the compiled plan.

        Raises:
            ParseError: On the first lexical, structural, or argument error.
        """
        self._cursor = cursor = TokenCursor(self._source, self.filename)
        while (handler := self._handlers.get(cursor.peek_kind())) is not None:
            handler()
            # a ";" may also separate declarations, not only end the script
            cursor.allow(TokenKind.SEMICOLON)

        cursor.allow(TokenKind.SEMICOLON)
        cursor.expect(TokenKind.EOF)

        logger.debug(
            "Compiled %d command(s) and %d variable(s) from '%s'",
            len(self.commands),
            len(self.variables),
            self.filename,
        )
        return Plan(
            filename=self.filename,
            commands=list(self.commands),
            variables=dict(self.variables),
        )

    # -- Helpers --

    def _argument(self) -> Token:
        """Consume the declaration keyword and its string argument."""
        self._cursor.advance()
        return self._cursor.expect(TokenKind.STRING)

    def _substitute(self, text: str) -> str:
        return self._resolver.resolve(text)

    def _staging_path(self) -> str:
        suffix = self._rng.randrange(STAGING_ID_RANGE)
        return posixpath.join(self.settings.staging_root, f"{self.settings.staging_prefix}{suffix}")

    def _working_dir(self) -> str:
        return self._cwd if self._cwd is not None else os.getcwd()

    # -- Declarations --

    def _clone_decl(self) -> None:
        tok = self._argument()
        url = "https://" + tok.text
        path = self._staging_path()
        depth = self.settings.clone_depth

        parts = url.split("@")
        if len(parts) == 2:
            url, ref = parts
            clone = f"git clone --depth={depth} --branch {ref} {url} {path}"
        else:
            clone = f"git clone --depth={depth} {url} {path}"

        if self._cursor.allow(TokenKind.AS):
            name = self._cursor.expect(TokenKind.STRING).text
            logger.debug("Binding '%s' to staging path %s", name, path)
            self.variables[name] = path

        logger.debug("clone %s -> %s", url, path)
        self.commands.append(f"cd {self.settings.staging_root} && {clone}")

    def _run_decl(self) -> None:
        tok = self._argument()
        command = self._substitute(tok.text)
        logger.debug("run %s", command)
        self.commands.append(command)

    def _extract_decl(self) -> None:
        tok = self._argument()
        args = self._substitute(tok.text).split(" ")
        if len(args) != 2:
            raise ArgumentCountError(
                self.filename,
                tok.position,
                f"expected two arguments but got {len(args)}",
                len(args),
            )

        src, dest = args
        if dest.startswith("."):
            dest = self._working_dir() + dest[1:]

        logger.debug("extract %s -> %s", src, dest)
        self.commands.append(f"mv {src} {dest}")

    def _set_decl(self) -> None:
        tok = self._argument()
        parts = self._substitute(tok.text).split("=")
        if len(parts) != 2:
            raise ArgumentCountError(
                self.filename,
                tok.position,
                f"expected two arguments separated by '=' but got {len(parts)}",
                len(parts),
            )

        name, value = parts
        logger.debug("set %s=%s", name, value)
        self.variables[name] = value


def parse(text: str, *, filename: str = "<script>", **kwargs) -> Plan:
    """Interpret script text and return its plan. kwargs are passed to Interpreter."""
    return Interpreter(Lexer(text), filename=filename, **kwargs).parse()
