"""depscript - Compile declarative dependency-setup scripts into shell commands."""

from .config import Settings as Settings
from .config import load_settings as load_settings
from .context import Context as Context
from .errors import ArgumentCountError as ArgumentCountError
from .errors import CommandError as CommandError
from .errors import DepscriptError as DepscriptError
from .errors import InvalidTokenError as InvalidTokenError
from .errors import ParseError as ParseError
from .errors import ScriptLoadError as ScriptLoadError
from .errors import UnexpectedTokenError as UnexpectedTokenError
from .interpreter import Interpreter as Interpreter
from .interpreter import parse as parse
from .lexer import Lexer as Lexer
from .lexer import Token as Token
from .lexer import TokenKind as TokenKind
from .loader import load as load
from .plan import Plan as Plan
