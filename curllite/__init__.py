from __future__ import annotations

from curllite.config import CommandSettings, load_settings
from curllite.errors import FormatError, FormatErrorReason
from curllite.formatter import format_command
from curllite.lexer import tokenize
from curllite.models import RequestDescription
from curllite.options import OPTION_TABLE, Arity, OptionSpec
from curllite.parser import parse_command, try_parse_command

__all__ = [
    "__version__",
    # Model
    "RequestDescription",
    # Operations
    "parse_command",
    "try_parse_command",
    "format_command",
    # Errors
    "FormatError",
    "FormatErrorReason",
    # Grammar
    "OPTION_TABLE",
    "OptionSpec",
    "Arity",
    "tokenize",
    # Config
    "CommandSettings",
    "load_settings",
]

__version__ = "0.1.0"
