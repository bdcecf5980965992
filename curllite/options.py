from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum
from typing import Any

from curllite.errors import FormatError, FormatErrorReason
from curllite.lexer import looks_like_option, unquote


class Arity(str, Enum):
    SINGLE = "single"
    MULTI = "multi"
    FLAG = "flag"


@dataclass(frozen=True, slots=True)
class OptionSpec:
    short: str
    long: str
    field: str
    arity: Arity


OPTION_TABLE: tuple[OptionSpec, ...] = (
    OptionSpec("-X", "--request", "method", Arity.SINGLE),
    OptionSpec("-H", "--header", "headers", Arity.MULTI),
    OptionSpec("-d", "--data", "body", Arity.SINGLE),
    OptionSpec("-b", "--cookie", "cookie_header", Arity.SINGLE),
    OptionSpec("-u", "--user", "basic_auth_user", Arity.SINGLE),
    OptionSpec("-e", "--referer", "referer", Arity.SINGLE),
    OptionSpec("-A", "--user-agent", "user_agent", Arity.SINGLE),
    OptionSpec("-F", "--form", "use_multipart_form", Arity.FLAG),
    OptionSpec("-k", "--insecure", "allow_insecure_tls", Arity.FLAG),
    OptionSpec("-L", "--location", "follow_redirects", Arity.FLAG),
)


class _OptionParser(argparse.ArgumentParser):
    def error(self, message: str) -> Any:
        raise FormatError(FormatErrorReason.UNKNOWN_OPTION, detail=message)


def build_option_parser(*, program: str) -> argparse.ArgumentParser:
    parser = _OptionParser(prog=program, add_help=False, allow_abbrev=False)
    for spec in OPTION_TABLE:
        if spec.arity == Arity.SINGLE:
            parser.add_argument(spec.short, spec.long, dest=spec.field, default=None)
        elif spec.arity == Arity.MULTI:
            parser.add_argument(spec.short, spec.long, dest=spec.field, action="append", default=None)
        else:
            parser.add_argument(spec.short, spec.long, dest=spec.field, action="store_true")
    return parser


@dataclass(frozen=True)
class MatchedOptions:
    values: dict[str, Any]
    positionals: list[str]


def match_options(tokens: list[str], *, program: str) -> MatchedOptions:
    """Match ``tokens`` against the option table.

    Option values and positionals come back with their enclosing quotes
    removed. Header values are left quoted; header parsing strips them.
    """
    parser = build_option_parser(program=program)
    namespace, rest = parser.parse_known_args(tokens)

    positionals: list[str] = []
    for token in rest:
        if looks_like_option(token):
            raise FormatError(FormatErrorReason.UNKNOWN_OPTION, token=token)
        positionals.append(unquote(token))

    values: dict[str, Any] = {}
    for spec in OPTION_TABLE:
        raw = getattr(namespace, spec.field)
        if spec.arity == Arity.SINGLE and raw is not None:
            values[spec.field] = unquote(raw)
        elif spec.arity == Arity.MULTI and raw:
            values[spec.field] = list(raw)
        elif spec.arity == Arity.FLAG:
            values[spec.field] = bool(raw)
    return MatchedOptions(values=values, positionals=positionals)
