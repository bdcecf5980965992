from __future__ import annotations

import logging

from curllite.config import CommandSettings
from curllite.errors import FormatError, FormatErrorReason
from curllite.lexer import tokenize
from curllite.models import (
    DEFAULT_METHOD,
    RequestDescription,
    normalize_method,
    normalize_url,
    parse_header,
)
from curllite.options import match_options

logger = logging.getLogger(__name__)


def parse_command(src: str, *, settings: CommandSettings | None = None) -> RequestDescription:
    settings = settings or CommandSettings()
    if not src.startswith(settings.prefix):
        raise FormatError(FormatErrorReason.MISSING_PREFIX)

    tokens = tokenize(src[len(settings.prefix) :])
    matched = match_options(tokens, program=settings.program)
    if not matched.positionals:
        raise FormatError(FormatErrorReason.MISSING_URL)

    values = dict(matched.values)
    raw_headers = values.pop("headers", None)
    headers: dict[str, str] | None = None
    if raw_headers:
        headers = {}
        for raw in raw_headers:
            name, value = parse_header(raw)
            headers[name] = value

    target_url = normalize_url(matched.positionals[0])
    method = values.pop("method", None)
    method = normalize_method(method) if method is not None else DEFAULT_METHOD
    return RequestDescription(
        target_url=target_url,
        method=method,
        headers=headers,
        **values,
    )


def try_parse_command(
    src: str, *, settings: CommandSettings | None = None
) -> RequestDescription | None:
    settings = settings or CommandSettings()
    try:
        return parse_command(src, settings=settings)
    except FormatError as e:
        logger.debug("not a %s command (%s): %r", settings.program, e, src)
        return None
