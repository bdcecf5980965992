from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# A token is a run of quoted segments and non-space characters. An unmatched
# quote is kept as a literal character.
_TOKEN_RE = re.compile(r"""(?:"[^"]*"|'[^']*'|[^\s"']|["'])+""")

_QUOTES = ("\"", "'")


def tokenize(src: str) -> list[str]:
    """Split ``src`` on whitespace that is not inside a quoted segment.

    Quotes are kept in the returned tokens; ``unquote`` removes the enclosing
    pair once a token is known to be a value.
    """
    tokens = _TOKEN_RE.findall(src)
    logger.debug("tokenized %d tokens: %r", len(tokens), tokens)
    return tokens


def unquote(token: str) -> str:
    if len(token) >= 2 and token[0] in _QUOTES and token[-1] == token[0]:
        return token[1:-1]
    return token


def looks_like_option(token: str) -> bool:
    return len(token) > 1 and token.startswith("-")
