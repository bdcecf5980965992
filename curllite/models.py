from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from urllib.parse import SplitResult, quote, urlsplit

from pydantic import BaseModel, ConfigDict, field_validator

from curllite.config import CommandSettings
from curllite.errors import FormatError, FormatErrorReason
from curllite.lexer import unquote

DEFAULT_METHOD = "GET"

# Characters a full URI may carry unescaped. `%` is kept so existing escapes
# are not encoded twice.
URL_SAFE = "!#$&'()*+,-./:;=?@_~[]%"


def encode_url(url: str) -> str:
    return quote(url, safe=URL_SAFE)


def normalize_url(raw: str) -> str:
    """Parse ``raw`` as a URI and return its normalized, percent-encoded text.

    Absolute and relative references are both accepted.
    """
    if not raw or any(ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in raw):
        raise FormatError(FormatErrorReason.INVALID_URL, token=raw)
    try:
        parts = urlsplit(raw)
        # urlsplit defers port validation until the attribute is read.
        parts.port
    except ValueError as e:
        raise FormatError(FormatErrorReason.INVALID_URL, token=raw) from e
    return encode_url(parts.geturl())


def normalize_method(raw: str) -> str:
    if not raw or any(ch.isspace() for ch in raw):
        raise FormatError(FormatErrorReason.INVALID_METHOD, token=raw)
    return raw.upper()


def parse_header(raw: str) -> tuple[str, str]:
    text = unquote(raw).replace('"', "")
    name, sep, value = text.partition(":")
    if not sep or not name.strip():
        raise FormatError(FormatErrorReason.MALFORMED_HEADER, token=raw)
    if value.startswith(" "):
        value = value[1:]
    return name, value


class RequestDescription(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    target_url: str
    method: str = DEFAULT_METHOD
    headers: Mapping[str, str] | None = None
    body: str | None = None
    cookie_header: str | None = None
    basic_auth_user: str | None = None
    referer: str | None = None
    user_agent: str | None = None
    use_multipart_form: bool = False
    allow_insecure_tls: bool = False
    follow_redirects: bool = False

    @field_validator("target_url")
    @classmethod
    def _valid_target_url(cls, v: str) -> str:
        return normalize_url(v)

    @field_validator("method")
    @classmethod
    def _upper_method(cls, v: str) -> str:
        return normalize_method(v)

    @field_validator("headers")
    @classmethod
    def _read_only_headers(cls, v: Mapping[str, str] | None) -> Mapping[str, str] | None:
        # An empty mapping means no headers.
        return MappingProxyType(dict(v)) if v else None

    @property
    def url_parts(self) -> SplitResult:
        return urlsplit(self.target_url)

    @classmethod
    def parse(cls, src: str, *, settings: CommandSettings | None = None) -> "RequestDescription":
        from curllite.parser import parse_command

        return parse_command(src, settings=settings)

    @classmethod
    def try_parse(
        cls, src: str, *, settings: CommandSettings | None = None
    ) -> "RequestDescription | None":
        from curllite.parser import try_parse_command

        return try_parse_command(src, settings=settings)

    def to_command(self, *, settings: CommandSettings | None = None) -> str:
        from curllite.formatter import format_command

        return format_command(self, settings=settings)

    def __str__(self) -> str:
        return self.to_command()
