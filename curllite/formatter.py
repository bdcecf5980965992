from __future__ import annotations

from curllite.config import CommandSettings
from curllite.models import DEFAULT_METHOD, RequestDescription, encode_url


def _single_value_options(desc: RequestDescription) -> list[tuple[str, str | None]]:
    return [
        ("-d", desc.body),
        ("-b", desc.cookie_header),
        ("-u", desc.basic_auth_user),
        ("-e", desc.referer),
        ("-A", desc.user_agent),
    ]


def format_command(desc: RequestDescription, *, settings: CommandSettings | None = None) -> str:
    settings = settings or CommandSettings()
    parts: list[str] = [settings.program]

    if desc.method != DEFAULT_METHOD:
        parts.append(f"-X {desc.method}")

    for name, value in (desc.headers or {}).items():
        parts.append(f'-H "{name}: {value}"')

    for flag, value in _single_value_options(desc):
        if value:
            parts.append(f"{flag} '{value}'")

    if desc.use_multipart_form:
        parts.append("-F")
    if desc.allow_insecure_tls:
        parts.append("-k")
    if desc.follow_redirects:
        parts.append("-L")

    # target_url is stored encoded; encoding again leaves it unchanged.
    parts.append(f'"{encode_url(desc.target_url)}"')
    return " ".join(parts).strip()
