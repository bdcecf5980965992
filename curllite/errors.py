from __future__ import annotations

from enum import Enum


class FormatErrorReason(str, Enum):
    MISSING_PREFIX = "missing program prefix"
    MISSING_URL = "missing url"
    INVALID_URL = "invalid url"
    MALFORMED_HEADER = "malformed header"
    INVALID_METHOD = "invalid method"
    UNKNOWN_OPTION = "unknown option"


class FormatError(ValueError):
    def __init__(
        self,
        reason: FormatErrorReason,
        *,
        token: str | None = None,
        detail: str | None = None,
    ) -> None:
        self.reason = reason
        self.token = token
        message = detail or reason.value
        if token is not None:
            message = f"{message}: {token}"
        super().__init__(message)
