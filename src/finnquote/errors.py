"""Finnhub client error types."""

from __future__ import annotations

from enum import Enum


class FinnhubErrorCode(Enum):
    """Error classification codes."""

    TOKEN_NOT_SET = "token_not_set"
    VALIDATION_FAILED = "validation_failed"
    TRANSPORT = "transport"
    REQUEST_FAILED = "request_failed"
    DECODE_FAILED = "decode_failed"


class FinnhubError(Exception):
    """Finnhub client exception with error code and retryable flag.

    Attributes:
        message: Human-readable error description, prefixed with the call site.
        code: Structured error code for programmatic handling.
        retryable: Whether the same request may succeed if issued again.
        status_code: HTTP status of the upstream response, when there was one.
    """

    def __init__(
        self,
        message: str,
        code: FinnhubErrorCode = FinnhubErrorCode.REQUEST_FAILED,
        retryable: bool = False,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.retryable = retryable
        self.status_code = status_code
