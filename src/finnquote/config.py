"""Finnhub client configuration."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BASE_URL = "https://finnhub.io/api/v1/"
TOKEN_HEADER = "X-Finnhub-Token"


@dataclass
class FinnhubConfig:
    """Configuration for the Finnhub ``API`` client.

    Attributes:
        base_url: API root; endpoint names are appended to it.
        timeout_seconds: Timeout for each outbound request. ``None`` waits
            indefinitely.
        token_header: Header that carries the API token.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float | None = 10.0
    token_header: str = TOKEN_HEADER
