"""Finnhub.io API client.

Only the ``/quote`` endpoint is implemented. Requests go through a
``requests.Session`` owned by the client; pass your own ``session`` to share
a connection pool or to stub the network in tests.
"""

from __future__ import annotations

from typing import Any

import requests

from finnquote.config import FinnhubConfig
from finnquote.errors import FinnhubError, FinnhubErrorCode
from finnquote.models.quote import Quote

ERR_TOKEN_NOT_SET = "token not set, use API.set_token()"


class API:
    """Wrapper around the Finnhub.io API.

    Set your API token via ``set_token`` (or the constructor) before calling
    any endpoint method.
    """

    def __init__(
        self,
        token: str = "",
        config: FinnhubConfig | None = None,
        session: Any | None = None,
    ) -> None:
        self.token = token
        self.config = config or FinnhubConfig()
        self.session = session if session is not None else requests.Session()

    def set_token(self, token: str) -> None:
        """Set your Finnhub API token, enabling API calls."""
        self.token = token

    def _has_token(self) -> bool:
        return self.token != ""

    # --------------------------------------------------------------- quotes

    def quote(self, symbol: str) -> Quote:
        """Get the current quote for a symbol.

        Args:
            symbol: Ticker symbol, sent as-is.

        Raises:
            FinnhubError: ``TOKEN_NOT_SET`` or ``VALIDATION_FAILED`` before any
                request is made; ``TRANSPORT``, ``REQUEST_FAILED`` or
                ``DECODE_FAILED`` once the request is issued.
        """
        caller = "API.quote()"

        if not self._has_token():
            raise _error_from(caller, ERR_TOKEN_NOT_SET, FinnhubErrorCode.TOKEN_NOT_SET)
        if not symbol:
            raise _error_from(caller, "no symbol given", FinnhubErrorCode.VALIDATION_FAILED)

        resp = self._get(caller, "quote", {"symbol": symbol})
        if not 200 <= resp.status_code < 300:
            raise FinnhubError(
                f'{caller} request for "{symbol}" failed',
                code=FinnhubErrorCode.REQUEST_FAILED,
                status_code=resp.status_code,
            )

        try:
            payload = resp.json()
            if not isinstance(payload, dict):
                raise TypeError(f"response is {type(payload).__name__}, want object")
            return Quote.from_response(symbol, payload)
        except (ValueError, TypeError, OverflowError) as exc:
            raise FinnhubError(
                f"{caller} error decoding response body: {exc}",
                code=FinnhubErrorCode.DECODE_FAILED,
                status_code=resp.status_code,
            ) from exc

    # ------------------------------------------------------------ internals

    def _get(self, caller: str, endpoint: str, params: dict[str, str]) -> Any:
        try:
            return self.session.get(
                self.config.base_url + endpoint,
                params=params,
                headers={self.config.token_header: self.token},
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as exc:
            raise FinnhubError(
                f"{caller}: {exc}",
                code=FinnhubErrorCode.TRANSPORT,
                retryable=True,
            ) from exc


def _error_from(caller: str, msg: str, code: FinnhubErrorCode) -> FinnhubError:
    """Build an error whose message carries the call site."""
    return FinnhubError(f"{caller} {msg}", code=code)
