"""Quote (open/high/low/current/previous close) data model."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

# Upstream field name -> Quote attribute
_PRICE_FIELDS: dict[str, str] = {
    "o": "open",
    "h": "high",
    "l": "low",
    "c": "current",
    "pc": "previous_close",
}


@dataclass(frozen=True)
class Quote:
    """Point-in-time price snapshot for one symbol.

    Attributes:
        symbol: Ticker symbol as supplied by the caller.
        open: Opening price of the day.
        high: High price of the day.
        low: Low price of the day.
        current: Current price.
        previous_close: Previous close price.
        as_of: Time of the quote, local timezone.
    """

    symbol: str
    open: float
    high: float
    low: float
    current: float
    previous_close: float
    as_of: datetime

    def __str__(self) -> str:
        return (
            f"{self.symbol}:\n"
            f"\tAs of  : {self.as_of}\n"
            f"\tCurrent: {self.current:.2f}\n"
            f"\tLow    : {self.low:.2f}\n"
            f"\tHigh   : {self.high:.2f}\n"
            f"\tOpen   : {self.open:.2f}\n"
            f"\tPrevious Close: {self.previous_close:.2f}"
        )

    @classmethod
    def from_response(cls, symbol: str, payload: dict[str, Any]) -> Quote:
        """Build a quote from a decoded ``/quote`` response body.

        Absent or null fields count as zero, so a body of ``{}`` yields zero
        prices stamped at the Unix epoch.

        Raises:
            TypeError: A field is present but is not a number.
            ValueError: A field is not finite, or ``t`` is outside the range
                the platform can represent as a datetime.
        """
        prices = {attr: _number(payload, key) for key, attr in _PRICE_FIELDS.items()}
        epoch = int(_number(payload, "t"))
        try:
            as_of = datetime.fromtimestamp(epoch, tz=timezone.utc).astimezone()
        except (ValueError, OverflowError, OSError) as exc:
            raise ValueError(f'field "t" out of range: {epoch}') from exc
        return cls(symbol=symbol, as_of=as_of, **prices)


def _number(payload: dict[str, Any], key: str) -> float:
    value = payload.get(key)
    if value is None:
        return 0.0
    # bool is an int subclass but not a valid price
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f'field "{key}" is {type(value).__name__}, want number')
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f'field "{key}" is not finite: {value}')
    return number
