"""finnquote — minimal client for the Finnhub.io market data API.

Quick start::

    from finnquote import API
    api = API()
    api.set_token("your-token")
    print(api.quote("GME"))
"""

from __future__ import annotations

from finnquote.api import API
from finnquote.config import FinnhubConfig
from finnquote.errors import FinnhubError, FinnhubErrorCode
from finnquote.models.quote import Quote

__version__ = "0.1.0"

__all__ = [
    # Client
    "API",
    "FinnhubConfig",
    # Errors
    "FinnhubError",
    "FinnhubErrorCode",
    # Models
    "Quote",
]
