"""Shared fixtures for finnquote tests."""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from finnquote.api import API

GME_BODY = {"t": 1700000000, "o": 10.5, "h": 11.0, "l": 9.75, "c": 10.9, "pc": 10.0}


def make_response(status_code: int = 200, body: Any = GME_BODY) -> requests.Response:
    """Build a real ``requests.Response``; non-bytes bodies are JSON-encoded."""
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = body if isinstance(body, bytes) else json.dumps(body).encode()
    resp.encoding = "utf-8"
    return resp


@pytest.fixture
def session() -> MagicMock:
    """Stand-in for ``requests.Session`` answering every GET with the GME body."""
    sess = MagicMock(spec=requests.Session)
    sess.get.return_value = make_response()
    return sess


@pytest.fixture
def api(session) -> API:
    return API(token="test-token", session=session)


@pytest.fixture(scope="session")
def finnhub_token() -> str:
    """Live API token from FINNHUB_API_TOKEN (or a project .env)."""
    try:
        from dotenv import load_dotenv
        load_dotenv(Path(__file__).resolve().parent.parent / ".env")
    except ImportError:
        pass
    token = os.getenv("FINNHUB_API_TOKEN")
    if not token:
        pytest.skip("FINNHUB_API_TOKEN not set")
    return token
