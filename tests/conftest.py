"""テスト共通のヘルパー."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from catalog_pages.client import ApiClient

FIXTURES_DIR = Path(__file__).parent / "fixtures"

API_URL = "https://api.example.com"
STORE_KEY = "test-store-key"


def load_fixture(name: str):
    return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))


def make_response(status_code: int = 200, payload=None, text: str | None = None, reason: str = "OK"):
    """requests.Response 相当のモック."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.reason = reason
    if text is None:
        text = json.dumps(payload) if payload is not None else ""
    resp.text = text
    if payload is not None:
        resp.json.return_value = payload
    else:
        resp.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    return resp


@pytest.fixture
def routes():
    """URL -> レスポンス（または送出する例外）の対応表."""
    return {}


@pytest.fixture
def session(routes):
    sess = MagicMock()
    sess.headers = {}

    def _get(url):
        result = routes[url]
        if isinstance(result, Exception):
            raise result
        return result

    sess.get.side_effect = _get
    return sess


@pytest.fixture
def client(session):
    return ApiClient(API_URL, STORE_KEY, session=session)
