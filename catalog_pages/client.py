"""コマース API クライアント.

ベース URL と Store-Key を保持するだけの薄いラッパー。
フェッチャーにはこのインスタンスを渡して使う。
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from catalog_pages.config import STORE_KEY_HEADER
from catalog_pages.errors import ApiDecodeError, ApiStatusError, ApiTransportError

logger = logging.getLogger(__name__)


class ApiClient:
    """Store-Key ヘッダ付きで GET を発行する."""

    def __init__(
        self,
        base_url: str,
        store_key: str,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.store_key = store_key
        self.session = session or requests.Session()
        self.session.headers.update({
            STORE_KEY_HEADER: store_key,
            "Accept": "application/json",
        })

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def get(self, path: str) -> requests.Response:
        """GET を発行してレスポンスをそのまま返す.

        Raises:
            ApiTransportError: 接続レベルで失敗した場合
        """
        url = self.url_for(path)
        logger.debug("GET %s", url)
        try:
            return self.session.get(url)
        except requests.RequestException as e:
            raise ApiTransportError(url, e) from e

    def get_json(self, path: str) -> Any:
        """GET して 200 なら JSON をデコードして返す.

        Raises:
            ApiTransportError: 接続レベルで失敗した場合
            ApiStatusError: ステータスが 200 以外の場合
            ApiDecodeError: ボディが JSON として不正な場合
        """
        url = self.url_for(path)
        resp = self.get(path)
        if resp.status_code != 200:
            raise ApiStatusError(url, resp.status_code, resp.reason or "", resp.text)
        try:
            return resp.json()
        except ValueError as e:
            raise ApiDecodeError(url, e) from e
