"""例外定義.

ライブラリ側は例外を送出するだけで、プロセス終了は main/builder.run が行う。
"""

from __future__ import annotations

from pathlib import Path


class CatalogError(Exception):
    """生成処理を中断させる致命的エラーの基底クラス."""


class ApiTransportError(CatalogError):
    """接続失敗・DNS 解決失敗などの通信エラー."""

    def __init__(self, url: str, cause: Exception):
        super().__init__(f"サーバーへのリクエスト送信に失敗: url={url}, error={cause}")
        self.url = url
        self.cause = cause


class ApiStatusError(CatalogError):
    """HTTP ステータスが 200 以外."""

    def __init__(self, url: str, status_code: int, reason: str, body: str):
        self.url = url
        self.status_code = status_code
        self.status = f"{status_code} {reason}".strip()
        self.body = body
        super().__init__(f"{self.status} (url={url})\n{body}")


class ApiDecodeError(CatalogError):
    """レスポンス JSON のデコード失敗."""

    def __init__(self, url: str, cause: Exception):
        super().__init__(f"JSON デコード失敗: url={url}, error={cause}")
        self.url = url
        self.cause = cause


class WriteError(CatalogError):
    """ファイル出力の失敗."""

    def __init__(self, path: Path, cause: Exception):
        super().__init__(f"ファイル書き込み失敗: path={path}, error={cause}")
        self.path = path
        self.cause = cause
