"""フロントマター付き Markdown ファイルの書き出し.

出力形式:
  ---
  <YAML（宣言順、ネストはすべて展開）>
  ---
本文は書かない。閉じ区切りの後ろに改行も付けない。
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from catalog_pages.config import (
    CATEGORY_INDEX_FILENAME,
    FRONT_MATTER_DELIMITER,
    PRODUCT_FILE_SUFFIX,
)
from catalog_pages.errors import WriteError

logger = logging.getLogger(__name__)


def category_path(output_dir: str | Path, base_path: str, slug: str) -> Path:
    """<output_dir>/<base_path>/<slug>/_index.md"""
    return Path(os.path.normpath(os.path.join(output_dir, base_path, slug, CATEGORY_INDEX_FILENAME)))


def product_path(output_dir: str | Path, base_path: str, slug: str) -> Path:
    """<output_dir>/<base_path>/<slug>.md"""
    return Path(os.path.normpath(os.path.join(output_dir, base_path, slug + PRODUCT_FILE_SUFFIX)))


def render_front_matter(document: dict[str, Any]) -> str:
    """ドキュメントを区切り線付きの YAML ブロックに変換する."""
    body = yaml.safe_dump(
        document,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )
    return f"{FRONT_MATTER_DELIMITER}\n{body}{FRONT_MATTER_DELIMITER}"


def write_document(path: str | Path, document: dict[str, Any]) -> None:
    """ドキュメントをファイルに書き出す.

    親ディレクトリは無ければ作成する。既存ファイルは 0 バイトに切り詰めてから書き直す
    （アトミックではない）。

    Raises:
        WriteError: ディレクトリ作成・エンコード・書き込み・クローズのいずれかに失敗した場合
    """
    path = Path(path)
    try:
        content = render_front_matter(document)
    except yaml.YAMLError as e:
        raise WriteError(path, e) from e

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.exists():
            os.truncate(path, 0)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise WriteError(path, e) from e

    logger.debug("書き込み: %s", path)
