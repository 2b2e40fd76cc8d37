"""カタログページ生成 — メインエントリーポイント.

コマース API からカテゴリ・商品を取得し、静的サイトジェネレータ用の
フロントマター付き Markdown を書き出す。

  catalog-pages -e https://api.example.com -k STORE_KEY -o ./content
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime

from catalog_pages.builder import run
from catalog_pages.config import (
    API_URL,
    CATEGORY_BASE_PATH,
    LOG_DIR,
    OUTPUT_DIR,
    PRODUCT_BASE_PATH,
    STORE_KEY,
)


def setup_logging(level: int = logging.INFO) -> None:
    """ロギングの初期設定. 診断はエラーストリーム (stderr) に出す.

    ログファイルを作れない場合は stderr のみで続行する。
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: OSError | None = None
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        log_file = LOG_DIR / f"generate_{datetime.now().strftime('%Y%m%d')}.log"
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    except OSError as e:
        file_error = e

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )
    if file_error is not None:
        logging.getLogger(__name__).warning("ログファイルを作成できません。stderr のみに出力します: %s", file_error)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="catalog-pages",
        description="コマース API のカテゴリ・商品から Markdown ページを生成する",
    )
    parser.add_argument("-e", "--endpoint", default=API_URL, help="API エンドポイント（env: CATALOG_API_URL）")
    parser.add_argument("-k", "--storekey", default=STORE_KEY, help="Store Key（env: CATALOG_STORE_KEY）")
    parser.add_argument("-o", "--output", default=OUTPUT_DIR, help=f"出力ディレクトリ (default: {OUTPUT_DIR})")
    parser.add_argument(
        "-p", "--product",
        default=PRODUCT_BASE_PATH,
        help=f"商品のベースパス。例: product, products。末尾スラッシュなし (default: {PRODUCT_BASE_PATH})",
    )
    parser.add_argument(
        "-c", "--category",
        default=CATEGORY_BASE_PATH,
        help=f"カテゴリのベースパス。例: category, categories。末尾スラッシュなし (default: {CATEGORY_BASE_PATH})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="DEBUG ログを出力する")

    args = parser.parse_args(argv)
    if not args.endpoint:
        parser.error("--endpoint（または CATALOG_API_URL）は必須です")
    if not args.storekey:
        parser.error("--storekey（または CATALOG_STORE_KEY）は必須です")
    return args


def main(argv: list[str] | None = None) -> int:
    """メイン処理."""
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    return run(args.endpoint, args.storekey, args.output, args.category, args.product)


if __name__ == "__main__":
    sys.exit(main())
