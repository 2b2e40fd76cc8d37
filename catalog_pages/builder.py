"""カテゴリ・商品ページ生成パイプライン.

処理フロー:
  1. カテゴリ一覧を取得し、カテゴリごとに <slug>/_index.md を書き出す
  2. 商品一覧を全ページ取得
  3. 商品ごとに詳細を取得 → 変換 → <slug>.md を書き出す（詳細取得失敗はスキップ）
"""

from __future__ import annotations

import datetime
import logging
import time
from dataclasses import dataclass
from pathlib import Path

from catalog_pages.client import ApiClient
from catalog_pages.errors import CatalogError
from catalog_pages.fetcher import fetch_all_categories, fetch_all_products, fetch_product_detail
from catalog_pages.transformer import transform_product
from catalog_pages.writer import category_path, product_path, write_document

logger = logging.getLogger(__name__)


@dataclass
class BuildStats:
    """商品パイプラインの集計."""

    written: int = 0
    skipped: int = 0


def build_categories(client: ApiClient, output_dir: str | Path, base_path: str) -> int:
    """全カテゴリのページを書き出し、書き出した件数を返す."""
    categories = fetch_all_categories(client)
    for category in categories:
        write_document(category_path(output_dir, base_path, category.slug), category.to_dict())
    logger.info("カテゴリページ書き出し: %d 件", len(categories))
    return len(categories)


def build_products(
    client: ApiClient,
    output_dir: str | Path,
    base_path: str,
    today: datetime.date | None = None,
) -> BuildStats:
    """全商品のページを書き出す."""
    today = today or datetime.date.today()
    stats = BuildStats()

    for summary in fetch_all_products(client):
        product = fetch_product_detail(client, summary.slug)
        if product is None:
            stats.skipped += 1
            logger.warning("スキップ: 商品ページを書き出せません: %s (slug=%s)", summary.name, summary.slug)
            continue

        product = transform_product(product, today)
        write_document(product_path(output_dir, base_path, summary.slug), product.to_dict())
        stats.written += 1

    logger.info("商品ページ書き出し: %d 件, スキップ: %d 件", stats.written, stats.skipped)
    return stats


def run(
    api_url: str,
    store_key: str,
    output_dir: str | Path,
    category_base_path: str,
    product_base_path: str,
    client: ApiClient | None = None,
) -> int:
    """カテゴリ → 商品の順に生成する.

    Returns:
        終了ステータス。成功 0、致命的エラー 1。
    """
    logger.info("=== ページ生成 開始 ===")
    start_time = time.time()
    client = client or ApiClient(api_url, store_key)

    try:
        category_count = build_categories(client, output_dir, category_base_path)
        stats = build_products(client, output_dir, product_base_path)
    except CatalogError as e:
        logger.error("生成を中断しました: %s", e)
        return 1

    elapsed = time.time() - start_time
    logger.info("=== ページ生成 完了 ===")
    logger.info(
        "カテゴリ: %d 件, 商品: %d 件, スキップ: %d 件, 所要時間: %.1f 秒",
        category_count, stats.written, stats.skipped, elapsed,
    )
    return 0
