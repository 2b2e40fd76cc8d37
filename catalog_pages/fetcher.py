"""カテゴリ・商品の取得モジュール.

失敗時の扱い:
  - カテゴリ一覧・商品一覧: 通信/ステータス/デコードのいずれも例外で中断
  - 商品詳細: 通信/ステータスエラーは None を返してスキップ（デコードエラーは中断）
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, TypeVar

from catalog_pages.client import ApiClient
from catalog_pages.config import (
    CATEGORIES_PATH,
    PRODUCT_DETAIL_PATH_TEMPLATE,
    PRODUCTS_PATH_TEMPLATE,
    PRODUCTS_PER_PAGE,
)
from catalog_pages.errors import ApiDecodeError, ApiStatusError, ApiTransportError
from catalog_pages.models import Category, CategoryList, Product, ProductPage, ProductSummary

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _decode(client: ApiClient, path: str, parse: Callable[[object], T]) -> T:
    """GET して JSON をモデルに変換する. 形が合わない場合もデコードエラー扱い."""
    data = client.get_json(path)
    try:
        return parse(data)
    except (TypeError, ValueError) as e:
        raise ApiDecodeError(client.url_for(path), e) from e


def fetch_all_categories(client: ApiClient) -> list[Category]:
    """全カテゴリを取得する（ページングなし）."""
    resp = _decode(client, CATEGORIES_PATH, CategoryList.from_dict)
    logger.info("カテゴリ取得: %d 件", len(resp.categories))
    return resp.categories


@dataclass
class PageCursor:
    """商品一覧のページング状態.

    total_pages は取得したページのレスポンスで毎回上書きする。
    途中で total_pages が減るケースは想定していない（防御もしない）。
    """

    page: int = 0
    total_pages: int = 1  # 1 ページ目を取るまでは不明なので 1 としておく

    def has_next(self) -> bool:
        return self.page < self.total_pages

    def advance(self, total_pages: int) -> None:
        self.total_pages = total_pages
        self.page += 1


def fetch_product_page(client: ApiClient, page: int, per_page: int = PRODUCTS_PER_PAGE) -> ProductPage:
    """商品一覧の 1 ページを取得する."""
    path = PRODUCTS_PATH_TEMPLATE.format(page=page, per_page=per_page)
    return _decode(client, path, ProductPage.from_dict)


def fetch_all_products(client: ApiClient, per_page: int = PRODUCTS_PER_PAGE) -> list[ProductSummary]:
    """全ページを順に取得し、商品サマリを取得順に連結して返す.

    slug の重複排除はしない。1 ページでも失敗したら全体を中断する。
    """
    products: list[ProductSummary] = []
    cursor = PageCursor()
    while cursor.has_next():
        resp = fetch_product_page(client, cursor.page, per_page)
        products.extend(resp.products)
        logger.info(
            "商品一覧取得: page=%d/%d, %d 件",
            cursor.page + 1, resp.total_pages, len(resp.products),
        )
        cursor.advance(resp.total_pages)

    logger.info("商品一覧取得 完了: 合計 %d 件", len(products))
    return products


def fetch_product_detail(client: ApiClient, slug: str) -> Product | None:
    """slug で商品詳細を取得する.

    Returns:
        Product。通信エラーまたは 200 以外の場合は None。
    """
    path = PRODUCT_DETAIL_PATH_TEMPLATE.format(slug=slug)
    try:
        return _decode(client, path, Product.from_dict)
    except ApiStatusError as e:
        logger.warning("商品詳細取得失敗: slug=%s, status=%s", slug, e.status)
        logger.debug("レスポンスボディ: %s", e.body)
        return None
    except ApiTransportError as e:
        logger.warning("商品詳細取得失敗: slug=%s, error=%s", slug, e.cause)
        return None
