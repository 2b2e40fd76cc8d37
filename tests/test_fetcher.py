"""fetcher モジュールのテスト."""

import pytest
import requests

from catalog_pages.errors import ApiDecodeError, ApiStatusError, ApiTransportError
from catalog_pages.fetcher import (
    PageCursor,
    fetch_all_categories,
    fetch_all_products,
    fetch_product_detail,
)
from conftest import API_URL, load_fixture, make_response

CATEGORIES_URL = f"{API_URL}/v1/categories"


def _page_url(page: int, per_page: int = 1000) -> str:
    return f"{API_URL}/v1/products/{page}/{per_page}"


class TestFetchAllCategories:
    """fetch_all_categories のテスト."""

    def test_all_categories(self, client, routes):
        routes[CATEGORIES_URL] = make_response(payload=load_fixture("categories.json"))

        categories = fetch_all_categories(client)

        assert [c.slug for c in categories] == ["outdoor", "tents", "stoves"]
        assert categories[1].parent_id == 1

    def test_status_error(self, client, routes):
        routes[CATEGORIES_URL] = make_response(status_code=500, text="boom", reason="Internal Server Error")

        with pytest.raises(ApiStatusError):
            fetch_all_categories(client)

    def test_malformed_json(self, client, routes):
        routes[CATEGORIES_URL] = make_response(text="{not json")

        with pytest.raises(ApiDecodeError):
            fetch_all_categories(client)

    def test_wrong_envelope_shape(self, client, routes):
        """categories が配列でなければデコードエラーになること."""
        routes[CATEGORIES_URL] = make_response(payload={"categories": "nope"})

        with pytest.raises(ApiDecodeError):
            fetch_all_categories(client)

    def test_transport_error(self, client, routes):
        routes[CATEGORIES_URL] = requests.ConnectionError("dns failure")

        with pytest.raises(ApiTransportError):
            fetch_all_categories(client)


class TestPageCursor:
    """PageCursor のテスト."""

    def test_first_page_always_fetched(self):
        assert PageCursor().has_next()

    def test_advance(self):
        cursor = PageCursor()
        cursor.advance(2)
        assert cursor.page == 1
        assert cursor.has_next()
        cursor.advance(2)
        assert not cursor.has_next()

    def test_zero_pages(self):
        cursor = PageCursor()
        cursor.advance(0)
        assert not cursor.has_next()


class TestFetchAllProducts:
    """fetch_all_products のテスト."""

    def test_paginates_all_pages(self, client, routes, session):
        """total_pages 回だけリクエストし、全ページ分を順に連結すること."""
        routes[_page_url(0)] = make_response(payload=load_fixture("products_page_0.json"))
        routes[_page_url(1)] = make_response(payload=load_fixture("products_page_1.json"))

        products = fetch_all_products(client)

        assert [p.slug for p in products] == ["widget", "gadget", "gizmo"]
        requested = [c.args[0] for c in session.get.call_args_list]
        assert requested == [_page_url(0), _page_url(1)]

    def test_total_pages_from_each_response(self, client, routes, session):
        """total_pages はページごとのレスポンスで更新されること."""
        routes[_page_url(0, 2)] = make_response(payload={
            "products": [{"slug": "a"}, {"slug": "b"}], "total_records": 5, "total_pages": 3,
        })
        routes[_page_url(1, 2)] = make_response(payload={
            "products": [{"slug": "c"}, {"slug": "d"}], "total_records": 5, "total_pages": 3,
        })
        routes[_page_url(2, 2)] = make_response(payload={
            "products": [{"slug": "e"}], "total_records": 5, "total_pages": 3,
        })

        products = fetch_all_products(client, per_page=2)

        assert len(products) == 5
        assert session.get.call_count == 3

    def test_no_dedup(self, client, routes):
        routes[_page_url(0)] = make_response(payload={
            "products": [{"slug": "dup"}, {"slug": "dup"}], "total_records": 2, "total_pages": 1,
        })

        assert [p.slug for p in fetch_all_products(client)] == ["dup", "dup"]

    def test_empty_catalog(self, client, routes, session):
        routes[_page_url(0)] = make_response(payload={"products": [], "total_records": 0, "total_pages": 0})

        assert fetch_all_products(client) == []
        assert session.get.call_count == 1

    def test_page_failure_aborts(self, client, routes):
        """途中のページが失敗したら全体が失敗すること."""
        routes[_page_url(0)] = make_response(payload=load_fixture("products_page_0.json"))
        routes[_page_url(1)] = make_response(status_code=502, text="bad gateway", reason="Bad Gateway")

        with pytest.raises(ApiStatusError):
            fetch_all_products(client)

    def test_transport_failure_aborts(self, client, routes):
        routes[_page_url(0)] = requests.Timeout("read timed out")

        with pytest.raises(ApiTransportError):
            fetch_all_products(client)


class TestFetchProductDetail:
    """fetch_product_detail のテスト."""

    def test_found(self, client, routes):
        routes[f"{API_URL}/v1/product/slug/widget"] = make_response(payload=load_fixture("product_widget.json"))

        product = fetch_product_detail(client, "widget")

        assert product is not None
        assert product.name == "Widget"
        assert len(product.images) == 2

    def test_not_found_returns_none(self, client, routes):
        routes[f"{API_URL}/v1/product/slug/missing"] = make_response(
            status_code=404, text='{"error":"not found"}', reason="Not Found",
        )

        assert fetch_product_detail(client, "missing") is None

    def test_transport_error_returns_none(self, client, routes):
        routes[f"{API_URL}/v1/product/slug/widget"] = requests.ConnectionError("reset by peer")

        assert fetch_product_detail(client, "widget") is None

    def test_malformed_json_is_fatal(self, client, routes):
        """デコードエラーは詳細取得でもスキップせず送出すること."""
        routes[f"{API_URL}/v1/product/slug/widget"] = make_response(text="garbage")

        with pytest.raises(ApiDecodeError):
            fetch_product_detail(client, "widget")


class TestWrongFieldTypes:
    """型が合わないフィールドは取得全体のデコードエラーになること."""

    def test_category_slug_object(self, client, routes):
        data = load_fixture("categories.json")
        data["categories"][0]["slug"] = {"a": 1}
        routes[CATEGORIES_URL] = make_response(payload=data)

        with pytest.raises(ApiDecodeError):
            fetch_all_categories(client)

    def test_category_fractional_depth(self, client, routes):
        data = load_fixture("categories.json")
        data["categories"][1]["depth"] = 1.9
        routes[CATEGORIES_URL] = make_response(payload=data)

        with pytest.raises(ApiDecodeError):
            fetch_all_categories(client)

    def test_total_pages_string(self, client, routes):
        routes[_page_url(0)] = make_response(payload={"products": [], "total_pages": "2"})

        with pytest.raises(ApiDecodeError):
            fetch_all_products(client)

    def test_detail_is_default_string(self, client, routes):
        """詳細のデコードエラーはスキップせず送出すること."""
        data = load_fixture("product_widget.json")
        data["variants"][0]["is_default"] = "false"
        routes[f"{API_URL}/v1/product/slug/widget"] = make_response(payload=data)

        with pytest.raises(ApiDecodeError):
            fetch_product_detail(client, "widget")

    def test_detail_null_body(self, client, routes):
        resp = make_response(payload={})
        resp.json.return_value = None
        routes[f"{API_URL}/v1/product/slug/widget"] = resp

        with pytest.raises(ApiDecodeError):
            fetch_product_detail(client, "widget")
