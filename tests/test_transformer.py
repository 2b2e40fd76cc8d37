"""transformer モジュールのテスト."""

import datetime
from unittest.mock import patch

from catalog_pages.models import Product
from catalog_pages.transformer import transform_product
from conftest import load_fixture


class TestTransformProduct:
    """transform_product のテスト."""

    def test_name_moves_to_title(self):
        product = transform_product(Product(slug="widget", name="Widget"), datetime.date(2022, 5, 1))

        assert product.title == "Widget"
        assert product.name == ""
        assert "name" not in product.to_dict()

    def test_date_is_generation_date(self):
        product = transform_product(Product(slug="widget", name="Widget"), datetime.date(2022, 5, 1))
        assert product.date == datetime.date(2022, 5, 1)

    def test_date_defaults_to_today(self):
        with patch("catalog_pages.transformer.datetime") as mock_datetime:
            mock_datetime.date.today.return_value = datetime.date(2026, 10, 19)
            product = transform_product(Product(slug="widget", name="Widget"))

        assert product.date == datetime.date(2026, 10, 19)

    def test_other_fields_unchanged(self):
        original = Product.from_dict(load_fixture("product_widget.json"))

        product = transform_product(original, datetime.date(2022, 5, 1))

        assert product.variants == original.variants
        assert product.images == original.images
        assert product.categories == original.categories
        assert product.tags == original.tags
        assert product.description == original.description

    def test_input_not_mutated(self):
        original = Product(slug="widget", name="Widget")
        transform_product(original, datetime.date(2022, 5, 1))
        assert original.name == "Widget"
        assert original.title == ""
