"""商品詳細を出力用の形に整える."""

from __future__ import annotations

import datetime
from dataclasses import replace

from catalog_pages.models import Product


def transform_product(product: Product, today: datetime.date | None = None) -> Product:
    """name を title に移し、date に生成日をセットする.

    name は出力しないので空にする。その他のフィールドはそのまま。
    """
    return replace(
        product,
        title=product.name,
        name="",
        date=today or datetime.date.today(),
    )
