"""データモデル定義.

フィールドの宣言順がそのままフロントマターのキー順になる。
from_dict は欠損キーをゼロ値で埋め、未知のキーは無視する。型が合わない値は TypeError。
"""

from __future__ import annotations

import datetime
from dataclasses import asdict, dataclass, field
from enum import IntEnum
from typing import Any


def _object(data: Any) -> dict:
    """レスポンス本体用. null も含め dict 以外は TypeError."""
    if not isinstance(data, dict):
        raise TypeError(f"object expected, got {type(data).__name__}")
    return data


def _mapping(data: Any) -> dict:
    """None は空 dict 扱い。dict 以外は TypeError."""
    if data is None:
        return {}
    return _object(data)


def _list(data: Any) -> list:
    if data is None:
        return []
    if not isinstance(data, list):
        raise TypeError(f"array expected, got {type(data).__name__}")
    return data


# 以下、None はゼロ値。型が合わない値は変換せず TypeError

def _int(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"integer expected, got {value!r}")
    return value


def _float(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"number expected, got {value!r}")
    return float(value)


def _str(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"string expected, got {value!r}")
    return value


def _bool(value: Any) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TypeError(f"boolean expected, got {value!r}")
    return value


class AssetKind(IntEnum):
    """アセット種別."""

    UNKNOWN = 0
    IMAGE = 1
    DOCUMENT = 2
    AUDIO = 3
    VIDEO = 4
    ARCHIVE = 5


@dataclass
class Category:
    """カテゴリ. parent_id で親子関係（木構造）を持つ."""

    id: int = 0
    parent_id: int = 0  # 親カテゴリの id
    slug: str = ""  # ストア内で一意。出力ディレクトリ名に使う
    name: str = ""
    description: str = ""
    meta_title: str = ""  # SEO 用
    meta_description: str = ""
    meta_keywords: str = ""
    depth: int = 0  # 階層の深さ
    sort_order: int = 0  # 同一親内での並び順

    @classmethod
    def from_dict(cls, data: Any) -> Category:
        d = _mapping(data)
        return cls(
            id=_int(d.get("id")),
            parent_id=_int(d.get("parent_id")),
            slug=_str(d.get("slug")),
            name=_str(d.get("name")),
            description=_str(d.get("description")),
            meta_title=_str(d.get("meta_title")),
            meta_description=_str(d.get("meta_description")),
            meta_keywords=_str(d.get("meta_keywords")),
            depth=_int(d.get("depth")),
            sort_order=_int(d.get("sort_order")),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class CategoryPair:
    """商品から見た所属カテゴリ（slug で Category を弱参照）."""

    slug: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> CategoryPair:
        d = _mapping(data)
        return cls(slug=_str(d.get("slug")), name=_str(d.get("name")))


@dataclass
class Price:
    """価格."""

    amount: float = 0.0
    sale_price: float = 0.0
    formatted_sale_price: str = ""
    retail_price: float = 0.0
    formatted_retail_price: str = ""
    currency: str = ""  # USD, CAD など

    @classmethod
    def from_dict(cls, data: Any) -> Price:
        d = _mapping(data)
        return cls(
            amount=_float(d.get("amount")),
            sale_price=_float(d.get("sale_price")),
            formatted_sale_price=_str(d.get("formatted_sale_price")),
            retail_price=_float(d.get("retail_price")),
            formatted_retail_price=_str(d.get("formatted_retail_price")),
            currency=_str(d.get("currency")),
        )


@dataclass
class Variant:
    """バリアント. 各商品でちょうど 1 つが is_default=True（検証はしない）."""

    is_default: bool = False
    sku: str = ""
    weight: float = 0.0  # 以下 4 項目は送料計算用
    height: float = 0.0
    width: float = 0.0
    depth: float = 0.0
    price: Price = field(default_factory=Price)

    @classmethod
    def from_dict(cls, data: Any) -> Variant:
        d = _mapping(data)
        return cls(
            is_default=_bool(d.get("is_default")),
            sku=_str(d.get("sku")),
            weight=_float(d.get("weight")),
            height=_float(d.get("height")),
            width=_float(d.get("width")),
            depth=_float(d.get("depth")),
            price=Price.from_dict(d.get("price")),
        )


@dataclass
class Asset:
    """画像などのアセット."""

    variant_id: int = 0  # Variant の id（弱参照）
    name: str = ""
    display_name: str = ""
    url: str = ""  # 公開 URL
    kind: int = 0  # AssetKind の値。出力は数値のまま
    content_type: str = ""  # MIME タイプ
    sort_order: int = 0
    sizes: dict[str, str] = field(default_factory=dict)  # サイズタグ -> URL

    @property
    def asset_kind(self) -> AssetKind:
        try:
            return AssetKind(self.kind)
        except ValueError:
            return AssetKind.UNKNOWN

    @classmethod
    def from_dict(cls, data: Any) -> Asset:
        d = _mapping(data)
        return cls(
            variant_id=_int(d.get("variant_id")),
            name=_str(d.get("name")),
            display_name=_str(d.get("display_name")),
            url=_str(d.get("url")),
            kind=_int(d.get("kind")),
            content_type=_str(d.get("content_type")),
            sort_order=_int(d.get("sort_order")),
            sizes={_str(k): _str(v) for k, v in _mapping(d.get("sizes")).items()},
        )


@dataclass
class Product:
    """商品詳細. name はワイヤ上のみで、出力では title に移す."""

    slug: str = ""  # 出力ファイル名に使う
    title: str = ""
    name: str = ""  # 空なら出力しない
    short_description: str = ""  # カテゴリページ用
    description: str = ""
    meta_title: str = ""
    meta_description: str = ""
    meta_keywords: str = ""
    variants: list[Variant] = field(default_factory=list)
    default_image: Asset = field(default_factory=Asset)
    images: list[Asset] = field(default_factory=list)
    categories: list[CategoryPair] = field(default_factory=list)
    date: datetime.date | None = None  # 生成日。API の値ではない
    tags: list[str] = field(default_factory=list)

    def default_variant(self) -> Variant | None:
        for v in self.variants:
            if v.is_default:
                return v
        return None

    @classmethod
    def from_dict(cls, data: Any) -> Product:
        d = _object(data)
        return cls(
            slug=_str(d.get("slug")),
            title=_str(d.get("title")),
            name=_str(d.get("name")),
            short_description=_str(d.get("short_description")),
            description=_str(d.get("description")),
            meta_title=_str(d.get("meta_title")),
            meta_description=_str(d.get("meta_description")),
            meta_keywords=_str(d.get("meta_keywords")),
            variants=[Variant.from_dict(v) for v in _list(d.get("variants"))],
            default_image=Asset.from_dict(d.get("default_image")),
            images=[Asset.from_dict(a) for a in _list(d.get("images"))],
            categories=[CategoryPair.from_dict(c) for c in _list(d.get("categories"))],
            tags=[_str(t) for t in _list(d.get("tags"))],
        )

    def to_dict(self) -> dict[str, Any]:
        doc = asdict(self)
        if not doc["name"]:
            del doc["name"]
        return doc


@dataclass
class ProductSummary:
    """商品一覧 API の 1 件. 詳細取得のキーとして使う."""

    slug: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> ProductSummary:
        d = _mapping(data)
        return cls(slug=_str(d.get("slug")), name=_str(d.get("name")))


@dataclass
class CategoryList:
    """GET /v1/categories のレスポンス."""

    categories: list[Category] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> CategoryList:
        d = _object(data)
        return cls(categories=[Category.from_dict(c) for c in _list(d.get("categories"))])


@dataclass
class ProductPage:
    """GET /v1/products/{page}/{per_page} のレスポンス."""

    products: list[ProductSummary] = field(default_factory=list)
    total_records: int = 0
    total_pages: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> ProductPage:
        d = _object(data)
        return cls(
            products=[ProductSummary.from_dict(p) for p in _list(d.get("products"))],
            total_records=_int(d.get("total_records")),
            total_pages=_int(d.get("total_pages")),
        )
