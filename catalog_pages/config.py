"""設定モジュール — 環境変数・定数定義."""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

# .env はカレントディレクトリから親方向に探す（pip install 後も実行場所基準）
load_dotenv(find_dotenv(usecwd=True))

# --- コマース API ---
# 必須チェックは main 側で行う（import 時には落とさない）
API_URL: str = os.environ.get("CATALOG_API_URL", "")
STORE_KEY: str = os.environ.get("CATALOG_STORE_KEY", "")

STORE_KEY_HEADER = "Store-Key"

CATEGORIES_PATH = "/v1/categories"
PRODUCTS_PATH_TEMPLATE = "/v1/products/{page}/{per_page}"
PRODUCT_DETAIL_PATH_TEMPLATE = "/v1/product/slug/{slug}"

# --- ページング ---
PRODUCTS_PER_PAGE = 1000

# --- 出力先 ---
OUTPUT_DIR: str = os.environ.get("CATALOG_OUTPUT_DIR", "./output")
CATEGORY_BASE_PATH: str = os.environ.get("CATALOG_CATEGORY_BASE_PATH", "category")
PRODUCT_BASE_PATH: str = os.environ.get("CATALOG_PRODUCT_BASE_PATH", "product")

FRONT_MATTER_DELIMITER = "---"
CATEGORY_INDEX_FILENAME = "_index.md"
PRODUCT_FILE_SUFFIX = ".md"

# --- ログ ---
LOG_DIR = Path(os.environ.get("CATALOG_LOG_DIR", "logs"))  # 相対パスはカレントディレクトリ基準
