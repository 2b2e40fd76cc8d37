"""コマース API のカタログを静的サイト用 Markdown に書き出すツール."""

__version__ = "0.1.0"
