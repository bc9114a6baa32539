"""Paragraph search, Markdown flattening and query-text scoring helpers."""

__version__ = "0.1.0"
__all__ = [
    "index",
    "pagination",
    "preprocess",
    "query_text",
    "sysutil",
]