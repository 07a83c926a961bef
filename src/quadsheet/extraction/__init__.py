"""
Module: extraction

Purpose:
    Copy an ordered selection of template pages into a new document.

Key Functions:
    - extract_pages(): Main extraction function
    - validate_page_numbers(): Bounds check for 1-based page numbers
"""

from .extractor import extract_pages, validate_page_numbers

__all__ = [
    "extract_pages",
    "validate_page_numbers",
]
