"""
Module: extraction.extractor

Purpose:
    Build a new document from selected template pages. Pages are
    copied (not referenced) in the requested order; repeats are allowed.

Key Functions:
    - extract_pages(): Copy pages by 1-based number
    - validate_page_numbers(): Bounds check before copying

Dependencies:
    - fitz (PyMuPDF): Page copying via insert_pdf

Used By:
    - quadsheet.batch.pipeline: One extraction per record
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

import fitz

from quadsheet.core.errors import LoadError, PageIndexError
from quadsheet.loading.template import TemplateSource, load_template

logger = logging.getLogger(__name__)


def validate_page_numbers(page_numbers: Iterable[int], page_count: int) -> None:
    """
    Check every 1-based page number against ``[1, page_count]``.

    Raises:
        PageIndexError: For the first number out of range
    """
    for number in page_numbers:
        if not 1 <= number <= page_count:
            raise PageIndexError(number, page_count)


def extract_pages(
    source: TemplateSource,
    page_numbers: Sequence[int],
    *,
    filetype: Optional[str] = None,
) -> fitz.Document:
    """
    Copy the pages at ``page_numbers`` into a fresh document.

    The whole list is validated before anything is copied, so an
    out-of-range number never yields a partial document.

    Args:
        source: Template bytes or an open template document (not modified)
        page_numbers: Ordered 1-based page numbers; repeats allowed
        filetype: Format hint when ``source`` is bytes

    Returns:
        New document with ``len(page_numbers)`` pages in the given order

    Raises:
        PageIndexError: If any number is outside the source's page range
        LoadError: If the source cannot be loaded or a page cannot be copied

    Example:
        >>> doc = extract_pages(template_bytes, [3, 1, 3])
        >>> doc.page_count
        3
    """
    src = load_template(source, filetype=filetype)
    owns_source = src is not source
    try:
        validate_page_numbers(page_numbers, src.page_count)

        out = fitz.open()
        try:
            for number in page_numbers:
                index = number - 1
                out.insert_pdf(src, from_page=index, to_page=index)
        except (RuntimeError, ValueError) as e:
            out.close()
            raise LoadError(f"Failed to copy page from template: {e}") from e
    finally:
        if owns_source:
            src.close()

    logger.debug(f"Extracted {out.page_count} page(s): {list(page_numbers)}")
    return out
