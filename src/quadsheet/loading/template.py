"""
Module: loading.template

Purpose:
    Open the template document once per run. Anything PyMuPDF can open
    is accepted; non-PDF inputs (images, XPS, EPUB) are converted to PDF
    so their pages can be copied and embedded.

Key Functions:
    - load_template(): Bytes or open document -> PDF document

Dependencies:
    - fitz (PyMuPDF): Document loading and conversion

Used By:
    - quadsheet.extraction.extractor
    - quadsheet.batch.pipeline
"""

from __future__ import annotations

import logging
from typing import Optional, Union

import fitz

from quadsheet.core.errors import LoadError

logger = logging.getLogger(__name__)

TemplateSource = Union[bytes, bytearray, memoryview, fitz.Document]


def load_template(
    source: TemplateSource,
    *,
    filetype: Optional[str] = None,
) -> fitz.Document:
    """
    Open template bytes as a PDF document.

    An already opened PDF document is returned unchanged, so callers
    may pass either form.

    Args:
        source: Template bytes, or an open ``fitz.Document``
        filetype: Format hint for byte input, e.g. ``"png"``. Defaults to PDF.

    Returns:
        Open PDF document. The caller owns it and should close it.

    Raises:
        LoadError: If the bytes are not a loadable document, the document
            is encrypted, or conversion to PDF fails

    Example:
        >>> doc = load_template(Path("template.pdf").read_bytes())
        >>> doc.page_count
        5
    """
    if isinstance(source, fitz.Document):
        doc = source
    else:
        try:
            doc = fitz.open(stream=bytes(source), filetype=filetype or "pdf")
        except (RuntimeError, ValueError) as e:
            raise LoadError(f"Template is not a valid document: {e}") from e

    if doc.needs_pass:
        if doc is not source:
            doc.close()
        raise LoadError("Template is encrypted and requires a password")

    if not doc.is_pdf:
        doc = _convert_to_pdf(doc, close_original=doc is not source)

    logger.debug(f"Loaded template with {doc.page_count} page(s)")
    return doc


def _convert_to_pdf(doc: fitz.Document, *, close_original: bool) -> fitz.Document:
    """Convert a non-PDF document (image, XPS, ...) into a PDF document."""
    try:
        pdf_bytes = doc.convert_to_pdf()
        converted = fitz.open("pdf", pdf_bytes)
    except (RuntimeError, ValueError) as e:
        raise LoadError(f"Cannot convert template to PDF: {e}") from e
    finally:
        if close_original:
            doc.close()
    logger.debug(f"Converted non-PDF template to PDF ({converted.page_count} page(s))")
    return converted
