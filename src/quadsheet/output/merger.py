"""
Module: output.merger

Purpose:
    Concatenate per-record documents into a single merged document.

Key Functions:
    - merge_documents(): Concatenate open documents or PDF bytes
    - concatenate_files(): Read PDF files back, merge, and write the result

Dependencies:
    - fitz (PyMuPDF): insert_pdf for page copying

Used By:
    - quadsheet.batch.pipeline: Final merge step
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence, Union

import fitz

from quadsheet.core.errors import LoadError

from .writer import read_bytes, save_document

logger = logging.getLogger(__name__)


def merge_documents(sources: Iterable[Union[bytes, fitz.Document]]) -> fitz.Document:
    """
    Concatenate every page of every source, in order.

    Args:
        sources: Open PDF documents or PDF bytes

    Returns:
        New document holding all pages

    Raises:
        LoadError: If a source cannot be opened or copied
    """
    merged = fitz.open()
    try:
        for position, source in enumerate(sources, start=1):
            doc = _open_for_merge(source, position)
            try:
                merged.insert_pdf(doc)
            except (RuntimeError, ValueError) as e:
                raise LoadError(f"Failed to append document {position} to merge: {e}") from e
            finally:
                if doc is not source:
                    doc.close()
    except Exception:
        merged.close()
        raise
    return merged


def _open_for_merge(source: Union[bytes, fitz.Document], position: int) -> fitz.Document:
    """Open PDF bytes written earlier in the run; open documents pass through."""
    if isinstance(source, fitz.Document):
        return source
    try:
        doc = fitz.open(stream=bytes(source), filetype="pdf")
    except (RuntimeError, ValueError) as e:
        raise LoadError(f"Cannot open document {position} for merge: {e}") from e
    if doc.page_count == 0:
        doc.close()
        raise LoadError(f"Cannot open document {position} for merge: it has no pages")
    return doc


def concatenate_files(paths: Sequence[Path], output_path: Path) -> int:
    """
    Merge PDF files into ``output_path`` in the order given.

    Args:
        paths: PDF files to read back
        output_path: Destination of the merged document

    Returns:
        Page count of the merged document

    Raises:
        FileSystemError: If a file cannot be read or the result written
        LoadError: If a file is not a valid PDF
        RenderError: If the merged document cannot be serialized
    """
    merged = merge_documents(read_bytes(path) for path in paths)
    try:
        page_count = merged.page_count
        save_document(merged, output_path)
    finally:
        merged.close()

    logger.debug(f"Merged {len(paths)} file(s) into {page_count} page(s)")
    return page_count
