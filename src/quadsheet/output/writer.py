"""
Module: output.writer

Purpose:
    Raw file I/O for the pipeline. Every OSError is re-raised as
    FileSystemError so a failed read, write or mkdir aborts the run
    with one error type.

Key Functions:
    - read_bytes(): Read a whole file
    - write_bytes(): Write a whole file, creating parent directories
    - ensure_directory(): Create a directory tree if absent
    - save_document(): Serialize a PyMuPDF document and write it

Dependencies:
    - fitz (PyMuPDF): Document serialization

Used By:
    - quadsheet.batch.pipeline: Per-record and merged output
    - quadsheet.loading: Reading the table and template
"""

from __future__ import annotations

import logging
from pathlib import Path

import fitz

from quadsheet.core.errors import FileSystemError, RenderError

logger = logging.getLogger(__name__)


def read_bytes(path: Path) -> bytes:
    """
    Read a file into memory.

    Raises:
        FileSystemError: If the file cannot be read
    """
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise FileSystemError(f"Cannot read {path}: {e}") from e


def write_bytes(path: Path, data: bytes) -> Path:
    """
    Write ``data`` to ``path``, creating missing parent directories.

    Returns:
        The path written

    Raises:
        FileSystemError: If the directory or file cannot be written
    """
    path = Path(path)
    ensure_directory(path.parent)
    try:
        path.write_bytes(data)
    except OSError as e:
        raise FileSystemError(f"Cannot write {path}: {e}") from e
    logger.debug(f"Wrote {len(data)} bytes to {path}")
    return path


def ensure_directory(path: Path) -> Path:
    """
    Create ``path`` (and parents) if it does not exist yet.

    Raises:
        FileSystemError: If the directory cannot be created, or a
            non-directory already sits at ``path``
    """
    path = Path(path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileSystemError(f"Cannot create directory {path}: {e}") from e
    return path


def document_to_bytes(doc: fitz.Document) -> bytes:
    """
    Serialize a document to PDF bytes.

    Unused objects are garbage-collected and streams deflated so that
    repeatedly embedded template resources are stored once.

    Raises:
        RenderError: If the document has no pages or cannot be serialized
    """
    if doc.page_count == 0:
        raise RenderError("Cannot save a document with no pages")
    try:
        return doc.tobytes(garbage=3, deflate=True)
    except (RuntimeError, ValueError) as e:
        raise RenderError(f"Failed to serialize document: {e}") from e


def save_document(doc: fitz.Document, path: Path) -> Path:
    """Serialize ``doc`` and write it to ``path``."""
    return write_bytes(path, document_to_bytes(doc))
