"""
Module: output

Purpose:
    Turn layout plans into PDF documents and get documents onto disk.

Key Functions:
    - compose_sheets(): Render a document four pages to a sheet
    - merge_documents(): Concatenate documents in order
    - concatenate_files(): Merge PDF files on disk into one file
    - save_document(): Serialize and write a document

Dependencies:
    - fitz (PyMuPDF): Page embedding, text, serialization

Used By:
    - quadsheet.batch.pipeline
"""

from .composer import compose_sheets, render_layout
from .merger import merge_documents, concatenate_files
from .writer import (
    read_bytes,
    write_bytes,
    ensure_directory,
    document_to_bytes,
    save_document,
)

__all__ = [
    "compose_sheets",
    "render_layout",
    "merge_documents",
    "concatenate_files",
    "read_bytes",
    "write_bytes",
    "ensure_directory",
    "document_to_bytes",
    "save_document",
]
