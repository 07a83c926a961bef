"""
Module: core

Purpose:
    Shared data models and the error taxonomy used by every stage
    of the batch pipeline.
"""

from .errors import (
    QuadsheetError,
    TableFormatError,
    PageIndexError,
    LoadError,
    RenderError,
    FileSystemError,
)
from .models import Record, ResolvedRecord, GeneratedFile, BatchResult

__all__ = [
    # Errors
    "QuadsheetError",
    "TableFormatError",
    "PageIndexError",
    "LoadError",
    "RenderError",
    "FileSystemError",
    # Models
    "Record",
    "ResolvedRecord",
    "GeneratedFile",
    "BatchResult",
]
