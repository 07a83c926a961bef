"""
Module: core.errors

Purpose:
    Exception hierarchy for the batch pipeline. Every failure that
    aborts a run is raised as one of these types so the CLI can report
    it with a single handler.

Key Classes:
    - QuadsheetError: Base class
    - TableFormatError: Data table cannot be used
    - PageIndexError: Requested page outside the template
    - LoadError: Template is not a loadable document
    - RenderError: Sheet composition or serialization failed
    - FileSystemError: Reading, writing or creating directories failed

Used By:
    - quadsheet.loading, quadsheet.extraction, quadsheet.output
    - quadsheet.cli: Top-level error reporting
"""

from __future__ import annotations


class QuadsheetError(Exception):
    """Base error for all batch pipeline failures."""
    pass


class TableFormatError(QuadsheetError):
    """Data table is missing a required column or cannot be parsed."""
    pass


class PageIndexError(QuadsheetError, IndexError):
    """
    A 1-based page number falls outside the source document.

    Attributes:
        page_number: The offending 1-based page number
        page_count: Number of pages in the source document
    """

    def __init__(self, page_number: int, page_count: int):
        self.page_number = page_number
        self.page_count = page_count
        super().__init__(
            f"Page {page_number} is out of range: source has {page_count} page(s)"
        )


class LoadError(QuadsheetError):
    """Template bytes could not be opened as a document."""
    pass


class RenderError(QuadsheetError):
    """Embedding a page or font failed, or the result could not be serialized."""
    pass


class FileSystemError(QuadsheetError, OSError):
    """Reading, writing, or creating a directory failed."""
    pass
