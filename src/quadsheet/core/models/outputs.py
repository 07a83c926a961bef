"""
Module: core.models.outputs

Purpose:
    Results of a batch run.

Key Classes:
    - GeneratedFile: One per-record PDF written to disk
    - BatchResult: All generated files plus the merged document path
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class GeneratedFile:
    """
    A per-record PDF written by the pipeline.

    Attributes:
        path: Where the document was written
        page_count: Number of sheets in the written document
    """
    path: Path
    page_count: int


@dataclass(frozen=True)
class BatchResult:
    """
    Complete batch result (immutable).

    Attributes:
        generated: Per-record outputs in record order
        merged_path: Path of the merged document (None unless > 1 record
            produced a file)
        merged_page_count: Number of pages in the merged document
        warnings: Non-fatal issues noticed during the run

    Example:
        >>> result = run_batch(source, records, Path("out"))
        >>> print(f"Wrote {result.file_count} files")
    """
    generated: tuple[GeneratedFile, ...]
    merged_path: Optional[Path] = None
    merged_page_count: int = 0
    warnings: tuple[str, ...] = ()

    @property
    def file_count(self) -> int:
        """Number of per-record files written."""
        return len(self.generated)

    @property
    def total_pages(self) -> int:
        """Sum of sheets across all per-record files."""
        return sum(item.page_count for item in self.generated)
