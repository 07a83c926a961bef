"""
Module: batch.config

Purpose:
    Configuration dataclass for the batch pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - BatchConfig: Main configuration for batch runs

Used By:
    - quadsheet.batch.pipeline
    - quadsheet.cli
"""

from __future__ import annotations

from dataclasses import dataclass, field

from quadsheet.layout import SheetConfig

DEFAULT_MERGED_FILENAME = "merged.pdf"


@dataclass(frozen=True)
class BatchConfig:
    """
    Configuration for batch runs (immutable).

    Attributes:
        sheet: Sheet geometry and label style
        merged_filename: Name of the merged document inside the output directory

    Example:
        >>> config = BatchConfig()
        >>> config.merged_filename
        'merged.pdf'
    """

    sheet: SheetConfig = field(default_factory=SheetConfig)
    merged_filename: str = DEFAULT_MERGED_FILENAME

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.merged_filename or "/" in self.merged_filename or "\\" in self.merged_filename:
            raise ValueError(f"merged_filename must be a plain filename: {self.merged_filename!r}")
        if not self.merged_filename.lower().endswith(".pdf"):
            raise ValueError(f"merged_filename must end with .pdf: {self.merged_filename!r}")
