"""
Module: core.models.records

Purpose:
    Row-level data models. A Record is what the table loader produces;
    a ResolvedRecord is what the extractor and composer consume.

Key Classes:
    - Record: Raw table row (name, pages, all fields)
    - ResolvedRecord: Display name, ordered page numbers, output filename

Dependencies:
    - dataclasses (std)

Used By:
    - quadsheet.loading.table: Creates Records
    - quadsheet.batch.resolver: Creates ResolvedRecords
    - quadsheet.batch.pipeline: Drives one output per record
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Record:
    """
    One row of the data table (immutable).

    Attributes:
        name: Display/label string from the ``name`` column
        pages: Raw comma-separated 1-based page list from the ``pages`` column
        row_number: 1-based position of the row among data rows
        fields: Every column of the row, including ``name`` and ``pages``

    Example:
        >>> record = Record(name="03 - Jane Doe", pages="1,2,3", row_number=1)
        >>> record.fields["name"]
        '03 - Jane Doe'
    """
    name: str
    pages: str
    row_number: int = 1
    fields: Mapping[str, str] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        """Freeze the field mapping and make sure it carries the required columns."""
        merged = {"name": self.name, "pages": self.pages, **dict(self.fields)}
        object.__setattr__(self, "fields", MappingProxyType(merged))
        if self.row_number < 1:
            raise ValueError(f"row_number must be positive: {self.row_number}")


@dataclass(frozen=True)
class ResolvedRecord:
    """
    Everything the pipeline needs to build one output document.

    Attributes:
        name: Label drawn on the first sheet (verbatim from the record)
        page_numbers: Ordered 1-based template page numbers (repeats allowed)
        output_filename: Derived filename, e.g. ``03_Jane_Doe.pdf``
    """
    name: str
    page_numbers: tuple[int, ...]
    output_filename: str

    @property
    def page_count(self) -> int:
        """Number of pages that will be extracted."""
        return len(self.page_numbers)
