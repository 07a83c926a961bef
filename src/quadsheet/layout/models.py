"""
Module: layout.models

Purpose:
    Data models for sheet layout.
    Immutable dataclasses representing cells, labels, and sheets.

Key Classes:
    - CellPlacement: Source page positioned in a quadrant
    - LabelPlacement: Label text positioned on a sheet
    - SheetPlan: Complete layout of one output sheet
    - SheetLayout: Final layout output

Dependencies:
    - dataclasses (std)

Used By:
    - quadsheet.layout.planner: Creates SheetPlans
    - quadsheet.output.composer: Renders SheetPlans
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CellPlacement:
    """
    A source page positioned on a sheet.

    Coordinates are PDF points measured from the sheet's bottom-left corner.

    Attributes:
        source_index: 0-based page index in the document being composed
        slot: Quadrant 0..3 (top-left, top-right, bottom-left, bottom-right)
        x: Left edge
        y: Bottom edge
        width: Cell width
        height: Cell height

    Example:
        >>> cell = CellPlacement(0, 0, 10, 430.945, 277.64, 400.945)
        >>> cell.top
        831.89
    """

    source_index: int
    slot: int
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        """Right edge (x + width)."""
        return self.x + self.width

    @property
    def top(self) -> float:
        """Top edge (y + height)."""
        return self.y + self.height

    def to_top_down(self, page_height: float) -> tuple[float, float, float, float]:
        """
        Convert to a ``(x0, y0, x1, y1)`` rectangle with the origin at the
        top-left corner, the convention PyMuPDF uses for page geometry.
        """
        return (self.x, page_height - self.top, self.right, page_height - self.y)


@dataclass(frozen=True)
class LabelPlacement:
    """
    Label text positioned on a sheet.

    Attributes:
        text: Label to draw
        x: Left edge of the text
        baseline: Baseline y, measured from the bottom edge
        width: Measured text width at the configured font size
    """

    text: str
    x: float
    baseline: float
    width: float


@dataclass(frozen=True)
class SheetPlan:
    """
    Complete layout plan for a single sheet.

    Attributes:
        index: Sheet number (0-indexed)
        placements: One to four CellPlacements in slot order
        label: Label drawn on this sheet, if any (sheet 0 only)
    """

    index: int
    placements: tuple[CellPlacement, ...]
    label: Optional[LabelPlacement] = None

    @property
    def placement_count(self) -> int:
        """Number of source pages on this sheet."""
        return len(self.placements)

    @property
    def source_indices(self) -> tuple[int, ...]:
        """0-based source page indices on this sheet, in slot order."""
        return tuple(p.source_index for p in self.placements)


@dataclass(frozen=True)
class SheetLayout:
    """
    Final layout result (immutable).

    Attributes:
        sheets: SheetPlans in output order
        source_page_count: Number of pages in the composed document
    """

    sheets: tuple[SheetPlan, ...]
    source_page_count: int

    @property
    def sheet_count(self) -> int:
        """Number of output sheets."""
        return len(self.sheets)

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to render."""
        return not self.sheets
