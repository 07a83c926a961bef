"""
Module: layout.config

Purpose:
    Configuration for the sheet layout engine.
    Defines sheet dimensions, cell margin, and label style.

Key Classes:
    - SheetConfig: Immutable sheet configuration

Dependencies:
    - dataclasses (std)

Used By:
    - quadsheet.layout.planner: Cell geometry
    - quadsheet.output.composer: Label rendering
"""

from __future__ import annotations

from dataclasses import dataclass


# A4 portrait in PDF points
A4_WIDTH_PT = 595.28
A4_HEIGHT_PT = 841.89

SLOTS_PER_SHEET = 4

# PyMuPDF base-14 name for Helvetica-Bold
DEFAULT_LABEL_FONT = "hebo"


@dataclass(frozen=True)
class SheetConfig:
    """
    Configuration for sheet composition (immutable).

    All coordinates follow the PDF convention: origin at the bottom-left
    corner, y growing upwards.

    Attributes:
        page_width: Sheet width in points
        page_height: Sheet height in points
        cell_margin: Inset of each embedded page from its quadrant edges
        label_font: Base-14 font used for the label
        label_size: Label font size in points
        label_offset: Distance from the sheet top to the label baseline

    Example:
        >>> config = SheetConfig()
        >>> round(config.cell_width, 2)
        277.64
    """

    page_width: float = A4_WIDTH_PT
    page_height: float = A4_HEIGHT_PT
    cell_margin: float = 10

    label_font: str = DEFAULT_LABEL_FONT
    label_size: float = 24
    label_offset: float = 25

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if self.cell_margin < 0:
            raise ValueError(f"cell_margin must be non-negative: {self.cell_margin}")
        if self.cell_width <= 0 or self.cell_height <= 0:
            raise ValueError("Cell margin exceeds quadrant size")
        if self.label_size <= 0:
            raise ValueError(f"label_size must be positive: {self.label_size}")

    @property
    def cell_width(self) -> float:
        """Width of an embedded page (half sheet minus both margins)."""
        return self.page_width / 2 - 2 * self.cell_margin

    @property
    def cell_height(self) -> float:
        """Height of an embedded page (half sheet minus both margins)."""
        return self.page_height / 2 - 2 * self.cell_margin

    @property
    def grid_origins(self) -> tuple[tuple[float, float], ...]:
        """Bottom-left corners of the four quadrants in slot order."""
        half_w = self.page_width / 2
        half_h = self.page_height / 2
        return (
            (0, half_h),       # top-left
            (half_w, half_h),  # top-right
            (0, 0),            # bottom-left
            (half_w, 0),       # bottom-right
        )

    @property
    def label_baseline(self) -> float:
        """Label baseline y (from the bottom edge)."""
        return self.page_height - self.label_offset
