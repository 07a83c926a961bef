"""
Module: layout.planner

Purpose:
    Arrange source pages four to a sheet.

Key Functions:
    - plan_sheets(): Main planning function
    - sheet_count(): Number of sheets for N pages

Algorithm:
    1. Partition page indices into consecutive groups of at most four
    2. Slot j of a group goes to quadrant j, inset by the cell margin
    3. A non-empty label is centred on the first sheet only

Dependencies:
    - fitz (PyMuPDF): Base-14 font metrics for label centring
    - quadsheet.layout.config: SheetConfig

Used By:
    - quadsheet.output.composer
"""

from __future__ import annotations

import logging
from typing import List, Optional

import fitz

from quadsheet.core.errors import RenderError

from .config import SheetConfig, SLOTS_PER_SHEET
from .models import CellPlacement, LabelPlacement, SheetPlan, SheetLayout

logger = logging.getLogger(__name__)

# Base-14 label fonts only carry Latin-1 glyphs
LATIN_1_MAX = 0xFF


def sheet_count(page_count: int) -> int:
    """Number of sheets needed for ``page_count`` pages (ceil(N / 4))."""
    return -(-page_count // SLOTS_PER_SHEET)


def plan_sheets(
    page_count: int,
    config: SheetConfig,
    label: Optional[str] = None,
) -> SheetLayout:
    """
    Plan the 2x2 layout of ``page_count`` pages.

    The last sheet may be partially filled; empty slots get no placement.

    Args:
        page_count: Pages in the document being composed
        config: Sheet configuration
        label: Text for the first sheet; None or empty means no label

    Returns:
        SheetLayout with ``ceil(page_count / 4)`` sheets

    Raises:
        ValueError: If ``page_count`` is negative
        RenderError: If the label has characters outside Latin-1

    Example:
        >>> layout = plan_sheets(5, SheetConfig(), label="Jane")
        >>> [s.source_indices for s in layout.sheets]
        [(0, 1, 2, 3), (4,)]
    """
    if page_count < 0:
        raise ValueError(f"page_count must be non-negative: {page_count}")

    sheets: List[SheetPlan] = []
    origins = config.grid_origins

    for sheet_index, start in enumerate(range(0, page_count, SLOTS_PER_SHEET)):
        stop = min(start + SLOTS_PER_SHEET, page_count)
        placements = tuple(
            CellPlacement(
                source_index=source_index,
                slot=slot,
                x=origins[slot][0] + config.cell_margin,
                y=origins[slot][1] + config.cell_margin,
                width=config.cell_width,
                height=config.cell_height,
            )
            for slot, source_index in enumerate(range(start, stop))
        )
        sheet_label = _place_label(label, config) if sheet_index == 0 else None
        sheets.append(SheetPlan(index=sheet_index, placements=placements, label=sheet_label))

    if label and not sheets:
        logger.debug(f"Label {label!r} dropped: no pages to compose")

    logger.debug(f"Planned {page_count} page(s) onto {sheet_count(page_count)} sheet(s)")
    return SheetLayout(sheets=tuple(sheets), source_page_count=page_count)


def _place_label(label: Optional[str], config: SheetConfig) -> Optional[LabelPlacement]:
    """Centre the label horizontally at the configured baseline."""
    if not label:
        return None
    unsupported = next((char for char in label if ord(char) > LATIN_1_MAX), None)
    if unsupported is not None:
        raise RenderError(
            f"Label {label!r} contains {unsupported!r}, which the label font cannot encode"
        )
    width = fitz.get_text_length(label, fontname=config.label_font, fontsize=config.label_size)
    return LabelPlacement(
        text=label,
        x=(config.page_width - width) / 2,
        baseline=config.label_baseline,
        width=width,
    )
