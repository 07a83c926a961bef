"""
Module: layout

Purpose:
    Sheet geometry and planning. Decides which source page goes into
    which quadrant of which A4 sheet, and where the label goes, without
    touching any PDF object.

Key Functions:
    - plan_sheets(): Partition pages into 2x2 sheet plans

Key Classes:
    - SheetConfig: Sheet geometry and label style
    - CellPlacement: One source page placed in one quadrant
    - SheetPlan: One output sheet
    - SheetLayout: Complete plan for a document

Used By:
    - quadsheet.output.composer: Renders plans with PyMuPDF
"""

from .config import SheetConfig, A4_WIDTH_PT, A4_HEIGHT_PT, SLOTS_PER_SHEET
from .models import CellPlacement, LabelPlacement, SheetPlan, SheetLayout
from .planner import plan_sheets, sheet_count

__all__ = [
    # Config
    "SheetConfig",
    "A4_WIDTH_PT",
    "A4_HEIGHT_PT",
    "SLOTS_PER_SHEET",
    # Models
    "CellPlacement",
    "LabelPlacement",
    "SheetPlan",
    "SheetLayout",
    # Functions
    "plan_sheets",
    "sheet_count",
]
