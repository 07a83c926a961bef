"""
Module: output.composer

Purpose:
    Render a SheetLayout with PyMuPDF. Each SheetPlan becomes one A4
    page; each CellPlacement embeds a source page as a form XObject
    stretched to its cell, so the source content stream is reused
    unchanged.

Key Functions:
    - compose_sheets(): Plan and render in one call
    - render_layout(): Render an existing plan

Dependencies:
    - fitz (PyMuPDF): show_pdf_page for embedding, insert_text for labels
    - quadsheet.layout: SheetConfig, plan_sheets

Used By:
    - quadsheet.batch.pipeline: One composition per record
"""

from __future__ import annotations

import logging
from typing import Optional

import fitz

from quadsheet.core.errors import RenderError
from quadsheet.layout import SheetConfig, SheetLayout, SheetPlan, plan_sheets

logger = logging.getLogger(__name__)

LABEL_COLOR = (0, 0, 0)


def compose_sheets(
    doc: fitz.Document,
    label: Optional[str] = None,
    config: Optional[SheetConfig] = None,
) -> fitz.Document:
    """
    Lay ``doc``'s pages out four to a sheet.

    Every four consecutive pages fill the quadrants of one sheet in
    reading order (top-left, top-right, bottom-left, bottom-right).
    A non-empty ``label`` is drawn once, centred at the top of the first
    sheet. An empty ``doc`` gives an empty result.

    Args:
        doc: Document to compose (not modified)
        label: Optional text for the first sheet
        config: Sheet geometry; defaults to A4 portrait

    Returns:
        New document with ``ceil(doc.page_count / 4)`` pages

    Raises:
        RenderError: If a page cannot be embedded, or the label has a
            character the label font cannot encode

    Example:
        >>> sheets = compose_sheets(extracted, label="03 - Jane Doe")
        >>> sheets.page_count
        2
    """
    config = config or SheetConfig()
    layout = plan_sheets(doc.page_count, config, label=label)
    return render_layout(doc, layout, config)


def render_layout(
    doc: fitz.Document,
    layout: SheetLayout,
    config: SheetConfig,
) -> fitz.Document:
    """
    Render a precomputed layout of ``doc`` into a new document.

    Raises:
        RenderError: If embedding a page or drawing the label fails
    """
    out = fitz.open()
    if layout.is_empty:
        logger.debug("Nothing to compose: no source pages")
        return out

    try:
        for plan in layout.sheets:
            _render_sheet(out, doc, plan, config)
    except RenderError:
        out.close()
        raise

    logger.debug(
        f"Composed {layout.source_page_count} page(s) onto {layout.sheet_count} sheet(s)"
    )
    return out


def _render_sheet(
    out: fitz.Document,
    doc: fitz.Document,
    plan: SheetPlan,
    config: SheetConfig,
) -> None:
    """Append one sheet to ``out`` and fill it according to ``plan``."""
    sheet = out.new_page(width=config.page_width, height=config.page_height)

    for placement in plan.placements:
        if not doc[placement.source_index].get_contents():
            # show_pdf_page rejects pages without a content stream
            logger.debug(f"Page {placement.source_index + 1} is blank, leaving its cell empty")
            continue
        rect = fitz.Rect(*placement.to_top_down(config.page_height))
        try:
            sheet.show_pdf_page(rect, doc, placement.source_index, keep_proportion=False)
        except (RuntimeError, ValueError) as e:
            raise RenderError(
                f"Failed to embed page {placement.source_index + 1} "
                f"on sheet {plan.index + 1}: {e}"
            ) from e

    if plan.label is not None:
        _draw_label(sheet, plan, config)

    logger.debug(f"Sheet {plan.index + 1}: {plan.placement_count} cell(s) placed")


def _draw_label(sheet: fitz.Page, plan: SheetPlan, config: SheetConfig) -> None:
    """Draw the sheet label in bold black at its planned baseline."""
    label = plan.label
    # insert_text takes the baseline point in top-down coordinates
    point = fitz.Point(label.x, config.page_height - label.baseline)
    try:
        sheet.insert_text(
            point,
            label.text,
            fontname=config.label_font,
            fontsize=config.label_size,
            color=LABEL_COLOR,
        )
    except (RuntimeError, ValueError) as e:
        raise RenderError(f"Failed to draw label {label.text!r}: {e}") from e
