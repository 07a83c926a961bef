"""
Module: batch.resolver

Purpose:
    Map one table row to what the pipeline needs: the label, the
    ordered page numbers, and the output filename.

Key Functions:
    - resolve_record(): Record -> ResolvedRecord
    - parse_page_numbers(): Lenient comma-separated integer parsing
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from quadsheet.common.naming import output_filename
from quadsheet.core.models import Record, ResolvedRecord

logger = logging.getLogger(__name__)

# Leading integer of a token; the rest of the token is ignored
_LEADING_INT = re.compile(r"[+-]?[0-9]+")


def parse_page_numbers(pages: str) -> tuple[int, ...]:
    """
    Parse a comma-separated page list.

    Each token is trimmed and its leading integer is used, so ``"5x"``
    reads as 5. Tokens with no leading integer are dropped without error.

    Examples:
        >>> parse_page_numbers("1, 2,3")
        (1, 2, 3)
        >>> parse_page_numbers("4,,x,2b")
        (4, 2)
    """
    numbers = []
    for token in pages.split(","):
        match = _LEADING_INT.match(token.strip())
        if match:
            numbers.append(int(match.group(0)))
        elif token.strip():
            logger.debug(f"Ignoring unparsable page token {token.strip()!r}")
    return tuple(numbers)


def resolve_record(record: Record, row_position: Optional[int] = None) -> ResolvedRecord:
    """
    Resolve a record for extraction and output.

    Args:
        record: Parsed table row
        row_position: 1-based row position used for the filename prefix
            fallback; defaults to ``record.row_number``

    Returns:
        ResolvedRecord

    Example:
        >>> resolve_record(Record(name="03 - Jane Doe", pages="1,2,3"))
        ResolvedRecord(name='03 - Jane Doe', page_numbers=(1, 2, 3), output_filename='03_Jane_Doe.pdf')
    """
    position = record.row_number if row_position is None else row_position
    return ResolvedRecord(
        name=record.name,
        page_numbers=parse_page_numbers(record.pages),
        output_filename=output_filename(record.name, position),
    )
