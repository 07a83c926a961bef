"""
Module: loading.table

Purpose:
    Parse the semicolon-delimited data table. The first non-empty line
    is the header; each following non-empty line becomes one Record.

Key Functions:
    - parse_table(): Parse table text
    - load_table(): Read a table file and parse it

Dependencies:
    - csv (std): Delimited text parsing
    - quadsheet.core.models: Record

Used By:
    - quadsheet.batch.pipeline: run_from_paths()
    - quadsheet.cli
"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import List

from quadsheet.core.errors import TableFormatError
from quadsheet.core.models import Record
from quadsheet.output.writer import read_bytes

logger = logging.getLogger(__name__)

DELIMITER = ";"
REQUIRED_COLUMNS = ("name", "pages")


def parse_table(text: str, *, delimiter: str = DELIMITER) -> List[Record]:
    """
    Parse delimited table text into Records.

    Blank lines are skipped. Header names are stripped of surrounding
    whitespace; values are kept verbatim.

    Args:
        text: Full table text, header row first
        delimiter: Field delimiter (default ``;``)

    Returns:
        Records in table order, ``row_number`` counting data rows from 1

    Raises:
        TableFormatError: If the header is missing a required column, a row
            has a different number of fields than the header, or the text
            cannot be parsed

    Example:
        >>> records = parse_table("name;pages\\n03 - Jane Doe;1,2,3\\n")
        >>> records[0].name, records[0].pages
        ('03 - Jane Doe', '1,2,3')
    """
    reader = csv.reader(io.StringIO(text), delimiter=delimiter)
    records: List[Record] = []

    try:
        header = _read_header(reader)
        missing = [column for column in REQUIRED_COLUMNS if column not in header]
        if missing:
            raise TableFormatError(
                f"Table is missing required column(s): {', '.join(missing)} "
                f"(found: {', '.join(header) or 'none'})"
            )

        for row in reader:
            if not row:
                continue
            if len(row) != len(header):
                raise TableFormatError(
                    f"Line {reader.line_num}: expected {len(header)} fields, got {len(row)}"
                )
            fields = dict(zip(header, row))
            records.append(Record(
                name=fields["name"],
                pages=fields["pages"],
                row_number=len(records) + 1,
                fields=fields,
            ))
    except csv.Error as e:
        raise TableFormatError(f"Line {reader.line_num}: {e}") from e

    logger.debug(f"Parsed {len(records)} record(s) with columns {header}")
    return records


def load_table(path: Path, *, encoding: str = "utf-8-sig") -> List[Record]:
    """
    Read a table file and parse it.

    The default encoding tolerates a UTF-8 byte order mark.

    Raises:
        FileSystemError: If the file cannot be read
        TableFormatError: If the file cannot be decoded or parsed
    """
    data = read_bytes(path)
    try:
        text = data.decode(encoding)
    except UnicodeDecodeError as e:
        raise TableFormatError(f"Cannot decode {path} as {encoding}: {e}") from e

    records = parse_table(text)
    logger.info(f"Loaded {len(records)} record(s) from {Path(path).name}")
    return records


def _read_header(reader) -> List[str]:
    """Return the first non-empty row, stripped, or raise if there is none."""
    for row in reader:
        if row:
            return [column.strip() for column in row]
    raise TableFormatError("Table is empty: no header row")
