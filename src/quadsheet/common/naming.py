"""Output filename utilities.

Derives the deterministic per-record filename from a record's display
name and its position in the table.
"""

from __future__ import annotations

import re

PDF_SUFFIX = ".pdf"

_LEADING_DIGITS = re.compile(r"^[0-9]+")
_NUMBER_PREFIX = re.compile(r"^[0-9]+\s*-\s*")
_WHITESPACE_RUN = re.compile(r"\s+")
_DISALLOWED_CHARS = re.compile(r"[^A-Za-z0-9_\-]")


def row_prefix(name: str, row_position: int) -> str:
    """Return the numeric prefix used at the start of an output filename.

    A leading run of digits in ``name`` wins; otherwise the 1-based row
    position is zero-padded to two digits.

    Args:
        name: Record display name.
        row_position: 1-based position of the record in the table.

    Returns:
        Prefix string without separator.

    Examples:
        >>> row_prefix("03 - Jane Doe", 7)
        '03'
        >>> row_prefix("Jane Doe", 7)
        '07'
        >>> row_prefix("Jane Doe", 123)
        '123'
    """
    match = _LEADING_DIGITS.match(name)
    if match:
        return match.group(0)
    return f"{row_position:02d}"


def sanitize_name(name: str) -> str:
    """Reduce a display name to a filesystem-safe stem.

    Strips a leading ``<digits> - `` (or ``<digits>-``) prefix, collapses
    whitespace runs to single underscores and removes every character
    outside ``[A-Za-z0-9_-]``.

    Examples:
        >>> sanitize_name("03 - Jane Doe")
        'Jane_Doe'
        >>> sanitize_name("Zoë  O'Brien")
        'Zo_OBrien'
    """
    stem = _NUMBER_PREFIX.sub("", name, count=1)
    stem = _WHITESPACE_RUN.sub("_", stem)
    return _DISALLOWED_CHARS.sub("", stem)


def output_filename(name: str, row_position: int) -> str:
    """Build ``<prefix>_<sanitized name>.pdf`` for a record.

    Examples:
        >>> output_filename("03 - Jane Doe", 1)
        '03_Jane_Doe.pdf'
        >>> output_filename("Max Mustermann", 2)
        '02_Max_Mustermann.pdf'
    """
    return f"{row_prefix(name, row_position)}_{sanitize_name(name)}{PDF_SUFFIX}"
