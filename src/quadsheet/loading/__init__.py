"""
Module: loading

Purpose:
    Turn on-disk inputs into pipeline inputs: the semicolon-delimited
    data table into Records, template bytes into a PyMuPDF document.

Key Functions:
    - parse_table(): Parse table text into Records
    - load_table(): Read and parse a table file
    - load_template(): Open template bytes as a PDF document
"""

from .table import parse_table, load_table, REQUIRED_COLUMNS
from .template import load_template

__all__ = [
    "parse_table",
    "load_table",
    "load_template",
    "REQUIRED_COLUMNS",
]
