"""
Module: core.models

Purpose:
    Immutable data models shared across the pipeline.

Key Classes:
    - Record: One parsed row of the data table
    - ResolvedRecord: Label, page numbers and filename derived from a Record
    - GeneratedFile: One written per-record PDF
    - BatchResult: Outcome of a batch run
"""

from .records import Record, ResolvedRecord
from .outputs import GeneratedFile, BatchResult

__all__ = [
    "Record",
    "ResolvedRecord",
    "GeneratedFile",
    "BatchResult",
]
