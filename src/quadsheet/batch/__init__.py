"""
Module: batch

Purpose:
    Drive extraction and composition once per table row, write each
    result with a deterministic filename, and merge the outputs.
    Table → Resolve → Extract → Compose → Write → Merge

Key Functions:
    - resolve_record(): Row -> label, page numbers, filename
    - run_batch(): Main entry point for a whole table
    - build_single_record(): Build one chosen row
    - run_from_paths(): Read inputs from disk, then run

Key Classes:
    - BatchConfig: Pipeline configuration
"""

from .config import BatchConfig
from .resolver import resolve_record, parse_page_numbers
from .pipeline import run_batch, build_single_record, build_record, run_from_paths

__all__ = [
    # Config
    "BatchConfig",
    # Resolution
    "resolve_record",
    "parse_page_numbers",
    # Pipeline
    "run_batch",
    "build_single_record",
    "build_record",
    "run_from_paths",
]
