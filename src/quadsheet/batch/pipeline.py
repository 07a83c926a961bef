"""
Module: batch.pipeline

Purpose:
    Orchestrate the complete batch.
    Resolve → Extract → Compose → Write (per record) → Merge

Key Functions:
    - run_batch(): Main entry point for a list of records
    - build_single_record(): Build one chosen row into one file
    - build_record(): Extract and compose one resolved record in memory
    - run_from_paths(): Load table and template from disk, then run_batch()

Dependencies:
    - quadsheet.extraction: Page extraction
    - quadsheet.output: Composition, writing, merging
    - quadsheet.batch.resolver: Row resolution

Used By:
    - quadsheet.cli
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import fitz

from quadsheet.core.errors import RenderError, TableFormatError
from quadsheet.core.models import BatchResult, GeneratedFile, Record, ResolvedRecord
from quadsheet.extraction import extract_pages
from quadsheet.loading import load_table, load_template
from quadsheet.loading.template import TemplateSource
from quadsheet.output import (
    compose_sheets,
    concatenate_files,
    ensure_directory,
    read_bytes,
    save_document,
)

from .config import BatchConfig
from .resolver import resolve_record

logger = logging.getLogger(__name__)


def build_record(
    template: fitz.Document,
    resolved: ResolvedRecord,
    config: Optional[BatchConfig] = None,
) -> fitz.Document:
    """
    Extract a record's pages and compose them onto labelled sheets.

    Args:
        template: Open template document (read only)
        resolved: Resolved record
        config: Pipeline configuration

    Returns:
        Composed document; the caller closes it

    Raises:
        PageIndexError: If a page number is outside the template
        RenderError: If composition fails
    """
    config = config or BatchConfig()
    extracted = extract_pages(template, resolved.page_numbers)
    try:
        return compose_sheets(extracted, label=resolved.name, config=config.sheet)
    finally:
        extracted.close()


def run_batch(
    source: TemplateSource,
    records: Sequence[Record],
    output_target: Path,
    config: Optional[BatchConfig] = None,
    *,
    filetype: Optional[str] = None,
) -> BatchResult:
    """
    Build one PDF per record and merge them when there are several.

    With exactly one record, ``output_target`` is the output file. With
    more, it is a directory (created if absent) that receives one file
    per record plus the merged document. A record without any usable
    page number is skipped with a warning and left out of the merge.
    Any other failure aborts the run; files already written are left in
    place.

    Args:
        source: Template bytes or open template document
        records: Records in table order
        output_target: Output file (one record) or directory (several)
        config: Pipeline configuration
        filetype: Format hint when ``source`` is non-PDF bytes

    Returns:
        BatchResult with generated files and merged path

    Raises:
        QuadsheetError: Any subclass; see quadsheet.core.errors

    Example:
        >>> result = run_batch(template_bytes, records, Path("out"))
        >>> result.merged_path
        PosixPath('out/merged.pdf')
    """
    config = config or BatchConfig()
    output_target = Path(output_target)
    records = list(records)
    start_time = time.perf_counter()

    if not records:
        logger.warning("No records to process, nothing written")
        return BatchResult(generated=(), warnings=("No records to process",))

    is_single = len(records) == 1
    if not is_single:
        ensure_directory(output_target)

    warnings: List[str] = []
    generated: List[GeneratedFile] = []
    seen: Dict[str, int] = {}

    template = load_template(source, filetype=filetype)
    try:
        logger.info(f"Processing {len(records)} record(s) against a {template.page_count}-page template")

        for position, record in enumerate(records, start=1):
            resolved = resolve_record(record, position)

            if not resolved.page_numbers:
                message = f"Row {position} ({resolved.name!r}) lists no usable page numbers; skipped"
                logger.warning(message)
                warnings.append(message)
                continue

            if is_single:
                output_path = output_target
            else:
                output_path = output_target / resolved.output_filename
                if resolved.output_filename in seen:
                    message = (
                        f"Rows {seen[resolved.output_filename]} and {position} both resolve to "
                        f"{resolved.output_filename}; row {position} overwrites it"
                    )
                    logger.warning(message)
                    warnings.append(message)
                seen[resolved.output_filename] = position

            generated.append(_write_record(template, resolved, output_path, config))
            logger.info(f"Generated: {output_path}")
    finally:
        if template is not source:
            template.close()

    merged_path = None
    merged_page_count = 0
    if not is_single and generated:
        merged_path = _merged_output_path(output_target, config)
        merged_page_count = concatenate_files([item.path for item in generated], merged_path)
        logger.info(f"Merged PDF created: {merged_path}")
    elif not is_single:
        message = "No record produced a file, merge skipped"
        logger.warning(message)
        warnings.append(message)

    result = BatchResult(
        generated=tuple(generated),
        merged_path=merged_path,
        merged_page_count=merged_page_count,
        warnings=tuple(warnings),
    )

    elapsed = time.perf_counter() - start_time
    logger.info(
        f"Batch completed in {elapsed:.2f}s: {result.file_count} file(s), "
        f"{result.total_pages} sheet(s)"
    )
    return result


def build_single_record(
    source: TemplateSource,
    records: Sequence[Record],
    output_path: Path,
    row_index: int = 0,
    config: Optional[BatchConfig] = None,
    *,
    filetype: Optional[str] = None,
) -> GeneratedFile:
    """
    Build only the record at ``row_index`` (0-based) into ``output_path``.

    Raises:
        TableFormatError: If the table has no row at ``row_index``
        RenderError: If that row lists no usable page numbers
    """
    config = config or BatchConfig()
    if not 0 <= row_index < len(records):
        raise TableFormatError(
            f"Row {row_index + 1} requested but the table has {len(records)} record(s)"
        )

    resolved = resolve_record(records[row_index], row_index + 1)
    template = load_template(source, filetype=filetype)
    try:
        generated = _write_record(template, resolved, Path(output_path), config)
    finally:
        if template is not source:
            template.close()

    logger.info(f"Generated: {output_path}")
    return generated


def run_from_paths(
    table_path: Path,
    template_path: Path,
    output_target: Path,
    config: Optional[BatchConfig] = None,
    *,
    row: Optional[int] = None,
) -> BatchResult:
    """
    Read the table and template from disk and run the batch.

    Args:
        table_path: Semicolon-delimited table file
        template_path: Template document
        output_target: Output file or directory (see run_batch())
        config: Pipeline configuration
        row: Build only this 1-based row into ``output_target``

    Returns:
        BatchResult
    """
    records = load_table(table_path)
    template_path = Path(template_path)
    source = read_bytes(template_path)
    filetype = template_path.suffix.lstrip(".").lower() or None

    if row is not None:
        generated = build_single_record(
            source, records, output_target, row - 1, config, filetype=filetype
        )
        return BatchResult(generated=(generated,))

    return run_batch(source, records, output_target, config, filetype=filetype)


def _write_record(
    template: fitz.Document,
    resolved: ResolvedRecord,
    output_path: Path,
    config: BatchConfig,
) -> GeneratedFile:
    """Build one record and write it to ``output_path``."""
    if not resolved.page_numbers:
        raise RenderError(
            f"Record {resolved.name!r} lists no usable page numbers; nothing to write"
        )

    composed = build_record(template, resolved, config)
    try:
        page_count = composed.page_count
        save_document(composed, output_path)
    finally:
        composed.close()

    logger.debug(f"{resolved.output_filename}: {resolved.page_count} page(s) on {page_count} sheet(s)")
    return GeneratedFile(path=output_path, page_count=page_count)


def _merged_output_path(output_target: Path, config: BatchConfig) -> Path:
    """Merged file goes inside the output directory, or replaces a non-directory target."""
    if output_target.is_dir():
        return output_target / config.merged_filename
    return output_target
