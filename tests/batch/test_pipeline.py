"""
Integration tests for the batch pipeline.

Runs the full Resolve → Extract → Compose → Write → Merge chain on a
generated template.
"""

import logging
from pathlib import Path

import fitz
import pytest

from conftest import page_marker
from quadsheet.batch import BatchConfig, build_single_record, run_batch, run_from_paths
from quadsheet.batch.pipeline import _merged_output_path
from quadsheet.core.errors import PageIndexError, RenderError, TableFormatError
from quadsheet.loading import parse_table


def _records(text: str):
    return parse_table("name;pages\n" + text)


class TestRunBatchSingleRecord:
    """One record: the target is a file and nothing is merged."""

    def test_writes_only_target_file(self, tmp_path, template_bytes):
        # Arrange
        out_dir = tmp_path / "out"
        target = out_dir / "single.pdf"

        # Act
        result = run_batch(template_bytes, _records("03 - Jane Doe;1,2,3\n"), target)

        # Assert
        assert sorted(p.name for p in out_dir.iterdir()) == ["single.pdf"]
        assert result.merged_path is None
        assert result.generated[0].path == target
        assert result.generated[0].page_count == 1

    def test_written_file_has_label_and_pages(self, tmp_path, template_bytes):
        target = tmp_path / "single.pdf"

        run_batch(template_bytes, _records("Jane;5,1\n"), target)

        with fitz.open(target) as doc:
            text = doc[0].get_text()
            assert "Jane" in text
            assert page_marker(5) in text
            assert page_marker(1) in text


class TestRunBatchMultipleRecords:
    """Several records: the target is a directory plus merged.pdf."""

    def test_writes_each_record_and_merged(self, tmp_path, template_bytes):
        # Arrange
        out_dir = tmp_path / "out"
        records = _records("03 - Jane Doe;1,2,3,4,5\nJohn Roe;2,4\n")

        # Act
        result = run_batch(template_bytes, records, out_dir)

        # Assert
        assert sorted(p.name for p in out_dir.iterdir()) == [
            "02_John_Roe.pdf",
            "03_Jane_Doe.pdf",
            "merged.pdf",
        ]
        assert [g.page_count for g in result.generated] == [2, 1]
        assert result.merged_path == out_dir / "merged.pdf"
        assert result.merged_page_count == 3

    def test_merged_pages_follow_row_order(self, tmp_path, template_bytes):
        # Arrange
        records = _records("Zed;1\nAnn;2\n")

        # Act
        result = run_batch(template_bytes, records, tmp_path / "out")

        # Assert
        with fitz.open(result.merged_path) as merged:
            assert merged.page_count == 2
            assert "Zed" in merged[0].get_text()
            assert "Ann" in merged[1].get_text()

    def test_when_directory_exists_then_reused(self, tmp_path, template_bytes):
        out_dir = tmp_path / "out"
        out_dir.mkdir()

        result = run_batch(template_bytes, _records("A;1\nB;2\n"), out_dir)

        assert result.file_count == 2

    def test_when_custom_merged_name_then_used(self, tmp_path, template_bytes):
        config = BatchConfig(merged_filename="all.pdf")

        result = run_batch(template_bytes, _records("A;1\nB;2\n"), tmp_path / "out", config)

        assert result.merged_path.name == "all.pdf"

    def test_when_filenames_collide_then_warns(self, tmp_path, template_bytes):
        records = _records("07 - Jane;1\n07 - Jane;2\n")

        result = run_batch(template_bytes, records, tmp_path / "out")

        assert len(result.warnings) == 1
        assert "07_Jane.pdf" in result.warnings[0]
        assert result.merged_page_count == 2

    def test_completion_log_reports_files_and_sheets(self, tmp_path, template_bytes, caplog):
        records = _records("03 - Jane Doe;1,2,3,4,5\nJohn Roe;2,4\n")

        with caplog.at_level(logging.INFO, logger="quadsheet"):
            run_batch(template_bytes, records, tmp_path / "out")

        assert "2 file(s), 3 sheet(s)" in caplog.text


class TestRunBatchFailures:
    """Errors abort the run immediately."""

    def test_when_page_out_of_range_then_no_output(self, tmp_path, template_bytes):
        target = tmp_path / "single.pdf"

        with pytest.raises(PageIndexError):
            run_batch(template_bytes, _records("Jane;1,99\n"), target)

        assert not target.exists()

    def test_when_later_record_fails_then_no_merge(self, tmp_path, template_bytes):
        out_dir = tmp_path / "out"

        with pytest.raises(PageIndexError):
            run_batch(template_bytes, _records("A;1\nB;99\n"), out_dir)

        assert sorted(p.name for p in out_dir.iterdir()) == ["01_A.pdf"]

    def test_when_no_records_then_nothing_written(self, tmp_path, template_bytes):
        out_dir = tmp_path / "out"

        result = run_batch(template_bytes, [], out_dir)

        assert result.file_count == 0
        assert not out_dir.exists()


class TestRunBatchSkippedRecords:
    """Rows without any usable page number are skipped, not fatal."""

    def test_when_middle_row_has_no_pages_then_others_still_built(self, tmp_path, template_bytes):
        # Arrange
        out_dir = tmp_path / "out"
        records = _records("A;1,2\nB;x\nC;3\n")

        # Act
        result = run_batch(template_bytes, records, out_dir)

        # Assert
        assert sorted(p.name for p in out_dir.iterdir()) == [
            "01_A.pdf",
            "03_C.pdf",
            "merged.pdf",
        ]
        assert result.file_count == 2
        assert result.merged_page_count == 2
        assert len(result.warnings) == 1
        assert "Row 2" in result.warnings[0]
        assert "'B'" in result.warnings[0]

    def test_skipped_row_left_out_of_merge(self, tmp_path, template_bytes):
        result = run_batch(template_bytes, _records("A;1\nB;\nC;2\n"), tmp_path / "out")

        with fitz.open(result.merged_path) as merged:
            assert merged.page_count == 2
            assert "A" in merged[0].get_text()
            assert page_marker(2) in merged[1].get_text()

    def test_when_single_row_has_no_pages_then_nothing_written(self, tmp_path, template_bytes):
        target = tmp_path / "single.pdf"

        result = run_batch(template_bytes, _records("A;\n"), target)

        assert not target.exists()
        assert result.file_count == 0
        assert result.merged_path is None
        assert len(result.warnings) == 1

    def test_when_every_row_skipped_then_no_merge(self, tmp_path, template_bytes):
        out_dir = tmp_path / "out"

        result = run_batch(template_bytes, _records("A;x\nB;\n"), out_dir)

        assert list(out_dir.iterdir()) == []
        assert result.merged_path is None
        assert len(result.warnings) == 3


class TestBuildSingleRecord:
    """Tests for build_single_record()."""

    def test_builds_requested_row(self, tmp_path, template_bytes):
        records = _records("A;1\nB;2\n")

        generated = build_single_record(template_bytes, records, tmp_path / "b.pdf", row_index=1)

        with fitz.open(generated.path) as doc:
            assert "B" in doc[0].get_text()
            assert page_marker(2) in doc[0].get_text()

    def test_when_row_missing_then_raises_error(self, tmp_path, template_bytes):
        with pytest.raises(TableFormatError, match="Row 3 requested"):
            build_single_record(template_bytes, _records("A;1\n"), tmp_path / "x.pdf", row_index=2)

    def test_when_requested_row_has_no_pages_then_raises_error(self, tmp_path, template_bytes):
        target = tmp_path / "x.pdf"

        with pytest.raises(RenderError, match="no usable page numbers"):
            build_single_record(template_bytes, _records("A;x\n"), target)

        assert not target.exists()


class TestRunFromPaths:
    """Tests for run_from_paths()."""

    def test_reads_inputs_from_disk(self, tmp_path, template_path, write_table):
        table = write_table("name;pages\n01 - A;1\n02 - B;2,3\n")

        result = run_from_paths(table, template_path, tmp_path / "out")

        assert result.merged_page_count == 2
        assert (tmp_path / "out" / "01_A.pdf").exists()

    def test_when_row_given_then_single_file(self, tmp_path, template_path, write_table):
        table = write_table("name;pages\n01 - A;1\n02 - B;2,3\n")
        target = tmp_path / "only.pdf"

        result = run_from_paths(table, template_path, target, row=2)

        assert result.generated[0].path == target
        assert result.merged_path is None


class TestMergedOutputPath:
    """Tests for _merged_output_path()."""

    def test_when_directory_then_inside(self, tmp_path):
        assert _merged_output_path(tmp_path, BatchConfig()) == tmp_path / "merged.pdf"

    def test_when_not_directory_then_target_itself(self, tmp_path):
        target = tmp_path / "merged-here.pdf"

        assert _merged_output_path(target, BatchConfig()) == target
