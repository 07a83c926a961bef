"""
Unit tests for page extraction.
"""

import pytest

from conftest import page_marker, page_texts
from quadsheet.core.errors import LoadError, PageIndexError
from quadsheet.extraction import extract_pages, validate_page_numbers


class TestExtractPages:
    """Tests for extract_pages()."""

    def test_when_valid_pages_then_copies_in_requested_order(self, template_bytes):
        # Act
        doc = extract_pages(template_bytes, [3, 1, 5])

        # Assert
        texts = page_texts(doc)
        assert doc.page_count == 3
        assert page_marker(3) in texts[0]
        assert page_marker(1) in texts[1]
        assert page_marker(5) in texts[2]
        doc.close()

    def test_when_page_repeated_then_duplicated(self, template_bytes):
        doc = extract_pages(template_bytes, [2, 2])

        assert doc.page_count == 2
        assert all(page_marker(2) in text for text in page_texts(doc))
        doc.close()

    def test_when_open_document_then_source_untouched(self, template_doc):
        # Act
        doc = extract_pages(template_doc, [4])

        # Assert
        assert page_marker(4) in doc[0].get_text()
        assert template_doc.page_count == 5
        assert not template_doc.is_closed
        doc.close()

    def test_when_output_modified_then_source_unchanged(self, template_doc):
        """Pages are copied, not referenced."""
        doc = extract_pages(template_doc, [1])

        doc[0].insert_text((100, 300), "ADDED-LATER")

        assert "ADDED-LATER" not in template_doc[0].get_text()
        doc.close()

    def test_when_empty_list_then_empty_document(self, template_bytes):
        doc = extract_pages(template_bytes, [])

        assert doc.page_count == 0
        doc.close()

    def test_when_page_beyond_count_then_raises_error(self, template_bytes):
        with pytest.raises(PageIndexError) as exc_info:
            extract_pages(template_bytes, [1, 99])

        assert exc_info.value.page_number == 99
        assert exc_info.value.page_count == 5

    @pytest.mark.parametrize("number", [0, -1])
    def test_when_page_below_one_then_raises_error(self, template_bytes, number):
        with pytest.raises(PageIndexError):
            extract_pages(template_bytes, [number])

    def test_when_source_invalid_then_raises_load_error(self):
        with pytest.raises(LoadError):
            extract_pages(b"", [1])


class TestValidatePageNumbers:
    """Tests for validate_page_numbers()."""

    def test_when_all_in_range_then_passes(self):
        validate_page_numbers([1, 5, 3], 5)

    def test_when_first_bad_then_reports_it(self):
        with pytest.raises(PageIndexError, match="Page 6"):
            validate_page_numbers([6, 7], 5)
