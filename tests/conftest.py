import pytest
import sys
from pathlib import Path

import fitz

# Add src to sys.path so we can import quadsheet
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


def page_marker(number: int) -> str:
    """Unique text drawn on template page ``number`` (1-based)."""
    return f"TPL-{number:02d}"


def create_test_pdf(num_pages: int = 5, *, width: float = 595, height: float = 842) -> bytes:
    """Helper to create a template PDF whose pages carry page_marker() text."""
    doc = fitz.open()
    for i in range(num_pages):
        page = doc.new_page(width=width, height=height)
        # Add some text to make it non-empty
        page.insert_text((100, 100), page_marker(i + 1), fontsize=20)
    data = doc.tobytes()
    doc.close()
    return data


def page_texts(doc: fitz.Document) -> list[str]:
    """Extracted text of every page, for order checks."""
    return [page.get_text("text") for page in doc]


# Common test fixtures
@pytest.fixture
def template_bytes() -> bytes:
    """Five-page A4 template."""
    return create_test_pdf(5)


@pytest.fixture
def template_doc(template_bytes):
    """Open five-page template document."""
    doc = fitz.open(stream=template_bytes, filetype="pdf")
    yield doc
    doc.close()


@pytest.fixture
def template_path(tmp_path: Path, template_bytes: bytes) -> Path:
    """Five-page template written to disk."""
    path = tmp_path / "template.pdf"
    path.write_bytes(template_bytes)
    return path


@pytest.fixture
def write_table(tmp_path: Path):
    """Factory writing a semicolon table to disk."""
    def _write(text: str, name: str = "table.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
