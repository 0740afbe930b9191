"""
Tests for the PDF report export
"""

from datetime import datetime
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core import load_registry
from reporting import ReportPDFGenerator, build_report, generate_pdf
from sources import SAMPLE_RECORDS


def _sample_document():
    return build_report(load_registry(SAMPLE_RECORDS).registry.snapshot())


class TestPDFExport:

    def test_generate_to_buffer(self):
        pdf_bytes = ReportPDFGenerator().generate_to_buffer(_sample_document())
        assert pdf_bytes.startswith(b"%PDF")
        assert len(pdf_bytes) > 1000

    def test_generate_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "reports" / "valuation.pdf"

        result = generate_pdf(_sample_document(), path)

        assert result.path == path
        assert result.condominiums_included == 4
        assert path.read_bytes().startswith(b"%PDF")

    def test_empty_report(self):
        generator = ReportPDFGenerator(generated_at=datetime(2026, 1, 1))
        pdf_bytes = generator.generate_to_buffer(build_report([]))
        assert pdf_bytes.startswith(b"%PDF")
