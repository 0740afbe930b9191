"""
Reporting module for the listing valuation engine.

Aggregates registry contents into report statistics and renders them as
text lines, printed and persisted verbatim, with an optional PDF export.

Usage:
    from reporting import build_report, emit_report

    document = build_report(registry.snapshot(), city="Budapest")
    emit_report(document, "outputRealEstate.txt")
"""

from .aggregator import (
    DEFAULT_REPORT_CITY,
    ReportAggregator,
    ReportDocument,
    ReportSummary,
    build_report,
)
from .writer import emit_report, write_report
from .pdf_generator import PDFReportSuccess, ReportPDFGenerator, generate_pdf

__all__ = [
    # Aggregation
    "DEFAULT_REPORT_CITY",
    "ReportAggregator",
    "ReportDocument",
    "ReportSummary",
    "build_report",
    # Text sinks
    "emit_report",
    "write_report",
    # PDF export
    "PDFReportSuccess",
    "ReportPDFGenerator",
    "generate_pdf",
]
