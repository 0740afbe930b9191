"""
FastAPI application exposing the listing valuation report.

Each request builds its own registry and diagnostics log; nothing is
shared between requests.
"""

import logging
import os
from typing import List, Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from core import DiagnosticsLog, load_registry
from core.loader import LoadResult
from reporting import DEFAULT_REPORT_CITY, ReportPDFGenerator, build_report
from sources import SampleListingSource

logger = logging.getLogger(__name__)

# =============================================================================
# Environment Configuration
# =============================================================================

IS_PRODUCTION = os.getenv("PRODUCTION", "").lower() == "true"

DEBUG_MODE = os.getenv("DEBUG", "false").lower() == "true" and not IS_PRODUCTION

VERSION = "0.1.0"


class ReportRequest(BaseModel):
    """Listing lines to value, in the '#'-delimited record format."""
    lines: List[str]
    city: str = DEFAULT_REPORT_CITY
    discount: Optional[int] = None


def _load(lines: List[str], discount: Optional[int]) -> LoadResult:
    result = load_registry(lines, diagnostics=DiagnosticsLog())
    if discount is not None:
        for prop in result.registry:
            prop.make_discount(discount, diagnostics=result.diagnostics)
    return result


def _report_payload(result: LoadResult, city: str) -> dict:
    document = build_report(result.registry.snapshot(), city=city, diagnostics=result.diagnostics)
    return {
        "lines": document.lines,
        "text": document.text(),
        "summary": document.summary.to_dict(),
        "load": result.to_dict(),
        "diagnostics": [d.to_dict() for d in result.diagnostics],
    }


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Real Estate Valuation",
        description="Values '#'-delimited real-estate listings and reports statistics",
        version=VERSION,
        docs_url=None if IS_PRODUCTION else "/docs",
        redoc_url=None if IS_PRODUCTION else "/redoc",
        openapi_url=None if IS_PRODUCTION else "/openapi.json",
        debug=DEBUG_MODE,
    )

    # Healthchecks: no dependencies, no IO
    @app.get("/", include_in_schema=False)
    def root():
        return {"status": "ok"}

    @app.get("/health", include_in_schema=False)
    def health():
        return {"status": "healthy"}

    @app.post("/api/report")
    def generate_report_endpoint(request_data: ReportRequest):
        """
        Value the posted listing lines and return the report.

        Malformed lines are skipped and listed under "diagnostics";
        the request itself never fails because of its data.
        """
        result = _load(request_data.lines, request_data.discount)
        logger.info(
            "Report requested for %d lines, %d properties stored",
            len(request_data.lines),
            len(result.registry),
        )
        return JSONResponse(_report_payload(result, request_data.city))

    @app.get("/api/report/sample")
    def sample_report(city: str = DEFAULT_REPORT_CITY):
        """Report on the built-in sample listings."""
        source = SampleListingSource()
        result = _load(source.read_lines(), None)
        result.source_name = source.name
        return JSONResponse(_report_payload(result, city))

    @app.post("/api/report/pdf")
    def generate_pdf_endpoint(request_data: ReportRequest):
        """Value the posted listing lines and return the report as PDF."""
        result = _load(request_data.lines, request_data.discount)
        document = build_report(
            result.registry.snapshot(),
            city=request_data.city,
            diagnostics=result.diagnostics,
        )
        pdf_bytes = ReportPDFGenerator().generate_to_buffer(document)
        return Response(
            content=pdf_bytes,
            media_type="application/pdf",
            headers={"Content-Disposition": 'attachment; filename="valuation-report.pdf"'},
        )

    @app.get("/api/health")
    def api_health():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": VERSION,
            "environment": "production" if IS_PRODUCTION else "development",
        }

    return app


# Create app instance for uvicorn
app = create_app()
