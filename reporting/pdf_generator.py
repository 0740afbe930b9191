"""
Listing Valuation Report - PDF Export

Renders the same report as the text sinks into a one-document PDF.
Uses ReportLab for deterministic PDF generation.

Output Structure:
1. Title and generation date
2. Summary statistics (the report's statistic lines, verbatim)
3. Condominiums at or below the average total price (table)
"""

from dataclasses import dataclass
from datetime import datetime
from io import BytesIO
from pathlib import Path
from typing import Optional, Union
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_LEFT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from utils.formatting import format_decimal, format_price

from .aggregator import CONDOMINIUM_HEADER, ReportDocument


@dataclass
class PDFReportSuccess:
    """Returned when PDF generation succeeds."""
    path: Path
    condominiums_included: int


# =============================================================================
# Color Palette - print-friendly
# =============================================================================

class Palette:
    """White background with charcoal text for readability."""
    BLACK = colors.Color(0.1, 0.1, 0.1)
    CHARCOAL = colors.Color(0.2, 0.2, 0.22)
    SLATE = colors.Color(0.35, 0.38, 0.42)
    GRAY = colors.Color(0.5, 0.5, 0.5)
    LIGHT_GRAY = colors.Color(0.85, 0.85, 0.85)
    PALE_GRAY = colors.Color(0.95, 0.95, 0.95)
    WHITE = colors.white


def get_report_styles():
    """Paragraph styles for the valuation report."""
    styles = getSampleStyleSheet()

    styles.add(ParagraphStyle(
        name='ReportTitle',
        parent=styles['Normal'],
        fontSize=18,
        leading=23,
        textColor=Palette.CHARCOAL,
        alignment=TA_LEFT,
        fontName='Helvetica-Bold',
        spaceAfter=4*mm,
    ))

    styles.add(ParagraphStyle(
        name='ReportSubtitle',
        parent=styles['Normal'],
        fontSize=9,
        leading=12,
        textColor=Palette.GRAY,
        fontName='Helvetica',
        spaceAfter=8*mm,
    ))

    styles.add(ParagraphStyle(
        name='SectionTitle',
        parent=styles['Normal'],
        fontSize=12,
        leading=16,
        textColor=Palette.CHARCOAL,
        fontName='Helvetica-Bold',
        spaceBefore=12,
        spaceAfter=8,
    ))

    styles.add(ParagraphStyle(
        name='StatLine',
        parent=styles['Normal'],
        fontSize=9.5,
        leading=14,
        textColor=Palette.CHARCOAL,
        fontName='Helvetica',
        spaceAfter=3,
    ))

    return styles


class ReportPDFGenerator:
    """
    Generates valuation report PDFs from a rendered ReportDocument.

    The statistic lines are taken from the document as rendered, so the
    PDF never disagrees with the text report.
    """

    PAGE_WIDTH, PAGE_HEIGHT = A4
    MARGIN_LEFT = 18*mm
    MARGIN_RIGHT = 18*mm
    MARGIN_TOP = 18*mm
    MARGIN_BOTTOM = 22*mm

    TABLE_HEADERS = ["Kind", "City", "Area", "Rooms", "Price/sqm", "Total price"]

    def __init__(self, generated_at: Optional[datetime] = None):
        self.styles = get_report_styles()
        self.generated_at = generated_at or datetime.now()

    def generate(self, document: ReportDocument, path: Union[str, Path]) -> PDFReportSuccess:
        """Write the PDF to a path, creating parent directories."""
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(self.generate_to_buffer(document))
        return PDFReportSuccess(
            path=output_path,
            condominiums_included=len(document.summary.condominiums),
        )

    def generate_to_buffer(self, document: ReportDocument) -> bytes:
        """Generate PDF and return as bytes (for testing or streaming)."""
        buffer = BytesIO()
        self._build_document(document, buffer)
        return buffer.getvalue()

    def _build_document(self, document: ReportDocument, buffer: BytesIO):
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            leftMargin=self.MARGIN_LEFT,
            rightMargin=self.MARGIN_RIGHT,
            topMargin=self.MARGIN_TOP,
            bottomMargin=self.MARGIN_BOTTOM,
            title="Real Estate Valuation Report",
            subject="Listing statistics",
        )

        story = []
        story.extend(self._build_header(document))
        story.extend(self._build_statistics(document))
        story.extend(self._build_condominium_table(document))

        doc.build(story, onFirstPage=self._draw_footer, onLaterPages=self._draw_footer)

    def _draw_footer(self, canvas_obj: canvas.Canvas, doc):
        """Page number bottom right."""
        canvas_obj.saveState()
        canvas_obj.setFont('Helvetica', 7)
        canvas_obj.setFillColor(Palette.GRAY)
        canvas_obj.drawRightString(
            self.PAGE_WIDTH - self.MARGIN_RIGHT,
            self.MARGIN_BOTTOM - 10*mm,
            f"{doc.page}"
        )
        canvas_obj.restoreState()

    def _build_header(self, document: ReportDocument) -> list:
        summary = document.summary
        return [
            Paragraph("Real Estate Valuation Report", self.styles['ReportTitle']),
            Paragraph(
                escape(
                    f"Generated {self.generated_at.strftime('%d %B %Y')} - "
                    f"{summary.property_count} properties"
                ),
                self.styles['ReportSubtitle'],
            ),
        ]

    def _build_statistics(self, document: ReportDocument) -> list:
        elements = [Paragraph("Summary", self.styles['SectionTitle'])]

        # Everything above the blank separator line is a statistic
        for line in document.lines:
            if not line:
                break
            elements.append(Paragraph(escape(line), self.styles['StatLine']))

        return elements

    def _build_condominium_table(self, document: ReportDocument) -> list:
        condominiums = document.summary.condominiums
        elements = [Paragraph(escape(CONDOMINIUM_HEADER), self.styles['SectionTitle'])]

        if not condominiums:
            elements.append(Paragraph("None.", self.styles['StatLine']))
            return elements

        rows = [self.TABLE_HEADERS]
        for prop in condominiums:
            rows.append([
                "Panel" if prop.KIND == "PANEL" else "Real estate",
                prop.city,
                f"{prop.area_sqm} sqm",
                format_decimal(prop.number_of_rooms, 1),
                format_decimal(prop.price_per_sqm),
                format_price(prop.total_price()),
            ])

        elements.append(Spacer(1, 4*mm))

        col_widths = [25*mm, 35*mm, 22*mm, 18*mm, 30*mm, 44*mm]
        table = Table(rows, colWidths=col_widths)
        table.setStyle(TableStyle([
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('FONTNAME', (0, 1), (-1, -1), 'Helvetica'),
            ('FONTSIZE', (0, 0), (-1, -1), 8.5),
            ('BACKGROUND', (0, 0), (-1, 0), Palette.CHARCOAL),
            ('TEXTCOLOR', (0, 0), (-1, 0), Palette.WHITE),
            ('TEXTCOLOR', (0, 1), (-1, -1), Palette.CHARCOAL),
            ('ALIGN', (2, 0), (-1, -1), 'RIGHT'),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
            ('GRID', (0, 0), (-1, -1), 0.5, Palette.LIGHT_GRAY),
            ('TOPPADDING', (0, 0), (-1, -1), 2.5*mm),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 2.5*mm),
            ('ROWBACKGROUNDS', (0, 1), (-1, -1), [Palette.WHITE, Palette.PALE_GRAY]),
        ]))
        elements.append(table)
        return elements


# =============================================================================
# Convenience Function
# =============================================================================

def generate_pdf(document: ReportDocument, path: Union[str, Path]) -> PDFReportSuccess:
    """
    Export a rendered report as PDF.

    Example:
        from reporting import build_report, generate_pdf

        document = build_report(registry)
        result = generate_pdf(document, "reports/valuation.pdf")
        print(f"Report generated: {result.path}")
    """
    return ReportPDFGenerator().generate(document, path)
