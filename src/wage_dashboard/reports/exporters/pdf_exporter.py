from __future__ import annotations

import io
import logging
from typing import Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from ...common.money import format_money
from ..model import EmployeeSummary, ReportData
from .base import ReportExporter

logger = logging.getLogger(__name__)

CUSTOM_FONT_NAME = "WageReportFont"
BLOCK_HEIGHT = 28 * mm
LEFT = 20 * mm


class PdfReportExporter(ReportExporter):
    """Printable wage report: title, period, one block per employee, grand totals.

    Helvetica has no Telugu glyphs; pass `font_path` (a TTF such as Noto Sans Telugu)
    to render employee names in Telugu.
    """

    extension = "pdf"
    mimetype = "application/pdf"

    def __init__(self, *, font_path: Optional[str] = None, currency_symbol: str = "Rs."):
        self._font = "Helvetica"
        self._font_bold = "Helvetica-Bold"
        self._symbol = currency_symbol
        if font_path:
            try:
                pdfmetrics.registerFont(TTFont(CUSTOM_FONT_NAME, font_path))
                self._font = self._font_bold = CUSTOM_FONT_NAME
            except Exception:
                logger.exception("Could not register PDF font %s, falling back to Helvetica", font_path)

    def _money(self, value) -> str:
        return format_money(value, symbol=self._symbol)

    def render(self, report: ReportData) -> bytes:
        buf = io.BytesIO()
        c = canvas.Canvas(buf, pagesize=A4)
        c.setTitle(report.filename_stem)
        _, height = A4
        top = height - 25 * mm

        c.setFont(self._font_bold, 20)
        c.drawString(LEFT, top, "Wage Report")
        c.setFont(self._font, 12)
        c.drawString(LEFT, top - 12 * mm, f"Period: {report.start_date} to {report.end_date}")

        y = top - 28 * mm
        for summary in report.summaries:
            if y - BLOCK_HEIGHT < 20 * mm:
                c.showPage()
                y = height - 25 * mm
            self._draw_summary(c, summary, y)
            y -= BLOCK_HEIGHT

        if y - BLOCK_HEIGHT < 20 * mm:
            c.showPage()
            y = height - 25 * mm
        c.setStrokeColor(colors.grey)
        c.line(LEFT, y + 5 * mm, LEFT + 170 * mm, y + 5 * mm)
        c.setFont(self._font_bold, 12)
        c.drawString(LEFT, y, f"Total ({report.totals.employees_count} employees, {report.totals.records_count} records)")
        c.setFont(self._font, 12)
        c.drawString(LEFT, y - 6 * mm, f"Earnings: {self._money(report.totals.total_macharlu)}")
        c.drawString(LEFT, y - 12 * mm, f"Expenses: {self._money(report.totals.total_karchulu)}")
        c.drawString(LEFT, y - 18 * mm, f"Net: {self._money(report.totals.net_balance)}")

        c.showPage()
        c.save()
        return buf.getvalue()

    def _draw_summary(self, c: canvas.Canvas, summary: EmployeeSummary, y: float) -> None:
        c.setFont(self._font_bold, 12)
        c.drawString(LEFT, y, f"{summary.employee.name} ({summary.employee.employee_id})")
        c.setFont(self._font, 11)
        c.drawString(LEFT, y - 6 * mm, f"Earnings: {self._money(summary.total_macharlu)}")
        c.drawString(LEFT, y - 12 * mm, f"Expenses: {self._money(summary.total_karchulu)}")
        c.drawString(LEFT, y - 18 * mm, f"Net: {self._money(summary.net_balance)}")
