from __future__ import annotations

from typing import Optional

from ...core.enums import ExportFormat
from ...core.exceptions import ValidationError
from .base import ExportedReport, ReportExporter
from .csv_exporter import CsvReportExporter
from .pdf_exporter import PdfReportExporter


class ReportExporterFactory:
    """Pick an exporter by format name ("pdf" / "csv")."""

    def __init__(self, *, pdf_font_path: Optional[str] = None):
        self._exporters: dict[ExportFormat, ReportExporter] = {
            ExportFormat.PDF: PdfReportExporter(font_path=pdf_font_path),
            ExportFormat.CSV: CsvReportExporter(),
        }

    def for_format(self, fmt: str) -> ReportExporter:
        try:
            return self._exporters[ExportFormat(str(fmt).lower())]
        except ValueError:
            raise ValidationError(f"Unsupported export format: {fmt}")


__all__ = [
    "CsvReportExporter",
    "ExportedReport",
    "PdfReportExporter",
    "ReportExporter",
    "ReportExporterFactory",
]
