from __future__ import annotations

import csv
import io

import pytest
from fakes import make_employee, make_record

from wage_dashboard.core.exceptions import ValidationError
from wage_dashboard.reports.aggregation import fleet_totals, summarize_employees
from wage_dashboard.reports.exporters import CsvReportExporter, PdfReportExporter, ReportExporterFactory
from wage_dashboard.reports.model import ReportData


def _report() -> ReportData:
    employees = [make_employee("1", name="రాజేష్ కుమార్", code="EMP001"), make_employee("2", name="Sita", code="EMP002")]
    records = [
        make_record("1", "1", "2024-09-06", 800, 150),
        make_record("2", "1", "2024-09-07", "900.50", 200),
        make_record("3", "2", "2024-09-06", 750, 100),
    ]
    summaries = summarize_employees(employees, records)
    return ReportData(
        start_date="2024-09-01",
        end_date="2024-09-30",
        employee_filter="all",
        summaries=summaries,
        records_by_employee={},
        totals=fleet_totals(summaries),
    )


def test_csv_export_numbers_match_aggregation():
    exported = CsvReportExporter().export(_report())

    assert exported.filename == "wage-report-2024-09-01-to-2024-09-30.csv"
    assert exported.mimetype == "text/csv"
    text = exported.content.decode("utf-8-sig")
    lines = text.splitlines()
    assert lines[0] == "# Period: 2024-09-01 to 2024-09-30"
    rows = list(csv.DictReader(io.StringIO("\n".join(lines[1:]))))
    assert rows[0]["employee_name"] == "రాజేష్ కుమార్"
    assert rows[0]["total_macharlu"] == "1700.50"
    assert rows[0]["net_balance"] == "1350.50"
    assert rows[-1]["employee_name"] == "TOTAL"
    assert rows[-1]["total_macharlu"] == "2450.50"
    assert rows[-1]["total_karchulu"] == "450.00"
    assert rows[-1]["records_count"] == "3"


def test_pdf_export_produces_pdf_document():
    exported = PdfReportExporter().export(_report())

    assert exported.filename == "wage-report-2024-09-01-to-2024-09-30.pdf"
    assert exported.mimetype == "application/pdf"
    assert exported.content.startswith(b"%PDF")


def test_pdf_export_with_missing_font_falls_back():
    exported = PdfReportExporter(font_path="/nonexistent/font.ttf").export(_report())

    assert exported.content.startswith(b"%PDF")


def test_factory_picks_exporter_by_format():
    factory = ReportExporterFactory()

    assert isinstance(factory.for_format("pdf"), PdfReportExporter)
    assert isinstance(factory.for_format("CSV"), CsvReportExporter)
    with pytest.raises(ValidationError):
        factory.for_format("docx")
