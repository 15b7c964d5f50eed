from __future__ import annotations

import csv
import io

from ...common.money import to_money
from ..model import ReportData
from .base import ReportExporter

FIELDNAMES = [
    "employee_name",
    "employee_code",
    "records_count",
    "total_macharlu",
    "total_karchulu",
    "net_balance",
]


class CsvReportExporter(ReportExporter):
    """One row per employee followed by a TOTAL row."""

    extension = "csv"
    mimetype = "text/csv"

    def render(self, report: ReportData) -> bytes:
        out = io.StringIO()
        out.write(f"# Period: {report.start_date} to {report.end_date}\n")
        writer = csv.DictWriter(out, fieldnames=FIELDNAMES)
        writer.writeheader()
        for s in report.summaries:
            writer.writerow(
                {
                    "employee_name": s.employee.name,
                    "employee_code": s.employee.employee_id,
                    "records_count": s.records_count,
                    "total_macharlu": f"{to_money(s.total_macharlu)}",
                    "total_karchulu": f"{to_money(s.total_karchulu)}",
                    "net_balance": f"{to_money(s.net_balance)}",
                }
            )
        writer.writerow(
            {
                "employee_name": "TOTAL",
                "employee_code": "",
                "records_count": report.totals.records_count,
                "total_macharlu": f"{to_money(report.totals.total_macharlu)}",
                "total_karchulu": f"{to_money(report.totals.total_karchulu)}",
                "net_balance": f"{to_money(report.totals.net_balance)}",
            }
        )
        # utf-8-sig keeps Telugu names readable when the file is opened in Excel.
        return out.getvalue().encode("utf-8-sig")
