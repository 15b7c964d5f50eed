from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..model import ReportData


@dataclass(frozen=True)
class ExportedReport:
    filename: str
    mimetype: str
    content: bytes


class ReportExporter(ABC):
    """Exporter interface (Strategy Pattern for report documents)."""

    extension: str = ""
    mimetype: str = "application/octet-stream"

    @abstractmethod
    def render(self, report: ReportData) -> bytes:
        raise NotImplementedError

    def export(self, report: ReportData) -> ExportedReport:
        return ExportedReport(
            filename=f"{report.filename_stem}.{self.extension}",
            mimetype=self.mimetype,
            content=self.render(report),
        )
