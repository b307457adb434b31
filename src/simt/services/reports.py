"""Talent recap report ("Rekapitulasi Data Talenta ASN") rows and CSV export."""

from __future__ import annotations

import csv
import io
import logging
from collections.abc import Sequence
from datetime import date

from simt.core.exceptions import EmptyReportError, RecordNotFoundError
from simt.core.protocols import IFileStore
from simt.core.types import JsonDict
from simt.models.employee import Employee
from simt.talent.nine_box import classify_employee

logger = logging.getLogger(__name__)

REPORT_HEADERS = (
    "No", "Nama", "NIP", "Jabatan", "Unit Kerja", "Kinerja", "Potensi",
    "Kompetensi", "Kotak", "Kategori Kotak", "Status Suksesi",
)
REPORT_PREFIX = "reports/"
REPORT_TITLE = "Rekapitulasi Data Talenta ASN - Kabupaten Aceh Barat"

MONTHS_ID = (
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
)


def format_date_id(value: date) -> str:
    """Long Indonesian date, e.g. ``19 Oktober 2026``."""
    return f"{value.day} {MONTHS_ID[value.month - 1]} {value.year}"


def report_rows(employees: Sequence[Employee]) -> list[JsonDict]:
    rows = []
    for number, emp in enumerate(employees, start=1):
        info = classify_employee(emp)
        rows.append(dict(zip(REPORT_HEADERS, (
            number, emp.name, emp.nip, emp.jabatan, emp.unit_kerja,
            emp.performance, emp.potential,
            emp.competency if emp.competency is not None else "N/A",
            info.box_number, info.category, str(emp.succession_status),
        ))))
    return rows


def render_csv(rows: Sequence[JsonDict], today: date) -> bytes:
    """Title and report-date lines, then the header row and one row per employee."""
    buffer = io.StringIO()
    preamble = csv.writer(buffer)
    preamble.writerow([REPORT_TITLE])
    preamble.writerow([f"Tanggal Laporan: {format_date_id(today)}"])
    writer = csv.DictWriter(buffer, fieldnames=REPORT_HEADERS)
    writer.writeheader()
    writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


class ReportExporter:
    """Writes the recap report to the configured file store."""

    def __init__(self, file_store: IFileStore) -> None:
        self._files = file_store

    def export(self, employees: Sequence[Employee], today: date | None = None) -> str:
        """Write the CSV report and return its path in the file store."""
        if not employees:
            raise EmptyReportError("Tidak ada data talenta untuk diekspor.")
        today = today or date.today()
        path = f"{REPORT_PREFIX}rekapitulasi-talenta-asn-{today.isoformat()}.csv"
        self._files.write(path, render_csv(report_rows(employees), today), content_type="text/csv")
        logger.info("Exported %d employees to %s", len(employees), path)
        return path

    def list_reports(self) -> list[str]:
        """Report file names, oldest first."""
        return sorted(path.removeprefix(REPORT_PREFIX) for path in self._files.list_files(REPORT_PREFIX))

    def read_report(self, name: str) -> bytes:
        if name not in self.list_reports():
            raise RecordNotFoundError("Report", name)
        return self._files.read(REPORT_PREFIX + name)
