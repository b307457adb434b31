"""Spreadsheet import: merges already-parsed workbook rows into the talent pool.

The workbook arrives as ``{sheet name: [row dict, ...]}`` with the column
headers of the published import template. Employees are matched by NIP.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, Field

from simt.core.exceptions import ImportValidationError
from simt.core.types import SheetRow
from simt.models.employee import (
    CareerHistory,
    DevelopmentHistory,
    EducationHistory,
    Employee,
    PerformanceHistory,
)
from simt.persistence.repository import TalentRepository
from simt.talent.succession import refresh_derived

logger = logging.getLogger(__name__)

EMPLOYEE_SHEET = "Data Pegawai"
EDUCATION_SHEET = "Riwayat Pendidikan"
CAREER_SHEET = "Riwayat Karir"
PERFORMANCE_SHEET = "Riwayat Kinerja"
DEVELOPMENT_SHEET = "Riwayat Pengembangan"

DEFAULT_SCORE = 75
AVATAR_URL = "https://ui-avatars.com/api/?name={name}&background=c7d2fe&color=3730a3&font-size=0.5"


class ImportResult(BaseModel):
    employees: list[Employee] = Field(default_factory=list)
    added: int = 0
    updated: int = 0
    warnings: list[str] = Field(default_factory=list)


def _cell(row: SheetRow, header: str) -> str:
    value = row.get(header)
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def _score(row: SheetRow, header: str) -> int:
    """Integer score; blank, unparsable or zero cells fall back to 75."""
    try:
        value = int(float(_cell(row, header)))
    except (ValueError, OverflowError):
        return DEFAULT_SCORE
    if value == 0:
        return DEFAULT_SCORE
    return max(1, min(100, value))


def _year(value: str) -> int:
    try:
        return int(float(value))
    except (ValueError, OverflowError):
        return 0


def _employee_fields(row: SheetRow) -> dict[str, Any]:
    skills = row.get("Kompetensi Teknis (pisahkan koma)")
    return {
        "name": _cell(row, "Nama Lengkap"),
        "jabatan": _cell(row, "Jabatan"),
        "pangkat_golongan": _cell(row, "Pangkat/Golongan"),
        "unit_kerja": _cell(row, "Unit Kerja (SKPD)"),
        "email": _cell(row, "Email") or None,
        "phone": _cell(row, "Telepon"),
        "eselon": _cell(row, "Eselon") or "Staf",
        "performance": _score(row, "Skor Kinerja"),
        "potential": _score(row, "Skor Potensi"),
        "competency": _score(row, "Skor Kompetensi"),
        "skills": [s.strip() for s in skills.split(",") if s.strip()] if isinstance(skills, str) else [],
        "critical_position": _cell(row, "Jabatan Target Suksesi"),
    }


_HISTORY_FACTORIES: dict[str, tuple[str, Callable[[SheetRow], BaseModel]]] = {
    EDUCATION_SHEET: ("education_history", lambda row: EducationHistory(
        jenjang=_cell(row, "Jenjang"), jurusan=_cell(row, "Jurusan"),
        institusi=_cell(row, "Institusi"), tahun_lulus=_cell(row, "Tahun Lulus"),
    )),
    CAREER_SHEET: ("career_history", lambda row: CareerHistory(
        jabatan=_cell(row, "Jabatan"), unit_kerja=_cell(row, "Unit Kerja"), tmt=_cell(row, "TMT"),
    )),
    PERFORMANCE_SHEET: ("performance_history", lambda row: PerformanceHistory(
        tahun=_cell(row, "Tahun"), skp=_cell(row, "Nilai SKP"), predikat=_cell(row, "Predikat"),
    )),
    DEVELOPMENT_SHEET: ("development_history", lambda row: DevelopmentHistory(
        nama_pelatihan=_cell(row, "Nama Pelatihan"), penyelenggara=_cell(row, "Penyelenggara"),
        tahun=_cell(row, "Tahun"),
        jenis="Non-Klasikal" if _cell(row, "Jenis") == "Non-Klasikal" else "Klasikal",
    )),
}


def _apply_latest_history(employee: Employee) -> None:
    education = sorted(
        (e for e in employee.education_history if e.tahun_lulus),
        key=lambda e: _year(e.tahun_lulus), reverse=True,
    )
    if education:
        employee.pendidikan = education[0].jenjang
        employee.jurusan = education[0].jurusan
    development = sorted(
        (d for d in employee.development_history if d.tahun),
        key=lambda d: _year(d.tahun), reverse=True,
    )
    if development:
        employee.training_attended = development[0].nama_pelatihan


def import_workbook(
    existing: Iterable[Employee],
    sheets: Mapping[str, Sequence[SheetRow]],
    now: Optional[date] = None,
) -> ImportResult:
    """Merge parsed workbook sheets into ``existing`` employees.

    Rows without NIP or name are skipped with a warning. Matched employees
    have their history replaced by the imported sheets. Birth date and
    succession status are recomputed for every imported employee.
    """
    if EMPLOYEE_SHEET not in sheets:
        raise ImportValidationError(EMPLOYEE_SHEET, "main sheet not found; use the import template")
    if now is None:
        now = date.today()

    by_nip: dict[str, Employee] = {emp.nip: emp.model_copy(deep=True) for emp in existing}
    result = ImportResult()

    for index, row in enumerate(sheets[EMPLOYEE_SHEET]):
        nip = _cell(row, "NIP")
        name = _cell(row, "Nama Lengkap")
        if not nip or not name:
            result.warnings.append(
                f'Baris {index + 2} di sheet "{EMPLOYEE_SHEET}" diabaikan karena NIP atau Nama Lengkap kosong.'
            )
            continue

        fields = _employee_fields(row)
        current = by_nip.get(nip)
        if current is not None:
            employee = current.model_copy(update={
                **fields,
                "education_history": [],
                "performance_history": [],
                "career_history": [],
                "development_history": [],
            })
            result.updated += 1
        else:
            employee = Employee(
                id=nip, nip=nip,
                avatar=AVATAR_URL.format(name=name.replace(" ", "+")),
                **fields,
            )
            result.added += 1
        by_nip[nip] = refresh_derived(employee, now)

    for sheet, (attribute, factory) in _HISTORY_FACTORIES.items():
        for row in sheets.get(sheet, ()):
            employee = by_nip.get(_cell(row, "NIP"))
            if employee is not None:
                getattr(employee, attribute).append(factory(row))

    for employee in by_nip.values():
        _apply_latest_history(employee)

    result.employees = list(by_nip.values())
    logger.info(
        "Imported workbook: %d added, %d updated, %d rows skipped",
        result.added, result.updated, len(result.warnings),
    )
    return result


def import_into(
    repository: TalentRepository,
    sheets: Mapping[str, Sequence[SheetRow]],
    now: Optional[date] = None,
) -> ImportResult:
    """Merge ``sheets`` into the stored employees as one atomic update."""
    results: list[ImportResult] = []

    def merge(existing: list[Employee]) -> list[Employee]:
        results.append(import_workbook(existing, sheets, now))
        return results[-1].employees

    repository.update_employees(merge)
    return results[-1]


def template_sheets() -> dict[str, list[SheetRow]]:
    """Sample rows of the import template, keyed by sheet name."""
    return {
        EMPLOYEE_SHEET: [
            {
                "NIP": "198501152010011001", "Nama Lengkap": "Ahmad Subarjo",
                "Jabatan": "Analis Kebijakan Ahli Muda", "Pangkat/Golongan": "Penata, III/c",
                "Unit Kerja (SKPD)": "BAPPEDA", "Eselon": "Fungsional Ahli Muda",
                "Email": "ahmad.s@example.com", "Telepon": "081234567890",
                "Skor Kinerja": 92, "Skor Potensi": 95, "Skor Kompetensi": 88,
                "Kompetensi Teknis (pisahkan koma)": "Analisis Data, Penyusunan Laporan",
                "Jabatan Target Suksesi": "Kepala Bidang Perencanaan",
            },
            {
                "NIP": "199003202015022002", "Nama Lengkap": "Siti Aminah",
                "Jabatan": "Pranata Komputer Ahli Pertama", "Pangkat/Golongan": "Penata Muda Tk. I, III/b",
                "Unit Kerja (SKPD)": "Dinas Komunikasi dan Informatika", "Eselon": "Fungsional Ahli Pertama",
                "Email": "siti.a@example.com", "Telepon": "081298765432",
                "Skor Kinerja": 85, "Skor Potensi": 91, "Skor Kompetensi": 90,
                "Kompetensi Teknis (pisahkan koma)": "Jaringan Komputer, Keamanan Siber, PHP",
                "Jabatan Target Suksesi": "Kepala Seksi Infrastruktur Digital",
            },
        ],
        EDUCATION_SHEET: [
            {"NIP": "198501152010011001", "Jenjang": "S1", "Jurusan": "Ilmu Administrasi Negara",
             "Institusi": "Universitas Gadjah Mada", "Tahun Lulus": 2008},
            {"NIP": "198501152010011001", "Jenjang": "S2", "Jurusan": "Magister Administrasi Publik",
             "Institusi": "Universitas Indonesia", "Tahun Lulus": 2014},
            {"NIP": "199003202015022002", "Jenjang": "S1", "Jurusan": "Teknik Informatika",
             "Institusi": "Institut Teknologi Bandung", "Tahun Lulus": 2012},
        ],
        CAREER_SHEET: [
            {"NIP": "198501152010011001", "Jabatan": "Staf Pelaksana", "Unit Kerja": "BAPPEDA", "TMT": "2010-01-01"},
            {"NIP": "198501152010011001", "Jabatan": "Analis Kebijakan Ahli Muda", "Unit Kerja": "BAPPEDA",
             "TMT": "2016-04-01"},
        ],
        PERFORMANCE_SHEET: [
            {"NIP": "198501152010011001", "Tahun": 2022, "Nilai SKP": 91.5, "Predikat": "Sangat Baik"},
            {"NIP": "198501152010011001", "Tahun": 2023, "Nilai SKP": 92.0, "Predikat": "Sangat Baik"},
        ],
        DEVELOPMENT_SHEET: [
            {"NIP": "198501152010011001", "Nama Pelatihan": "Pelatihan Kepemimpinan Administrator",
             "Penyelenggara": "BPSDM Provinsi", "Tahun": 2021, "Jenis": "Klasikal"},
        ],
    }
