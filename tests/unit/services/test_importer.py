"""Tests for the workbook importer."""

from __future__ import annotations

import pytest

from simt.core.exceptions import ImportValidationError
from simt.models.employee import Employee, SuccessionStatus
from simt.services.importer import (
    DEFAULT_SCORE,
    EDUCATION_SHEET,
    EMPLOYEE_SHEET,
    import_into,
    import_workbook,
    template_sheets,
)
from simt.persistence.repository import TalentRepository
from tests.fakes import TODAY, MemoryKeyValueStore


def _row(**overrides):
    row = {"NIP": "198501152010011001", "Nama Lengkap": "Ahmad Subarjo", "Skor Kinerja": 92, "Skor Potensi": 95}
    row.update(overrides)
    return row


class TestImportWorkbook:
    def test_template_imports_cleanly(self):
        result = import_workbook([], template_sheets(), now=TODAY)
        assert result.added == 2
        assert result.updated == 0
        assert result.warnings == []
        ahmad = next(e for e in result.employees if e.name == "Ahmad Subarjo")
        assert ahmad.id == ahmad.nip == "198501152010011001"
        assert ahmad.succession_status == SuccessionStatus.READY_NOW
        assert ahmad.skills == ["Analisis Data", "Penyusunan Laporan"]
        assert len(ahmad.education_history) == 2
        assert len(ahmad.career_history) == 2
        assert len(ahmad.performance_history) == 2
        assert ahmad.performance_history[0].skp == "91.5"
        assert ahmad.performance_history[1].skp == "92"

    def test_latest_education_and_training_fill_profile(self):
        result = import_workbook([], template_sheets(), now=TODAY)
        ahmad = next(e for e in result.employees if e.name == "Ahmad Subarjo")
        assert ahmad.pendidikan == "S2"
        assert ahmad.jurusan == "Magister Administrasi Publik"
        assert ahmad.training_attended == "Pelatihan Kepemimpinan Administrator"

    def test_birth_date_parsed_from_nip(self):
        result = import_workbook([], template_sheets(), now=TODAY)
        siti = next(e for e in result.employees if e.name == "Siti Aminah")
        assert siti.birth_date is not None
        assert (siti.birth_date.year, siti.birth_date.month, siti.birth_date.day) == (1990, 3, 20)

    def test_missing_main_sheet_raises(self):
        with pytest.raises(ImportValidationError):
            import_workbook([], {EDUCATION_SHEET: []})

    def test_rows_without_nip_or_name_are_skipped(self):
        sheets = {EMPLOYEE_SHEET: [_row(), _row(NIP=""), _row(**{"Nama Lengkap": None})]}
        result = import_workbook([], sheets, now=TODAY)
        assert result.added == 1
        assert result.warnings == [
            'Baris 3 di sheet "Data Pegawai" diabaikan karena NIP atau Nama Lengkap kosong.',
            'Baris 4 di sheet "Data Pegawai" diabaikan karena NIP atau Nama Lengkap kosong.',
        ]

    def test_existing_nip_is_updated_and_history_replaced(self):
        existing = Employee(
            id="keep-me", nip="198501152010011001", name="Ahmad", performance=50,
            education_history=[{"jenjang": "SMA"}],
        )
        result = import_workbook([existing], {EMPLOYEE_SHEET: [_row()]}, now=TODAY)
        assert result.updated == 1
        assert result.added == 0
        (employee,) = result.employees
        assert employee.id == "keep-me"
        assert employee.performance == 92
        assert employee.education_history == []

    def test_existing_records_are_not_mutated(self):
        existing = Employee(nip="198501152010011001", name="Ahmad", performance=50)
        import_workbook([existing], template_sheets(), now=TODAY)
        assert existing.performance == 50
        assert existing.education_history == []

    def test_unmatched_employees_are_kept(self):
        other = Employee(nip="197001011995031001", name="Lain")
        result = import_workbook([other], {EMPLOYEE_SHEET: [_row()]}, now=TODAY)
        assert {e.name for e in result.employees} == {"Lain", "Ahmad Subarjo"}

    @pytest.mark.parametrize("value, expected", [
        (None, DEFAULT_SCORE), ("", DEFAULT_SCORE), ("abc", DEFAULT_SCORE), (0, DEFAULT_SCORE),
        (88.7, 88), ("91", 91), (250, 100), (-3, 1), (float("nan"), DEFAULT_SCORE),
    ])
    def test_score_parsing(self, value, expected):
        result = import_workbook([], {EMPLOYEE_SHEET: [_row(**{"Skor Kinerja": value})]}, now=TODAY)
        assert result.employees[0].performance == expected

    def test_blank_eselon_defaults_to_staf(self):
        result = import_workbook([], {EMPLOYEE_SHEET: [_row(Eselon="")]}, now=TODAY)
        assert result.employees[0].eselon == "Staf"

    def test_history_for_unknown_nip_is_ignored(self):
        sheets = {
            EMPLOYEE_SHEET: [_row()],
            EDUCATION_SHEET: [{"NIP": "000", "Jenjang": "S1", "Tahun Lulus": 2010}],
        }
        result = import_workbook([], sheets, now=TODAY)
        assert result.employees[0].education_history == []


class TestImportInto:
    def test_merges_into_stored_employees(self):
        repo = TalentRepository(MemoryKeyValueStore())
        repo.upsert_employee(Employee(id="other", nip="197001011995031001", name="Lain"), now=TODAY)
        result = import_into(repo, template_sheets(), now=TODAY)
        assert result.added == 2
        assert len(repo.load_employees()) == 3

    def test_invalid_workbook_leaves_store_untouched(self):
        repo = TalentRepository(MemoryKeyValueStore())
        with pytest.raises(ImportValidationError):
            import_into(repo, {EDUCATION_SHEET: []}, now=TODAY)
        assert repo.load_employees() == []
