"""NarrativeService: AI-written job descriptions, IDPs and talent-pool reports.

Prompts carry the structured classification output (box, category,
recommendation, per-box counts); the provider does the writing. Provider
failures on the text operations degrade to a short Indonesian error block
instead of propagating, mirroring the dashboard's behaviour.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from simt.core.config import AppSettings
from simt.core.exceptions import ModelProviderError, NarrativeError
from simt.core.protocols import IModelProvider
from simt.models.employee import Employee, EmployeeDraft
from simt.models.talent import BoxGroup
from simt.talent.nine_box import AT_RISK_BOXES, CORE_BOXES, TOP_TALENT_BOXES, classify_employee
from simt.talent.scaling import performance_label, potential_label
from simt.talent.summary import talent_pool_summary

logger = logging.getLogger(__name__)

JOB_DESCRIPTION_FAILURE = "Gagal menghasilkan konten: {error}"
PLAN_FAILURE = (
    "<h3>Gagal Menghasilkan Rencana</h3>"
    "<p>Terjadi kesalahan saat berkomunikasi dengan AI: {error}</p>"
)
ANALYSIS_FAILURE = (
    "<h3>Gagal Menghasilkan Analisis</h3>"
    "<p>Terjadi kesalahan saat berkomunikasi dengan AI: {error}</p>"
)


def _describe_group(group: BoxGroup, with_names: bool) -> str:
    if group.count == 0:
        return f"Kotak {group.box_number}: Tidak ada pegawai."
    line = f"Kotak {group.box_number} ({group.category}): {group.count} pegawai."
    if with_names:
        names = ", ".join(f"{m.name} ({m.jabatan})" for m in group.members)
        line += f" Mereka adalah: {names}."
    return line


def describe_talent_pool(employees: Sequence[Employee]) -> dict[str, str]:
    """Per-group text blocks: top talent and at-risk list names, core lists counts only."""
    groups = talent_pool_summary(employees)
    return {
        "top": "\n".join(_describe_group(groups[n], True) for n in TOP_TALENT_BOXES),
        "core": "\n".join(_describe_group(groups[n], False) for n in CORE_BOXES),
        "at_risk": "\n".join(_describe_group(groups[n], True) for n in AT_RISK_BOXES),
    }


class NarrativeService:
    """Builds prompts from classification results and calls the model provider."""

    def __init__(self, model: IModelProvider, settings: AppSettings | None = None) -> None:
        self._model = model
        self._settings = settings or AppSettings()

    def _system(self, persona: str) -> dict[str, str]:
        return {
            "role": "system",
            "content": f"{persona} di lingkungan {self._settings.organisation}. Jawab dalam Bahasa Indonesia formal.",
        }

    def job_description(self, title: str, unit_kerja: str) -> str:
        messages = [
            self._system("Anda adalah analis jabatan"),
            {"role": "user", "content": (
                f'Buat uraian jabatan untuk jabatan "{title}" di unit kerja (SKPD) "{unit_kerja}". '
                "Sertakan Ikhtisar Jabatan, Tugas Pokok, dan Kualifikasi Jabatan."
            )},
        ]
        try:
            return self._model.chat(messages, temperature=self._settings.llm.job_description_temperature)
        except ModelProviderError as exc:
            logger.error("Job description generation failed for %r: %s", title, exc)
            return JOB_DESCRIPTION_FAILURE.format(error=exc)

    def development_plan(self, employee: Employee) -> str:
        info = classify_employee(employee)
        competency = employee.competency if employee.competency is not None else "Belum dinilai"
        profile = "\n".join((
            f"- Nama: {employee.name}",
            f"- NIP: {employee.nip}",
            f"- Jabatan Saat Ini: {employee.jabatan}",
            f"- Pangkat/Golongan: {employee.pangkat_golongan}",
            f"- Pendidikan: {employee.pendidikan} - {employee.jurusan}",
            f"- Eselon: {employee.eselon}",
            f"- SKPD: {employee.unit_kerja}",
            f"- Kinerja: {performance_label(employee.performance)} (Skor: {employee.performance}/100)",
            f"- Potensi: {potential_label(employee.potential)} (Skor: {employee.potential}/100)",
            f"- Kompetensi: {competency}/100",
            f"- Keterampilan: {', '.join(employee.skills) or 'Belum terdata'}",
            f"- Jabatan Lowong/Kritikal Target: {employee.critical_position or 'Belum terdata'}",
        ))
        messages = [
            self._system("Anda adalah Asesor SDM Aparatur Ahli senior"),
            {"role": "user", "content": (
                f"Data Pegawai:\n{profile}\n\n"
                f"Pegawai ini berada di Kotak {info.box_number} ({info.category}) pada 9-Box Matrix. "
                f'Rekomendasi umum: "{info.recommendation}"\n\n'
                "Susun Rencana Pengembangan Individu (IDP) dalam HTML dengan bagian: "
                "Ringkasan Profil & Arah Pengembangan, Fokus Pengembangan, "
                "Target & Prioritas Jangka Pendek (6 Bulan)."
            )},
        ]
        try:
            return self._model.chat(messages, temperature=self._settings.llm.development_plan_temperature)
        except ModelProviderError as exc:
            logger.error("Development plan generation failed for employee %s: %s", employee.id, exc)
            return PLAN_FAILURE.format(error=exc)

    def talent_pool_analysis(self, employees: Sequence[Employee]) -> str:
        blocks = describe_talent_pool(employees)
        messages = [
            self._system("Anda adalah Kepala BKPSDM"),
            {"role": "user", "content": (
                "Data Ringkas Pegawai ASN berdasarkan Kotak 9-Box:\n\n"
                f"KELOMPOK TALENTA UNGGULAN (CALON KRS):\n{blocks['top']}\n\n"
                f"KELOMPOK TULANG PUNGGUNG ORGANISASI:\n{blocks['core']}\n\n"
                f"KELOMPOK BERISIKO & BUTUH INTERVENSI:\n{blocks['at_risk']}\n\n"
                "Susun Laporan Analisis Talent Pool dalam HTML: Ringkasan Eksekutif, "
                "Identifikasi Kelompok Rencana Suksesi, dan Rekomendasi Strategis."
            )},
        ]
        try:
            return self._model.chat(messages, temperature=self._settings.llm.talent_pool_temperature)
        except ModelProviderError as exc:
            logger.error("Talent pool analysis failed for %d employees: %s", len(employees), exc)
            return ANALYSIS_FAILURE.format(error=exc)

    def draft_employee(self, jabatan: str, unit_kerja: str) -> EmployeeDraft:
        """Fictional but plausible profile for a new employee form."""
        messages = [
            self._system("Anda adalah Asisten Personalia AI"),
            {"role": "user", "content": (
                f"Buat profil ASN fiktif untuk posisi {jabatan} di {unit_kerja}. "
                "NIP 18 digit dengan format YYYYMMDD YYYYMM C NNN (C: 1 pria, 2 wanita)."
            )},
        ]
        try:
            return self._model.structured_output(
                messages, EmployeeDraft, temperature=self._settings.llm.employee_draft_temperature,
            )
        except ModelProviderError as exc:
            raise NarrativeError(f"Gagal menghasilkan data: {exc}") from exc
