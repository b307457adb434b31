"""Employee record: the civil-servant (ASN) profile all talent rules operate on.

Scores are validated here; the classification engine itself never checks
ranges. ``birth_date`` and ``succession_status`` are derived fields and are
refreshed by ``simt.talent.succession.refresh_derived``.
"""

from __future__ import annotations

import uuid
from datetime import date
from enum import StrEnum
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator


class SuccessionStatus(StrEnum):
    READY_NOW = "Siap Sekarang"
    ONE_TO_TWO_YEARS = "1-2 Tahun"
    FUTURE_POTENTIAL = "Potensi Masa Depan"
    NOT_A_CANDIDATE = "Bukan Kandidat"


def _new_id() -> str:
    return uuid.uuid4().hex


class EducationHistory(BaseModel):
    id: str = Field(default_factory=_new_id)
    jenjang: str = ""
    jurusan: str = ""
    institusi: str = ""
    tahun_lulus: str = ""


class PerformanceHistory(BaseModel):
    id: str = Field(default_factory=_new_id)
    tahun: str = ""
    skp: str = ""
    predikat: str = ""


class CareerHistory(BaseModel):
    id: str = Field(default_factory=_new_id)
    jabatan: str = ""
    unit_kerja: str = ""
    tmt: str = ""  # Terhitung mulai tanggal


class DevelopmentHistory(BaseModel):
    id: str = Field(default_factory=_new_id)
    nama_pelatihan: str = ""
    penyelenggara: str = ""
    tahun: str = ""
    jenis: Literal["Klasikal", "Non-Klasikal"] = "Klasikal"


class Employee(BaseModel):
    """Single employee record in the talent pool."""

    # --- Identity ---
    id: str = Field(default_factory=_new_id)
    nip: str = ""
    name: str = ""

    # --- Position ---
    jabatan: str = ""
    pangkat_golongan: str = ""
    unit_kerja: str = ""
    eselon: str = "Staf"
    critical_position: str = ""  # Jabatan lowong/kritikal target

    # --- Profile ---
    pendidikan: str = ""
    jurusan: str = ""
    email: Optional[str] = None
    phone: str = ""
    training_attended: str = ""
    avatar: str = ""
    skills: list[str] = Field(default_factory=list)
    development_plan: str = ""

    # --- Scores (1-100) ---
    performance: int = Field(default=75, ge=1, le=100)
    potential: int = Field(default=75, ge=1, le=100)
    competency: Optional[int] = Field(default=None, ge=1, le=100)

    # --- Derived ---
    birth_date: Optional[date] = None
    succession_status: SuccessionStatus = SuccessionStatus.NOT_A_CANDIDATE

    # --- History ---
    education_history: list[EducationHistory] = Field(default_factory=list)
    performance_history: list[PerformanceHistory] = Field(default_factory=list)
    career_history: list[CareerHistory] = Field(default_factory=list)
    development_history: list[DevelopmentHistory] = Field(default_factory=list)

    model_config = {"str_strip_whitespace": True}


class EmployeeDraft(BaseModel):
    """AI-generated starting point for a new employee form."""

    name: str = ""
    nip: str = ""
    pangkat_golongan: str = ""
    pendidikan: str = ""
    jurusan: str = ""
    email: str = ""
    phone: str = ""
    eselon: str = ""
    skills: list[str] = Field(default_factory=list)
    critical_position: str = ""

    @field_validator("skills", mode="before")
    @classmethod
    def _split_skills(cls, value: object) -> object:
        if isinstance(value, str):
            return [s.strip() for s in value.split(",") if s.strip()]
        return value
