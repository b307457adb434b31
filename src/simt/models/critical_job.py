"""Critical job (jabatan kritikal) records tracked for succession."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, Field


class CriticalJob(BaseModel):
    """A strategically important position with targeted successors."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    title: str = Field(min_length=1)
    unit_kerja: str = ""
    description: str = ""
    required_eselon: str = ""
    vacancies: int = Field(default=1, gt=0)

    model_config = {"str_strip_whitespace": True}
