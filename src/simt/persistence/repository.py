"""TalentRepository: employee and critical-job collections over a key/value store.

Each collection is stored whole as one JSON array under a fixed key, the
same layout the browser dashboard kept in localStorage.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from simt.core.exceptions import RecordNotFoundError, StorageError
from simt.core.protocols import IKeyValueStore
from simt.models.critical_job import CriticalJob
from simt.models.employee import Employee
from simt.talent.succession import refresh_derived

logger = logging.getLogger(__name__)

EMPLOYEES_KEY = "simt_employees_data_v1"
CRITICAL_JOBS_KEY = "simt_critical_jobs_data_v1"

_employees_adapter = TypeAdapter(list[Employee])
_jobs_adapter = TypeAdapter(list[CriticalJob])


class TalentRepository:
    """Load/save access to the talent pool. Derived fields are refreshed on write."""

    def __init__(self, store: IKeyValueStore) -> None:
        self._store = store

    @staticmethod
    def _decode(key: str, adapter: TypeAdapter, raw: str | None) -> list:
        if raw is None:
            return []
        try:
            return adapter.validate_json(raw)
        except ValidationError as exc:
            raise StorageError(f"Stored collection {key!r} is corrupt: {exc}") from exc

    def _load(self, key: str, adapter: TypeAdapter) -> list:
        return self._decode(key, adapter, self._store.get(key))

    def _update(self, key: str, adapter: TypeAdapter, change: Callable[[list], list]) -> list:
        """Apply ``change`` to the stored collection as one atomic store update."""
        result: list = []

        def mutate(raw: str | None) -> str:
            nonlocal result
            result = change(self._decode(key, adapter, raw))
            return adapter.dump_json(result).decode("utf-8")

        self._store.update(key, mutate)
        return result

    # ---- Employees ----

    def load_employees(self) -> list[Employee]:
        return self._load(EMPLOYEES_KEY, _employees_adapter)

    def get_employee(self, employee_id: str) -> Employee:
        for emp in self.load_employees():
            if emp.id == employee_id:
                return emp
        raise RecordNotFoundError("Employee", employee_id)

    def update_employees(self, change: Callable[[list[Employee]], list[Employee]]) -> list[Employee]:
        """Replace the collection with ``change(current)`` in one atomic update."""
        employees = self._update(EMPLOYEES_KEY, _employees_adapter, change)
        logger.debug("Saved %d employees", len(employees))
        return employees

    def upsert_employee(self, employee: Employee, now: Optional[date] = None) -> Employee:
        """Insert or replace by id, recomputing birth date and succession status."""
        refreshed = refresh_derived(employee, now)
        self.update_employees(lambda employees: _replace_by_id(employees, refreshed))
        return refreshed

    def delete_employee(self, employee_id: str) -> None:
        self.update_employees(lambda employees: _remove_by_id(employees, employee_id, "Employee"))

    # ---- Critical jobs ----

    def load_critical_jobs(self) -> list[CriticalJob]:
        return self._load(CRITICAL_JOBS_KEY, _jobs_adapter)

    def get_critical_job(self, job_id: str) -> CriticalJob:
        for job in self.load_critical_jobs():
            if job.id == job_id:
                return job
        raise RecordNotFoundError("CriticalJob", job_id)

    def upsert_critical_job(self, job: CriticalJob) -> CriticalJob:
        self._update(CRITICAL_JOBS_KEY, _jobs_adapter, lambda jobs: _replace_by_id(jobs, job))
        return job

    def delete_critical_job(self, job_id: str) -> None:
        self._update(CRITICAL_JOBS_KEY, _jobs_adapter, lambda jobs: _remove_by_id(jobs, job_id, "CriticalJob"))


def _replace_by_id(records: list, record) -> list:
    for index, existing in enumerate(records):
        if existing.id == record.id:
            records[index] = record
            return records
    records.append(record)
    return records


def _remove_by_id(records: list, record_id: str, kind: str) -> list:
    remaining = [r for r in records if r.id != record_id]
    if len(remaining) == len(records):
        raise RecordNotFoundError(kind, record_id)
    return remaining
