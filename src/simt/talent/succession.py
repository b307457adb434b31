"""SuccessionEvaluator: readiness status from 9-box placement and retirement."""

from __future__ import annotations

from datetime import date
from typing import Optional

from simt.models.employee import Employee, SuccessionStatus
from simt.talent.nine_box import box_number
from simt.talent.retirement import (
    is_approaching_retirement,
    is_past_retirement_age,
    parse_birth_date,
)

_STATUS_BY_BOX: dict[int, SuccessionStatus] = {
    9: SuccessionStatus.READY_NOW,
    8: SuccessionStatus.READY_NOW,
    7: SuccessionStatus.ONE_TO_TWO_YEARS,
    5: SuccessionStatus.ONE_TO_TWO_YEARS,
    6: SuccessionStatus.FUTURE_POTENTIAL,
    4: SuccessionStatus.FUTURE_POTENTIAL,
    3: SuccessionStatus.FUTURE_POTENTIAL,
}


def status_for_box(number: int) -> SuccessionStatus:
    """Total mapping from box number to status; unmapped boxes are not candidates."""
    return _STATUS_BY_BOX.get(number, SuccessionStatus.NOT_A_CANDIDATE)


def resolve_birth_date(employee: Employee) -> Optional[date]:
    """Birth date encoded in the NIP; None when the NIP carries no valid date."""
    return parse_birth_date(employee.nip)


def is_retiring(employee: Employee, now: date) -> bool:
    """Past retirement age or retiring within a year. Needs a birth date and eselon."""
    birth_date = resolve_birth_date(employee)
    if birth_date is None or not employee.eselon:
        return False
    return is_past_retirement_age(birth_date, employee.eselon, now) or is_approaching_retirement(
        birth_date, employee.eselon, now
    )


def evaluate(employee: Employee, now: Optional[date] = None) -> SuccessionStatus:
    """Derive the succession status; retirement overrides the 9-box signal."""
    if now is None:
        now = date.today()
    if is_retiring(employee, now):
        return SuccessionStatus.NOT_A_CANDIDATE
    return status_for_box(box_number(employee.performance, employee.potential))


def refresh_derived(employee: Employee, now: Optional[date] = None) -> Employee:
    """Return a copy with birth date and succession status recomputed.

    Callers invoke this after any change to performance, potential, NIP or
    eselon. A NIP without a valid date clears ``birth_date``.
    """
    if now is None:
        now = date.today()
    updated = employee.model_copy(update={"birth_date": resolve_birth_date(employee)})
    updated.succession_status = evaluate(updated, now)
    return updated
