"""Seed the Redis store with the import-template employees and sample critical jobs.

Usage:
    python scripts/seed_sample_data.py --host localhost --port 6379
"""

from __future__ import annotations

import argparse
from datetime import date
from typing import Any

from simt.core.protocols import IKeyValueStore
from simt.models.critical_job import CriticalJob
from simt.persistence.redis_backend import RedisKeyValueStore
from simt.persistence.repository import TalentRepository
from simt.services.importer import import_into, template_sheets

SAMPLE_CRITICAL_JOBS: list[dict[str, Any]] = [
    {
        "id": "kabid-perencanaan",
        "title": "Kepala Bidang Perencanaan",
        "unit_kerja": "BAPPEDA",
        "description": "Memimpin penyusunan dokumen perencanaan pembangunan daerah.",
        "required_eselon": "Administrator (Eselon III)",
        "vacancies": 1,
    },
    {
        "id": "kasi-infrastruktur-digital",
        "title": "Kepala Seksi Infrastruktur Digital",
        "unit_kerja": "Dinas Komunikasi dan Informatika",
        "description": "Mengelola jaringan dan pusat data pemerintah daerah.",
        "required_eselon": "Pengawas (Eselon IV)",
        "vacancies": 2,
    },
]


def seed_employees(store: IKeyValueStore, today: date | None = None) -> int:
    """Merge the template workbook into the stored employees. Idempotent by NIP."""
    result = import_into(TalentRepository(store), template_sheets(), now=today)
    print(f"  Seeded employees: {result.added} added, {result.updated} updated")
    return len(result.employees)


def seed_critical_jobs(store: IKeyValueStore) -> int:
    repository = TalentRepository(store)
    for job in SAMPLE_CRITICAL_JOBS:
        repository.upsert_critical_job(CriticalJob(**job))
    jobs = repository.load_critical_jobs()
    print(f"  Seeded {len(SAMPLE_CRITICAL_JOBS)} critical jobs ({len(jobs)} stored)")
    return len(jobs)


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the SIMT talent store")
    parser.add_argument("--host", default="localhost", help="Redis host")
    parser.add_argument("--port", type=int, default=6379, help="Redis port")
    parser.add_argument("--db", type=int, default=0, help="Redis database number")
    args = parser.parse_args()

    store = RedisKeyValueStore(host=args.host, port=args.port, db=args.db)

    print("Seeding employees...")
    seed_employees(store)

    print("Seeding critical jobs...")
    seed_critical_jobs(store)

    print("Done!")


if __name__ == "__main__":
    main()
