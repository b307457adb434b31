"""API route tests with in-memory backends and the mock model provider."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from simt.api.app import create_app
from simt.core.exceptions import StorageError
from simt.services.importer import template_sheets
from tests.fakes import MemoryFileStore, MemoryKeyValueStore, MockModelProvider

AHMAD = "198501152010011001"
SITI = "199003202015022002"


class _DownStore(MemoryKeyValueStore):
    def ping(self) -> bool:
        raise StorageError("Redis PING failed: connection refused")


@pytest.fixture
def model():
    return MockModelProvider(default_response="<h3>Rencana</h3>")


@pytest.fixture
def files():
    return MemoryFileStore()


@pytest.fixture
def client(model, files):
    app = create_app(store=MemoryKeyValueStore(), file_store=files, model=model)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def seeded(client):
    resp = client.post("/employees/import", json=template_sheets())
    assert resp.status_code == 200
    return client


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_ready(self, client):
        assert client.get("/ready").json() == {"status": "ready"}

    def test_not_ready_when_store_down(self):
        app = create_app(store=_DownStore(), file_store=MemoryFileStore(), model=MockModelProvider())
        with TestClient(app) as c:
            assert c.get("/ready").status_code == 503


class TestEmployees:
    def test_import_summary(self, client):
        body = client.post("/employees/import", json=template_sheets()).json()
        assert body == {"added": 2, "updated": 0, "warnings": []}
        again = client.post("/employees/import", json=template_sheets()).json()
        assert again["updated"] == 2

    def test_import_without_main_sheet_is_400(self, client):
        assert client.post("/employees/import", json={"Riwayat Kinerja": []}).status_code == 400

    def test_list_sorted_and_searched(self, seeded):
        names = [e["name"] for e in seeded.get("/employees", params={"sort": "name-desc"}).json()]
        assert names == ["Siti Aminah", "Ahmad Subarjo"]
        found = seeded.get("/employees", params={"search": "bappeda"}).json()
        assert [e["nip"] for e in found] == [AHMAD]

    def test_bad_sort_is_400(self, seeded):
        assert seeded.get("/employees", params={"sort": "gaji-asc"}).status_code == 400

    def test_put_refreshes_status(self, seeded):
        employee = seeded.get(f"/employees/{AHMAD}").json()
        employee["performance"] = 40
        saved = seeded.put(f"/employees/{AHMAD}", json=employee).json()
        assert saved["succession_status"] == "Potensi Masa Depan"

    def test_put_with_unparseable_nip_clears_birth_date(self, seeded):
        employee = seeded.get(f"/employees/{AHMAD}").json()
        employee["nip"] = "BELUM-ADA"
        saved = seeded.put(f"/employees/{AHMAD}", json=employee).json()
        assert saved["birth_date"] is None
        profile = seeded.get(f"/employees/{AHMAD}/profile").json()
        assert profile["birth_date"] is None
        assert profile["retirement_date"] is None

    def test_put_rejects_out_of_range_score(self, seeded):
        employee = seeded.get(f"/employees/{AHMAD}").json()
        employee["potential"] = 101
        assert seeded.put(f"/employees/{AHMAD}", json=employee).status_code == 422

    def test_delete_then_404(self, seeded):
        assert seeded.delete(f"/employees/{SITI}").status_code == 204
        assert seeded.get(f"/employees/{SITI}").status_code == 404
        assert seeded.delete(f"/employees/{SITI}").status_code == 404

    def test_profile(self, seeded):
        profile = seeded.get(f"/employees/{AHMAD}/profile").json()
        assert profile["box"]["box_number"] == 9
        assert profile["succession_status"] == "Siap Sekarang"
        assert profile["birth_date"] == "1985-01-15"
        assert profile["retirement_age"] == 58
        assert profile["retirement_date"] == "2043-01-15"
        assert profile["past_retirement_age"] is False
        assert profile["education_below_standard"] is False

    def test_report_export(self, seeded, files):
        path = seeded.post("/employees/reports").json()["path"]
        assert path.startswith("reports/rekapitulasi-talenta-asn-")
        assert b"Ahmad Subarjo" in files.read(path)

    def test_report_list_and_download(self, seeded):
        path = seeded.post("/employees/reports").json()["path"]
        name = path.removeprefix("reports/")
        assert seeded.get("/employees/reports").json() == [name]
        resp = seeded.get(f"/employees/reports/{name}")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/csv")
        assert resp.text.startswith("Rekapitulasi Data Talenta ASN - Kabupaten Aceh Barat")

    def test_unknown_report_is_404(self, client):
        assert client.get("/employees/reports/missing.csv").status_code == 404

    def test_empty_report_is_400(self, client):
        assert client.post("/employees/reports").status_code == 400


class TestCriticalJobs:
    def test_candidates(self, seeded):
        job = {"title": "Kepala Bidang Perencanaan", "unit_kerja": "BAPPEDA", "vacancies": 1}
        assert seeded.put("/critical-jobs/kabid", json=job).json()["id"] == "kabid"
        candidates = seeded.get("/critical-jobs/kabid/candidates").json()
        assert [c["nip"] for c in candidates] == [AHMAD]

    def test_invalid_vacancies_is_422(self, client):
        assert client.put("/critical-jobs/x", json={"title": "X", "vacancies": 0}).status_code == 422

    def test_unknown_job_is_404(self, client):
        assert client.get("/critical-jobs/missing/candidates").status_code == 404
        assert client.delete("/critical-jobs/missing").status_code == 404


class TestTalent:
    def test_classify(self, client):
        body = client.get("/talent/classify", params={"performance": 95, "potential": 50}).json()
        assert body["box_number"] == 4

    def test_classify_validates_range(self, client):
        assert client.get("/talent/classify", params={"performance": 0, "potential": 50}).status_code == 422

    def test_summary(self, seeded):
        seeded.put("/critical-jobs/kasi", json={"title": "Kepala Seksi", "vacancies": 2})
        body = seeded.get("/talent/summary").json()
        assert body["total_employees"] == 2
        assert body["total_vacancies"] == 2
        assert body["ready_now_count"] == 2

    def test_pool_ordered_from_top_box(self, seeded):
        groups = seeded.get("/talent/pool").json()
        assert [g["box_number"] for g in groups] == list(range(9, 0, -1))
        assert groups[0]["count"] == 1


class TestAI:
    def test_development_plan_is_saved(self, seeded):
        body = seeded.post(f"/ai/development-plan/{AHMAD}").json()
        assert body == {"content": "<h3>Rencana</h3>"}
        assert seeded.get(f"/employees/{AHMAD}").json()["development_plan"] == "<h3>Rencana</h3>"

    def test_job_description(self, client):
        resp = client.post("/ai/job-description", json={"title": "Kepala Seksi", "unit_kerja": "Diskominfo"})
        assert resp.json()["content"] == "<h3>Rencana</h3>"

    def test_talent_pool_analysis_failure_returns_message(self, seeded, model):
        model.fail_with("quota")
        content = seeded.post("/ai/talent-pool-analysis").json()["content"]
        assert content.startswith("<h3>Gagal Menghasilkan Analisis</h3>")

    def test_employee_draft_failure_is_502(self, client, model):
        model.fail_with("timeout")
        resp = client.post("/ai/employee-draft", json={"jabatan": "Analis", "unit_kerja": "BKPSDM"})
        assert resp.status_code == 502

    def test_employee_draft_unparseable_response_is_502(self, client, model):
        model.set_response("Analis", "{not json")
        resp = client.post("/ai/employee-draft", json={"jabatan": "Analis", "unit_kerja": "BKPSDM"})
        assert resp.status_code == 502
