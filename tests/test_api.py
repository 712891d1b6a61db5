"""
HTTP tests for the FastAPI app, run in-process with TestClient.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from conftest import make_clock
from expedition.core.config import settings
from expedition.infrastructure.store.memory_store import MemoryRegistrationStore
from expedition.infrastructure.store.sqlite_store import SqliteRegistrationStore
from expedition.main import app
from expedition.wiring.dependencies import reset_container


PERSONAL = {
    "firstName": "Awa",
    "lastName": "Koné",
    "email": "a@x.com",
    "phone": "+971500000",
    "company": "TechAfrica",
    "role": "CEO",
}


@pytest.fixture
def registrations():
    store = MemoryRegistrationStore(clock=make_clock())
    reset_container(store=store)
    yield store
    reset_container()


@pytest.fixture
def client(registrations):
    return TestClient(app)


@pytest.fixture
def admin_headers(client):
    resp = client.post("/api/v1/admin/login", json={"password": "admin123"})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['token']}"}


def _register(client, program: dict | None = None, personal: dict | None = None) -> dict:
    session_id = client.post("/api/v1/registrations/wizard").json()["sessionId"]
    assert client.post(f"/api/v1/registrations/wizard/{session_id}/personal", json=personal or PERSONAL).status_code == 200
    assert client.post(
        f"/api/v1/registrations/wizard/{session_id}/program",
        json=program or {"selectedPack": "premium", "needsVisa": True},
    ).status_code == 200
    return client.post(f"/api/v1/registrations/wizard/{session_id}/confirm").json()


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_content_in_both_languages(client):
    fr = client.get("/api/v1/content/fr").json()
    en = client.get("/api/v1/content/en").json()

    assert fr["language"] == "fr"
    assert fr["content"]["nav"]["register"] == "S'inscrire"
    assert en["language"] == "en"
    assert len(en["content"]["data"]["agenda"]) == 6


def test_unknown_language_falls_back_to_french(client):
    resp = client.get("/api/v1/content/de")

    assert resp.status_code == 200
    assert resp.json()["language"] == "fr"


def test_packs(client):
    packs = client.get("/api/v1/packs", params={"lang": "en"}).json()

    assert [p["variant"] for p in packs] == ["essentiel", "premium", "elite"]
    assert [p["priceValue"] for p in packs] == [2500, 4500, 8000]


def test_wizard_start_with_preselected_pack(client):
    resp = client.post("/api/v1/registrations/wizard", json={"initialPack": "elite"})

    assert resp.status_code == 201
    state = resp.json()["state"]
    assert state["step"] == 1
    assert state["data"]["selectedPack"] == "elite"
    assert state["data"]["needsVisa"] is True


def test_full_wizard_creates_pending_registration(client, registrations):
    body = _register(client)

    assert body["state"]["completed"] is True
    assert body["state"]["registrationId"]
    records = registrations.list_registrations()
    assert len(records) == 1
    assert records[0].id == body["state"]["registrationId"]
    assert records[0].status.value == "pending"


def test_client_cannot_choose_status(client, registrations):
    _register(client, personal={**PERSONAL, "status": "approved"})

    assert registrations.list_registrations()[0].status.value == "pending"


def test_strict_wizard_rejects_missing_pack(client, monkeypatch):
    monkeypatch.setattr(settings, "REGISTRATION_STRICT_VALIDATION", True)
    session_id = client.post("/api/v1/registrations/wizard").json()["sessionId"]
    client.post(f"/api/v1/registrations/wizard/{session_id}/personal", json=PERSONAL)

    resp = client.post(
        f"/api/v1/registrations/wizard/{session_id}/program",
        params={"lang": "en"},
        json={"needsVisa": False},
    )

    assert resp.status_code == 422
    assert resp.json()["detail"] == {"field": "selectedPack", "message": "Please select a pack to continue."}
    state = client.get(f"/api/v1/registrations/wizard/{session_id}").json()["state"]
    assert state["step"] == 2
    assert state["data"]["company"] == "TechAfrica"


def test_lenient_wizard_accepts_missing_pack(client, registrations, monkeypatch):
    monkeypatch.setattr(settings, "REGISTRATION_STRICT_VALIDATION", False)

    body = _register(client, program={"needsVisa": False})

    assert body["state"]["completed"] is True
    assert registrations.list_registrations()[0].selected_pack is None


def test_wizard_step_order_and_unknown_session(client):
    session_id = client.post("/api/v1/registrations/wizard").json()["sessionId"]

    assert client.post(f"/api/v1/registrations/wizard/{session_id}/confirm").status_code == 409
    assert client.get("/api/v1/registrations/wizard/unknown").status_code == 404


def test_wizard_back_keeps_data(client):
    session_id = client.post("/api/v1/registrations/wizard").json()["sessionId"]
    client.post(f"/api/v1/registrations/wizard/{session_id}/personal", json=PERSONAL)

    state = client.post(f"/api/v1/registrations/wizard/{session_id}/back").json()["state"]

    assert state["step"] == 1
    assert state["data"]["lastName"] == "Koné"


def test_admin_requires_login(client):
    assert client.get("/api/v1/admin/registrations").status_code == 401
    assert client.get(
        "/api/v1/admin/registrations", headers={"Authorization": "Bearer forged"}
    ).status_code == 401
    assert client.post("/api/v1/admin/login", json={"password": "wrong"}).status_code == 401


def test_admin_dashboard_lists_filters_and_sums(client, admin_headers):
    _register(client)
    _register(
        client,
        personal={**PERSONAL, "lastName": "Diallo", "company": "AgriCorp", "email": "jm@agricorp.com"},
        program={"selectedPack": "elite", "needsVisa": False},
    )

    everything = client.get("/api/v1/admin/registrations", headers=admin_headers).json()
    assert everything["totalCount"] == 2
    assert everything["revenue"] == 12500
    assert everything["supportsSnapshot"] is False

    filtered = client.get(
        "/api/v1/admin/registrations", params={"search": "techafrica"}, headers=admin_headers
    ).json()
    assert filtered["filteredCount"] == 1
    assert filtered["registrations"][0]["company"] == "TechAfrica"
    assert filtered["revenue"] == 4500


def test_admin_status_change_and_delete(client, admin_headers, registrations):
    registration_id = _register(client)["state"]["registrationId"]

    resp = client.patch(
        f"/api/v1/admin/registrations/{registration_id}/status",
        json={"status": "approved"},
        headers=admin_headers,
    )
    assert resp.status_code == 204
    assert registrations.list_registrations()[0].status.value == "approved"

    assert client.delete(f"/api/v1/admin/registrations/{registration_id}", headers=admin_headers).status_code == 409
    assert len(registrations.list_registrations()) == 1

    resp = client.delete(
        f"/api/v1/admin/registrations/{registration_id}", params={"confirm": "true"}, headers=admin_headers
    )
    assert resp.status_code == 204
    assert registrations.list_registrations() == []


def test_admin_rejects_unknown_status(client, admin_headers):
    registration_id = _register(client)["state"]["registrationId"]

    resp = client.patch(
        f"/api/v1/admin/registrations/{registration_id}/status",
        json={"status": "archived"},
        headers=admin_headers,
    )

    assert resp.status_code == 422


def test_admin_csv_export(client, admin_headers):
    _register(client)

    resp = client.get("/api/v1/admin/export.csv", headers=admin_headers)

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    lines = resp.text.strip().splitlines()
    assert lines[0].startswith("id,firstName,lastName")
    assert len(lines) == 2


def test_logout_revokes_token(client, admin_headers):
    assert client.post("/api/v1/admin/logout", headers=admin_headers).status_code == 204
    assert client.get("/api/v1/admin/registrations", headers=admin_headers).status_code == 401


def test_snapshot_endpoints_unavailable_on_memory_backend(client, admin_headers):
    assert client.get("/api/v1/admin/database", headers=admin_headers).status_code == 404
    assert client.post("/api/v1/admin/wipe", params={"confirm": "true"}, headers=admin_headers).status_code == 404


def test_snapshot_endpoints_on_local_database(tmp_path):
    store = SqliteRegistrationStore(
        snapshot_path=tmp_path / "slot.b64",
        baseline_path=tmp_path / "database.sqlite",
        clock=make_clock(),
    )
    reset_container(store=store)
    try:
        client = TestClient(app)
        _register(client)
        token = client.post("/api/v1/admin/login", json={"password": "admin123"}).json()["token"]
        headers = {"Authorization": f"Bearer {token}"}

        resp = client.get("/api/v1/admin/database", headers=headers)
        assert resp.status_code == 200
        assert resp.content.startswith(b"SQLite format 3")
        assert 'filename="database.sqlite"' in resp.headers["content-disposition"]

        assert client.post("/api/v1/admin/wipe", headers=headers).status_code == 409
        assert client.post("/api/v1/admin/wipe", params={"confirm": "true"}, headers=headers).status_code == 204
        assert store.list_registrations() == []
    finally:
        reset_container()
