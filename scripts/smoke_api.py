#!/usr/bin/env python3
"""Walk a running server through the registration wizard and the admin dashboard."""
from __future__ import annotations

import argparse
import json
from typing import Any

import httpx
from httpx import ConnectError


PERSONAL: dict[str, Any] = {
    "firstName": "Awa",
    "lastName": "Koné",
    "email": "awa@techafrica.ci",
    "phone": "+225 07 00 00 00",
    "company": "TechAfrica",
    "role": "CEO",
}


def _show(title: str, resp: httpx.Response) -> None:
    print("=" * 60)
    print(f"{title} -> {resp.status_code}")
    if resp.headers.get("content-type", "").startswith("application/json"):
        print(json.dumps(resp.json(), indent=2, ensure_ascii=False))
    elif resp.text:
        print(resp.text[:500])


def run_wizard(client: httpx.Client, pack: str, lang: str) -> str | None:
    resp = client.post("/api/v1/registrations/wizard", json={"initialPack": pack})
    _show("start wizard", resp)
    session_id = resp.json()["sessionId"]
    base = f"/api/v1/registrations/wizard/{session_id}"

    _show("step 1", client.post(f"{base}/personal", params={"lang": lang}, json=PERSONAL))
    _show(
        "step 2",
        client.post(f"{base}/program", params={"lang": lang}, json={"selectedPack": pack, "needsVisa": True}),
    )
    resp = client.post(f"{base}/confirm", params={"lang": lang})
    _show("confirm", resp)
    return resp.json()["state"].get("registrationId")


def run_admin(client: httpx.Client, password: str, registration_id: str | None) -> None:
    resp = client.post("/api/v1/admin/login", json={"password": password})
    _show("admin login", resp)
    if resp.status_code != 200:
        return
    headers = {"Authorization": f"Bearer {resp.json()['token']}"}

    _show("dashboard", client.get("/api/v1/admin/registrations", headers=headers))
    if registration_id:
        _show(
            "approve",
            client.patch(
                f"/api/v1/admin/registrations/{registration_id}/status",
                json={"status": "approved"},
                headers=headers,
            ),
        )
    _show("csv export", client.get("/api/v1/admin/export.csv", headers=headers))
    _show("logout", client.post("/api/v1/admin/logout", headers=headers))


def main() -> None:
    parser = argparse.ArgumentParser(description="Smoke test the expedition API")
    parser.add_argument("--url", default="http://127.0.0.1:8001")
    parser.add_argument("--pack", default="premium", choices=["essentiel", "premium", "elite"])
    parser.add_argument("--lang", default="fr")
    parser.add_argument("--password", default="admin123")
    args = parser.parse_args()

    with httpx.Client(base_url=args.url, timeout=10.0) as client:
        try:
            _show("health", client.get("/health"))
        except ConnectError:
            print("Connection refused. Is the FastAPI server running?")
            print("Try: uvicorn expedition.main:app --reload --port 8001")
            return

        registration_id = run_wizard(client, args.pack, args.lang)
        run_admin(client, args.password, registration_id)


if __name__ == "__main__":
    main()
