# -*- coding: utf-8 -*-
"""Shared setup for API tests: a throwaway data root and a fresh app import."""

from __future__ import annotations

import os
import shutil
import sys
import tempfile
from pathlib import Path

from fastapi.testclient import TestClient

ADMIN_EMAIL = "admin@example.com"


def fresh_client(tmp: Path) -> TestClient:
    data_root = tmp / "data"
    os.environ["AYURVEDA_DATA_ROOT"] = str(data_root)
    os.environ["AYURVEDA_DB_PATH"] = str(data_root / "ayurveda.db")
    os.environ["AYURVEDA_JWT_SECRET"] = "test-secret"
    os.environ["AYURVEDA_ADMIN_EMAILS"] = ADMIN_EMAIL
    os.environ["AYURVEDA_LOG_LEVEL"] = "WARNING"

    # Ensure settings/app reflect the env vars above.
    for name in list(sys.modules.keys()):
        if name == "ayurveda" or name.startswith("ayurveda."):
            sys.modules.pop(name, None)

    from ayurveda.api import app  # noqa: WPS433 (import inside helper for env control)

    return TestClient(app)


def make_tmp() -> Path:
    return Path(tempfile.mkdtemp(prefix="ayurveda-test-"))


def cleanup(client: TestClient, tmp: Path) -> None:
    client.close()
    shutil.rmtree(tmp, ignore_errors=True)


def register(client: TestClient, email: str, password: str = "secret123", full_name: str = "Test User") -> dict:
    resp = client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "full_name": full_name},
    )
    assert resp.status_code == 200, resp.text
    return resp.json()


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def answer_all(client: TestClient, headers: dict, pick) -> dict:
    """Answer every question with ``pick(index, question)`` and submit."""
    questions = client.get("/api/quiz/questions", headers=headers).json()["questions"]
    answers = {q["id"]: pick(i, q) for i, q in enumerate(questions)}
    resp = client.post("/api/quiz/submit", json={"answers": answers}, headers=headers)
    assert resp.status_code == 200, resp.text
    return resp.json()
