# -*- coding: utf-8 -*-
"""Profiles — DB storage helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import HTTPException

from ..app_db import db_conn
from ..config import settings
from .models import ProfileUpdateRequest

_EDITABLE_FIELDS = (
    "full_name",
    "date_of_birth",
    "gender",
    "phone",
    "height",
    "weight",
    "medical_conditions",
    "allergies",
)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def clean_full_name(value: str) -> str:
    name = value.strip()
    if not name:
        raise HTTPException(status_code=400, detail="Full name is required")
    return name


def get_profile(user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM profiles WHERE id = ?", (user_id,)).fetchone()
        return dict(row) if row else None


def upsert_profile(user_id: str, request: ProfileUpdateRequest) -> Dict[str, Any]:
    values = request.model_dump(mode="json")
    values["full_name"] = clean_full_name(values["full_name"])
    now = _utc_now()
    with db_conn(settings.app_db_path) as conn:
        existing = conn.execute("SELECT created_at FROM profiles WHERE id = ?", (user_id,)).fetchone()
        if existing:
            assignments = ", ".join(f"{name} = ?" for name in _EDITABLE_FIELDS)
            conn.execute(
                f"UPDATE profiles SET {assignments}, updated_at = ? WHERE id = ?",
                [values[name] for name in _EDITABLE_FIELDS] + [now, user_id],
            )
        else:
            columns = ", ".join(_EDITABLE_FIELDS)
            placeholders = ", ".join("?" for _ in _EDITABLE_FIELDS)
            conn.execute(
                f"INSERT INTO profiles (id, {columns}, created_at, updated_at) VALUES (?, {placeholders}, ?, ?)",
                [user_id] + [values[name] for name in _EDITABLE_FIELDS] + [now, now],
            )
        row = conn.execute("SELECT * FROM profiles WHERE id = ?", (user_id,)).fetchone()
    return dict(row)
