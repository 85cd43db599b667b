# -*- coding: utf-8 -*-
"""Daily schedule storage helpers (SQLite)."""

from __future__ import annotations

import copy
import json
import logging
import sqlite3
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional
from uuid import uuid4

from fastapi import HTTPException

from ..app_db import db_conn
from ..config import settings
from .templates import SCHEDULE_TEMPLATES

logger = logging.getLogger(__name__)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _loads(raw: Optional[str], default: Any) -> Any:
    if not raw:
        return default
    try:
        return json.loads(raw)
    except Exception:
        return default


def _row_to_schedule(row: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": row["id"],
        "user_id": row["user_id"],
        "dosha_type": row.get("dosha_type"),
        "wake_time": row.get("wake_time"),
        "morning_routine": _loads(row.get("morning_routine"), []),
        "meal_times": _loads(row.get("meal_times"), {}),
        "exercise_schedule": _loads(row.get("exercise_schedule"), []),
        "meditation_times": _loads(row.get("meditation_times"), []),
        "sleep_time": row.get("sleep_time"),
        "created_at": row["created_at"],
        "updated_at": row["updated_at"],
    }


def _column_values(fields: Mapping[str, Any]) -> list:
    return [
        fields.get("wake_time"),
        json.dumps(fields.get("morning_routine") or [], ensure_ascii=False),
        json.dumps(fields.get("meal_times") or {}, ensure_ascii=False),
        json.dumps(fields.get("exercise_schedule") or [], ensure_ascii=False),
        json.dumps(fields.get("meditation_times") or [], ensure_ascii=False),
        fields.get("sleep_time"),
    ]


def get_template(dosha: str) -> Dict[str, Any]:
    template = SCHEDULE_TEMPLATES.get(dosha)
    if template is None:
        raise KeyError(f"Unknown dosha: {dosha}")
    return {"dosha_type": dosha, **copy.deepcopy(template)}


def get_schedule(user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM daily_schedules WHERE user_id = ?", (user_id,)).fetchone()
    return _row_to_schedule(dict(row)) if row else None


def create_schedule_from_template(user_id: str, dosha: str) -> Dict[str, Any]:
    template = get_template(dosha)
    schedule_id = str(uuid4())
    now = _utc_now()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO daily_schedules (
                id, user_id, dosha_type, wake_time, morning_routine, meal_times,
                exercise_schedule, meditation_times, sleep_time, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            [schedule_id, user_id, dosha] + _column_values(template) + [now, now],
        )
    logger.info("Created %s daily schedule for user %s", dosha, user_id)
    return get_schedule(user_id) or {}


def get_or_create_schedule(user_id: str, dosha: str) -> Dict[str, Any]:
    """Return the user's schedule; the first call seeds it from the dosha template."""
    existing = get_schedule(user_id)
    if existing:
        return existing
    try:
        return create_schedule_from_template(user_id, dosha)
    except sqlite3.IntegrityError:
        # Another request seeded this user's schedule first.
        found = get_schedule(user_id)
        if found is None:
            raise
        return found


def update_schedule(user_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
    now = _utc_now()
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            """
            UPDATE daily_schedules
            SET wake_time = ?, morning_routine = ?, meal_times = ?,
                exercise_schedule = ?, meditation_times = ?, sleep_time = ?, updated_at = ?
            WHERE user_id = ?
            """,
            _column_values(fields) + [now, user_id],
        )
        if cur.rowcount == 0:
            raise HTTPException(status_code=404, detail="Schedule not found")
        row = conn.execute("SELECT * FROM daily_schedules WHERE user_id = ?", (user_id,)).fetchone()
    return _row_to_schedule(dict(row))


def reset_schedule(user_id: str, dosha: str) -> Dict[str, Any]:
    """Overwrite the user's schedule with the template for ``dosha``."""
    if get_schedule(user_id) is None:
        return create_schedule_from_template(user_id, dosha)
    template = get_template(dosha)
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            "UPDATE daily_schedules SET dosha_type = ? WHERE user_id = ?",
            (dosha, user_id),
        )
    logger.info("Reset daily schedule for user %s to %s template", user_id, dosha)
    return update_schedule(user_id, template)
