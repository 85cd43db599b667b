# -*- coding: utf-8 -*-
"""Diet — recommendation storage (SQLite)."""

from __future__ import annotations

import copy
import json
import logging
import sqlite3
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from .templates import DIET_TEMPLATES

logger = logging.getLogger(__name__)

_JSON_FIELDS = ("foods_to_favor", "foods_to_avoid", "meal_suggestions", "lifestyle_tips")


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _loads(raw: Optional[str], default: Any) -> Any:
    if not raw:
        return default
    try:
        return json.loads(raw)
    except Exception:
        return default


def _row_to_recommendation(row: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": row["id"],
        "user_id": row["user_id"],
        "dosha_type": row["dosha_type"],
        "foods_to_favor": _loads(row.get("foods_to_favor"), []),
        "foods_to_avoid": _loads(row.get("foods_to_avoid"), []),
        "meal_suggestions": _loads(row.get("meal_suggestions"), {}),
        "lifestyle_tips": _loads(row.get("lifestyle_tips"), []),
        "created_at": row["created_at"],
    }


def get_template(dosha: str) -> Dict[str, Any]:
    template = DIET_TEMPLATES.get(dosha)
    if template is None:
        raise KeyError(f"Unknown dosha: {dosha}")
    return {"dosha_type": dosha, **copy.deepcopy(template)}


def get_recommendation(user_id: str, dosha: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM diet_recommendations WHERE user_id = ? AND dosha_type = ?",
            (user_id, dosha),
        ).fetchone()
    return _row_to_recommendation(dict(row)) if row else None


def create_recommendation(user_id: str, dosha: str) -> Dict[str, Any]:
    template = get_template(dosha)
    rec_id = str(uuid4())
    now = _utc_now()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO diet_recommendations (
                id, user_id, dosha_type, foods_to_favor, foods_to_avoid,
                meal_suggestions, lifestyle_tips, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                rec_id,
                user_id,
                dosha,
                *[json.dumps(template[name], ensure_ascii=False) for name in _JSON_FIELDS],
                now,
            ),
        )
    logger.info("Created %s diet recommendation for user %s", dosha, user_id)
    return {"id": rec_id, "user_id": user_id, "created_at": now, **template}


def get_or_create_recommendation(user_id: str, dosha: str) -> Dict[str, Any]:
    existing = get_recommendation(user_id, dosha)
    if existing:
        return existing
    try:
        return create_recommendation(user_id, dosha)
    except sqlite3.IntegrityError:
        # Lost a race against a concurrent insert for the same (user, dosha).
        found = get_recommendation(user_id, dosha)
        if found is None:
            raise
        return found
