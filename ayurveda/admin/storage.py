# -*- coding: utf-8 -*-
"""Admin dashboard — aggregate queries across users."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from ..app_db import db_conn
from ..config import settings
from ..followups.storage import annotate
from ..quiz.scoring import DOSHAS

# Latest result per user; ties on completed_at resolve to the larger id.
_LATEST_RESULTS_SQL = """
    SELECT r.user_id, r.dominant_dosha
    FROM prakriti_results r
    WHERE r.id = (
        SELECT r2.id FROM prakriti_results r2
        WHERE r2.user_id = r.user_id
        ORDER BY r2.completed_at DESC, r2.id DESC
        LIMIT 1
    )
"""


def _iso(dt: datetime) -> str:
    return dt.isoformat().replace("+00:00", "Z")


def _latest_doshas(conn) -> Dict[str, str]:
    return {row["user_id"]: row["dominant_dosha"] for row in conn.execute(_LATEST_RESULTS_SQL).fetchall()}


def get_stats(now: Optional[datetime] = None) -> Dict[str, Any]:
    now = now or datetime.now(timezone.utc)
    since = _iso(now - timedelta(days=int(settings.recent_activity_days)))
    with db_conn(settings.app_db_path) as conn:
        total_users = conn.execute("SELECT COUNT(*) FROM profiles").fetchone()[0]
        completed_quizzes = conn.execute("SELECT COUNT(*) FROM prakriti_results").fetchone()[0]
        pending = conn.execute("SELECT COUNT(*) FROM follow_ups WHERE status = 'pending'").fetchone()[0]
        recent = conn.execute("SELECT COUNT(*) FROM profiles WHERE created_at >= ?", (since,)).fetchone()[0]
        latest = _latest_doshas(conn)

    assessed = len(latest)
    distribution: Dict[str, Dict[str, Any]] = {}
    for dosha in DOSHAS:
        count = sum(1 for d in latest.values() if d == dosha)
        percentage = round(count * 100.0 / assessed, 1) if assessed else 0.0
        distribution[dosha] = {"count": count, "percentage": percentage}

    return {
        "total_users": total_users,
        "completed_quizzes": completed_quizzes,
        "pending_follow_ups": pending,
        "recent_activity": recent,
        "dosha_distribution": distribution,
    }


def list_users() -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            """
            SELECT p.id, p.full_name, p.created_at, u.email
            FROM profiles p LEFT JOIN users u ON u.id = p.id
            ORDER BY p.created_at DESC
            """
        ).fetchall()
        latest = _latest_doshas(conn)

    return [
        {
            "id": row["id"],
            "full_name": row["full_name"],
            "email": row["email"] or "",
            "created_at": row["created_at"],
            "has_quiz": row["id"] in latest,
            "dosha": latest.get(row["id"]),
        }
        for row in rows
    ]


def list_all_follow_ups(status: Optional[str] = None) -> List[Dict[str, Any]]:
    sql = """
        SELECT f.*, p.full_name AS full_name, u.email AS email
        FROM follow_ups f
        LEFT JOIN profiles p ON p.id = f.user_id
        LEFT JOIN users u ON u.id = f.user_id
    """
    params: list[Any] = []
    if status:
        sql += " WHERE f.status = ?"
        params.append(status)
    sql += " ORDER BY f.follow_up_date ASC, f.created_at ASC"

    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(sql, params).fetchall()
    return [annotate(dict(r)) for r in rows]
