# -*- coding: utf-8 -*-
"""Follow-ups — DB storage helpers."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from fastapi import HTTPException

from ..app_db import db_conn
from ..config import settings

logger = logging.getLogger(__name__)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _today() -> date:
    return datetime.now(timezone.utc).date()


def annotate(row: Dict[str, Any], today: Optional[date] = None) -> Dict[str, Any]:
    """Add ``overdue`` and ``days_until`` (pending follow-ups only)."""
    today = today or _today()
    item = dict(row)
    item["reminder_sent"] = bool(item.get("reminder_sent"))
    item["overdue"] = False
    item["days_until"] = None
    if item.get("status") == "pending":
        try:
            due = date.fromisoformat(str(item.get("follow_up_date"))[:10])
        except ValueError:
            return item
        delta = (due - today).days
        item["overdue"] = delta < 0
        item["days_until"] = delta
    return item


def list_follow_ups(user_id: str, today: Optional[date] = None) -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM follow_ups WHERE user_id = ? ORDER BY follow_up_date DESC, created_at DESC",
            (user_id,),
        ).fetchall()
    return [annotate(dict(r), today) for r in rows]


def create_follow_up(user_id: str, follow_up_date: Optional[date] = None) -> Dict[str, Any]:
    due = follow_up_date or (_today() + timedelta(days=int(settings.follow_up_interval_days)))
    follow_up_id = str(uuid4())
    now = _utc_now()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO follow_ups (id, user_id, follow_up_date, status, reminder_sent, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (follow_up_id, user_id, due.isoformat(), "pending", 0, now),
        )
        row = conn.execute("SELECT * FROM follow_ups WHERE id = ?", (follow_up_id,)).fetchone()
    logger.info("Scheduled follow-up %s for user %s on %s", follow_up_id, user_id, due.isoformat())
    return annotate(dict(row))


def complete_follow_up(
    user_id: str,
    follow_up_id: str,
    *,
    feedback: str,
    progress_notes: Optional[str] = None,
) -> Dict[str, Any]:
    feedback = (feedback or "").strip()
    if not feedback:
        raise HTTPException(status_code=400, detail="Feedback is required")

    now = _utc_now()
    with db_conn(settings.app_db_path) as conn:
        # The status guard lets only one of several concurrent completions win.
        cur = conn.execute(
            """
            UPDATE follow_ups
            SET feedback = ?, progress_notes = ?, status = 'completed', completed_at = ?
            WHERE id = ? AND user_id = ? AND status != 'completed'
            """,
            (feedback, progress_notes, now, follow_up_id, user_id),
        )
        row = conn.execute(
            "SELECT * FROM follow_ups WHERE id = ? AND user_id = ?",
            (follow_up_id, user_id),
        ).fetchone()
    if not row:
        raise HTTPException(status_code=404, detail="Follow-up not found")
    if cur.rowcount == 0:
        raise HTTPException(status_code=409, detail="Follow-up already completed")
    logger.info("Completed follow-up %s for user %s", follow_up_id, user_id)
    return annotate(dict(row))


def mark_missed(grace_days: int = 0, today: Optional[date] = None) -> int:
    """Flip pending follow-ups older than ``grace_days`` to ``missed``; returns the count."""
    cutoff = (today or _today()) - timedelta(days=max(0, int(grace_days)))
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            "UPDATE follow_ups SET status = 'missed' WHERE status = 'pending' AND follow_up_date < ?",
            (cutoff.isoformat(),),
        )
        count = cur.rowcount
    logger.info("Marked %d overdue follow-ups as missed (cutoff %s)", count, cutoff.isoformat())
    return count
