# -*- coding: utf-8 -*-
"""Quiz — DB storage helpers."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

from fastapi import HTTPException

from ..app_db import db_conn
from ..config import settings
from .scoring import determine_prakriti, tally, validate_answers

logger = logging.getLogger(__name__)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _row_to_result(row: Dict[str, Any]) -> Dict[str, Any]:
    answers: Dict[str, str] = {}
    raw = row.get("quiz_answers")
    if raw:
        try:
            answers = json.loads(raw)
        except Exception:
            answers = {}
    return {
        "id": row["id"],
        "user_id": row["user_id"],
        "vata_score": row["vata_score"],
        "pitta_score": row["pitta_score"],
        "kapha_score": row["kapha_score"],
        "dominant_dosha": row["dominant_dosha"],
        "secondary_dosha": row.get("secondary_dosha"),
        "quiz_answers": answers,
        "completed_at": row["completed_at"],
    }


def list_questions() -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute("SELECT * FROM prakriti_questions ORDER BY order_number").fetchall()
    return [dict(r) for r in rows]


def save_result(*, user_id: str, answers: Mapping[str, str]) -> Dict[str, Any]:
    question_ids = [q["id"] for q in list_questions()]
    if not question_ids:
        raise HTTPException(status_code=404, detail="No questions available")
    problems = validate_answers(answers, question_ids)
    if problems:
        raise HTTPException(status_code=400, detail="; ".join(problems))

    scores = tally(answers)
    dominant, secondary = determine_prakriti(scores)
    result_id = str(uuid4())
    now = _utc_now()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO prakriti_results (
                id, user_id, vata_score, pitta_score, kapha_score,
                dominant_dosha, secondary_dosha, quiz_answers, completed_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                result_id,
                user_id,
                scores["vata"],
                scores["pitta"],
                scores["kapha"],
                dominant,
                secondary,
                json.dumps(dict(answers), ensure_ascii=False),
                now,
            ),
        )
    logger.info(
        "Quiz submitted user=%s vata=%d pitta=%d kapha=%d dominant=%s secondary=%s",
        user_id,
        scores["vata"],
        scores["pitta"],
        scores["kapha"],
        dominant,
        secondary,
    )
    return {
        "id": result_id,
        "user_id": user_id,
        "vata_score": scores["vata"],
        "pitta_score": scores["pitta"],
        "kapha_score": scores["kapha"],
        "dominant_dosha": dominant,
        "secondary_dosha": secondary,
        "quiz_answers": dict(answers),
        "completed_at": now,
    }


def get_latest_result(user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM prakriti_results WHERE user_id = ? ORDER BY completed_at DESC LIMIT 1",
            (user_id,),
        ).fetchone()
    return _row_to_result(dict(row)) if row else None


def require_latest_result(user_id: str) -> Dict[str, Any]:
    result = get_latest_result(user_id)
    if not result:
        raise HTTPException(status_code=404, detail="Complete the Prakriti quiz first")
    return result


def list_results(user_id: str) -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM prakriti_results WHERE user_id = ? ORDER BY completed_at DESC",
            (user_id,),
        ).fetchall()
    return [_row_to_result(dict(r)) for r in rows]
