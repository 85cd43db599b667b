# -*- coding: utf-8 -*-
"""Auth — account rows.

An account is a ``users`` row joined with its profile's ``full_name``;
registration writes both in one transaction.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import uuid4

from fastapi import HTTPException

from ..app_db import db_conn
from ..config import settings
from ..profiles.storage import clean_full_name

logger = logging.getLogger(__name__)

_ACCOUNT_SELECT = (
    "SELECT u.id, u.email, u.password_hash, u.is_admin, u.created_at, p.full_name "
    "FROM users u LEFT JOIN profiles p ON p.id = u.id"
)


def _fetch_account(where: str, value: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(f"{_ACCOUNT_SELECT} WHERE {where} = ?", (value,)).fetchone()
        return dict(row) if row else None


def get_user_by_email(email: str) -> Optional[Dict[str, Any]]:
    return _fetch_account("u.email", email.strip().lower())


def get_user_by_id(user_id: str) -> Optional[Dict[str, Any]]:
    return _fetch_account("u.id", user_id)


def create_user(*, email: str, password_hash: str, full_name: str) -> Dict[str, Any]:
    name = clean_full_name(full_name)
    email = email.strip().lower()
    user_id = str(uuid4())
    now = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    is_admin = 1 if email in settings.admin_emails else 0
    try:
        with db_conn(settings.app_db_path) as conn:
            conn.execute(
                "INSERT INTO users (id, email, password_hash, is_admin, created_at) VALUES (?, ?, ?, ?, ?)",
                (user_id, email, password_hash, is_admin, now),
            )
            conn.execute(
                "INSERT INTO profiles (id, full_name, created_at, updated_at) VALUES (?, ?, ?, ?)",
                (user_id, name, now, now),
            )
    except sqlite3.IntegrityError as exc:
        raise HTTPException(status_code=400, detail="Email already registered") from exc
    logger.info("Registered user %s (admin=%s)", user_id, bool(is_admin))
    return get_user_by_id(user_id)


def set_admin(email: str, is_admin: bool) -> bool:
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            "UPDATE users SET is_admin = ? WHERE email = ?",
            (1 if is_admin else 0, email.strip().lower()),
        )
    if cur.rowcount:
        logger.info("Set admin=%s for %s", is_admin, email)
    return cur.rowcount > 0
