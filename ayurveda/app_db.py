# -*- coding: utf-8 -*-
"""App database (users/profiles/quiz/recommendations/follow-ups) — SQLite helpers."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .quiz.questions import QUESTION_BANK

logger = logging.getLogger(__name__)


def connect(db_path: Path) -> sqlite3.Connection:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON;")
    return conn


def init_app_db(db_path: Path) -> None:
    conn = connect(db_path)
    try:
        cur = conn.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS users (
                id TEXT PRIMARY KEY,
                email TEXT NOT NULL UNIQUE,
                password_hash TEXT NOT NULL,
                is_admin INTEGER NOT NULL DEFAULT 0,
                created_at TEXT NOT NULL
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS profiles (
                id TEXT PRIMARY KEY,
                full_name TEXT NOT NULL,
                date_of_birth TEXT,
                gender TEXT,
                phone TEXT,
                height REAL,
                weight REAL,
                medical_conditions TEXT,
                allergies TEXT,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL,
                FOREIGN KEY(id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS prakriti_questions (
                id TEXT PRIMARY KEY,
                category TEXT NOT NULL,
                question TEXT NOT NULL,
                vata_option TEXT NOT NULL,
                pitta_option TEXT NOT NULL,
                kapha_option TEXT NOT NULL,
                order_number INTEGER NOT NULL
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS prakriti_results (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                vata_score INTEGER NOT NULL,
                pitta_score INTEGER NOT NULL,
                kapha_score INTEGER NOT NULL,
                dominant_dosha TEXT NOT NULL,
                secondary_dosha TEXT,
                quiz_answers TEXT NOT NULL,
                completed_at TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            "CREATE INDEX IF NOT EXISTS idx_prakriti_results_user_completed ON prakriti_results(user_id, completed_at DESC);"
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS diet_recommendations (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                dosha_type TEXT NOT NULL,
                foods_to_favor TEXT NOT NULL,
                foods_to_avoid TEXT NOT NULL,
                meal_suggestions TEXT NOT NULL,
                lifestyle_tips TEXT NOT NULL,
                created_at TEXT NOT NULL,
                UNIQUE(user_id, dosha_type),
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS daily_schedules (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL UNIQUE,
                dosha_type TEXT,
                wake_time TEXT,
                morning_routine TEXT NOT NULL,
                meal_times TEXT NOT NULL,
                exercise_schedule TEXT NOT NULL,
                meditation_times TEXT NOT NULL,
                sleep_time TEXT,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS follow_ups (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                follow_up_date TEXT NOT NULL,
                status TEXT NOT NULL,
                feedback TEXT,
                progress_notes TEXT,
                reminder_sent INTEGER NOT NULL DEFAULT 0,
                created_at TEXT NOT NULL,
                completed_at TEXT,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            "CREATE INDEX IF NOT EXISTS idx_follow_ups_user_date ON follow_ups(user_id, follow_up_date DESC);"
        )
        _seed_questions(cur)
        conn.commit()
    finally:
        conn.close()


def _seed_questions(cur: sqlite3.Cursor) -> None:
    count = cur.execute("SELECT COUNT(*) FROM prakriti_questions").fetchone()[0]
    if count:
        return
    cur.executemany(
        """
        INSERT INTO prakriti_questions (
            id, category, question, vata_option, pitta_option, kapha_option, order_number
        ) VALUES (?, ?, ?, ?, ?, ?, ?)
        """,
        [
            (
                q["id"],
                q["category"],
                q["question"],
                q["vata_option"],
                q["pitta_option"],
                q["kapha_option"],
                q["order_number"],
            )
            for q in QUESTION_BANK
        ],
    )
    logger.info("Seeded %d prakriti questions", len(QUESTION_BANK))


@contextmanager
def db_conn(db_path: Path) -> Iterator[sqlite3.Connection]:
    conn = connect(db_path)
    try:
        yield conn
        conn.commit()
    finally:
        conn.close()
