from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Set


class Settings:
    """Centralized configuration for the wellness backend."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("AYURVEDA_DATA_ROOT") or data_root_default
        ).expanduser()
        self.app_db_path: Path = Path(
            os.environ.get("AYURVEDA_DB_PATH") or (self.data_root / "ayurveda.db")
        ).expanduser()
        # In production you MUST set AYURVEDA_JWT_SECRET. The dev secret keeps local demos easy,
        # but it is not safe for public deployments.
        self.jwt_secret: str = os.environ.get("AYURVEDA_JWT_SECRET") or "dev-secret-change-me"
        self.token_ttl_days: int = int(os.environ.get("AYURVEDA_TOKEN_TTL_DAYS") or "7")
        self.cookie_secure: bool = (os.environ.get("AYURVEDA_COOKIE_SECURE") or "").strip() in {"1", "true", "True"}

        admins = os.environ.get("AYURVEDA_ADMIN_EMAILS") or ""
        self.admin_emails: Set[str] = {
            email.strip().lower() for email in admins.split(",") if email.strip()
        }

        self.follow_up_interval_days: int = int(
            os.environ.get("AYURVEDA_FOLLOW_UP_INTERVAL_DAYS") or "7"
        )
        self.recent_activity_days: int = int(
            os.environ.get("AYURVEDA_RECENT_ACTIVITY_DAYS") or "7"
        )
        self.log_level: str = (os.environ.get("AYURVEDA_LOG_LEVEL") or "INFO").upper()

        cors = os.environ.get("AYURVEDA_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
