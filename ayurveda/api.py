# -*- coding: utf-8 -*-
"""
Ayurveda wellness API.

Prakriti quiz, diet charts, daily schedules, follow-ups and the admin dashboard.
Run with: uvicorn ayurveda.api:app
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .admin.api import router as admin_router
from .app_db import init_app_db
from .auth.api import router as auth_router
from .auth.security import current_user
from .config import configure_logging, settings
from .diet.api import router as diet_router
from .followups.api import router as followups_router
from .profiles.api import router as profiles_router
from .quiz.api import router as quiz_router
from .schedule.api import router as schedule_router

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Ayurveda Wellness",
    description="Prakriti assessment with diet and daily routine recommendations",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def _startup_init_db() -> None:
    init_app_db(settings.app_db_path)
    logger.info("App database ready at %s", settings.app_db_path)


# Ensure the app DB exists even when lifespan events are not triggered (e.g. some test clients).
init_app_db(settings.app_db_path)


_AUTH_EXEMPT_PREFIXES = (
    "/api/auth/login",
    "/api/auth/register",
    "/api/docs",
    "/api/redoc",
    "/api/openapi.json",
)


@app.middleware("http")
async def _auth_gate(request: Request, call_next):
    path = request.url.path
    if path.startswith("/api") and path != "/api/health" and not any(path.startswith(p) for p in _AUTH_EXEMPT_PREFIXES):
        try:
            current_user(request)
        except HTTPException as exc:
            return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
    return await call_next(request)


app.include_router(auth_router)
app.include_router(profiles_router)
app.include_router(quiz_router)
app.include_router(diet_router)
app.include_router(schedule_router)
app.include_router(followups_router)
app.include_router(admin_router)


@app.get("/api/health")
def health() -> dict:
    return {"ok": True}
