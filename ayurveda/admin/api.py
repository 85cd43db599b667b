# -*- coding: utf-8 -*-
"""Admin dashboard endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from ..auth.security import require_admin
from ..followups.models import FollowUpStatus
from ..followups.storage import mark_missed
from .models import (
    AdminFollowUp,
    AdminFollowUpsResponse,
    AdminUser,
    AdminUsersResponse,
    DashboardStats,
    MarkMissedRequest,
    MarkMissedResponse,
)
from .storage import get_stats, list_all_follow_ups, list_users

router = APIRouter(prefix="/api/admin", tags=["Admin"], dependencies=[Depends(require_admin)])


@router.get("/stats", response_model=DashboardStats, summary="Dashboard counters")
def stats():
    return DashboardStats.model_validate(get_stats())


@router.get("/users", response_model=AdminUsersResponse, summary="All users with quiz status")
def users():
    items = [AdminUser(**row) for row in list_users()]
    return AdminUsersResponse(count=len(items), users=items)


@router.get("/follow-ups", response_model=AdminFollowUpsResponse, summary="Follow-ups across users")
def follow_ups(status: FollowUpStatus | None = Query(default=None)):
    items = [AdminFollowUp(**row) for row in list_all_follow_ups(status.value if status else None)]
    return AdminFollowUpsResponse(count=len(items), follow_ups=items)


@router.post("/follow-ups/mark-missed", response_model=MarkMissedResponse, summary="Mark overdue follow-ups as missed")
def sweep_missed(request: MarkMissedRequest):
    return MarkMissedResponse(updated=mark_missed(request.grace_days))
