# -*- coding: utf-8 -*-
"""Admin dashboard — Pydantic models."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..followups.models import FollowUp


class DoshaShare(BaseModel):
    count: int = Field(0, ge=0)
    percentage: float = Field(0.0, ge=0, le=100)


class DashboardStats(BaseModel):
    total_users: int
    completed_quizzes: int
    pending_follow_ups: int
    recent_activity: int
    dosha_distribution: Dict[str, DoshaShare]


class AdminUser(BaseModel):
    id: str
    full_name: str
    email: str
    created_at: str
    has_quiz: bool
    dosha: Optional[str] = None


class AdminUsersResponse(BaseModel):
    count: int
    users: List[AdminUser]


class AdminFollowUp(FollowUp):
    full_name: Optional[str] = None
    email: Optional[str] = None


class AdminFollowUpsResponse(BaseModel):
    count: int
    follow_ups: List[AdminFollowUp]


class MarkMissedRequest(BaseModel):
    grace_days: int = Field(0, ge=0, le=365)


class MarkMissedResponse(BaseModel):
    updated: int
