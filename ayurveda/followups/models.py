# -*- coding: utf-8 -*-
"""Follow-ups — Pydantic models."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class FollowUpStatus(str, Enum):
    pending = "pending"
    completed = "completed"
    missed = "missed"


class FollowUpCreateRequest(BaseModel):
    follow_up_date: Optional[date] = Field(None, description="YYYY-MM-DD; defaults to one interval from today")


class FollowUpCompleteRequest(BaseModel):
    feedback: str = Field(..., max_length=4000)
    progress_notes: Optional[str] = Field(None, max_length=4000)


class FollowUp(BaseModel):
    id: str
    user_id: str
    follow_up_date: str
    status: FollowUpStatus
    feedback: Optional[str] = None
    progress_notes: Optional[str] = None
    reminder_sent: bool = False
    created_at: str
    completed_at: Optional[str] = None
    overdue: bool = False
    days_until: Optional[int] = None


class FollowUpsResponse(BaseModel):
    count: int
    pending: int
    completed: int
    follow_ups: List[FollowUp]
