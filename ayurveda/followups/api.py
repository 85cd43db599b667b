# -*- coding: utf-8 -*-
"""Follow-ups — API endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from ..auth.security import current_user
from .models import FollowUp, FollowUpCompleteRequest, FollowUpCreateRequest, FollowUpsResponse
from .storage import complete_follow_up, create_follow_up, list_follow_ups

router = APIRouter(prefix="/api/follow-ups", tags=["Follow-ups"])


@router.get("", response_model=FollowUpsResponse, summary="List my follow-ups")
def list_mine(user: dict = Depends(current_user)):
    items = [FollowUp(**row) for row in list_follow_ups(user["id"])]
    return FollowUpsResponse(
        count=len(items),
        pending=sum(1 for f in items if f.status == "pending"),
        completed=sum(1 for f in items if f.status == "completed"),
        follow_ups=items,
    )


@router.post("", response_model=FollowUp, summary="Schedule a follow-up")
def create(request: Optional[FollowUpCreateRequest] = None, user: dict = Depends(current_user)):
    due = request.follow_up_date if request else None
    return FollowUp(**create_follow_up(user["id"], due))


@router.post("/{follow_up_id}/complete", response_model=FollowUp, summary="Complete a follow-up with feedback")
def complete(follow_up_id: str, request: FollowUpCompleteRequest, user: dict = Depends(current_user)):
    row = complete_follow_up(
        user["id"],
        follow_up_id,
        feedback=request.feedback,
        progress_notes=request.progress_notes,
    )
    return FollowUp(**row)
