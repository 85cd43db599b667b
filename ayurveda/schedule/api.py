# -*- coding: utf-8 -*-
"""Daily schedule endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..auth.security import current_user
from ..quiz.models import Dosha
from ..quiz.storage import require_latest_result
from .models import DailySchedule, ScheduleTemplate, ScheduleUpdateRequest
from .storage import get_or_create_schedule, get_template, reset_schedule, update_schedule

router = APIRouter(prefix="/api/schedule", tags=["Schedule"])


@router.get("", response_model=DailySchedule, summary="Get my daily schedule")
def read_schedule(user: dict = Depends(current_user)):
    result = require_latest_result(user["id"])
    return DailySchedule(**get_or_create_schedule(user["id"], result["dominant_dosha"]))


@router.put("", response_model=DailySchedule, summary="Save my daily schedule")
def save_schedule(request: ScheduleUpdateRequest, user: dict = Depends(current_user)):
    return DailySchedule(**update_schedule(user["id"], request.model_dump()))


@router.post("/reset", response_model=DailySchedule, summary="Reset schedule to my current dosha template")
def reset(user: dict = Depends(current_user)):
    result = require_latest_result(user["id"])
    return DailySchedule(**reset_schedule(user["id"], result["dominant_dosha"]))


@router.get("/templates/{dosha}", response_model=ScheduleTemplate, summary="Schedule template for a dosha")
def template(dosha: Dosha, user: dict = Depends(current_user)):  # noqa: ARG001
    return ScheduleTemplate(**get_template(dosha.value))
