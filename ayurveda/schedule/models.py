# -*- coding: utf-8 -*-
"""Daily schedule — Pydantic models."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..quiz.models import Dosha

_CLOCK = r"^([01]\d|2[0-3]):[0-5]\d$"


class ScheduleFields(BaseModel):
    wake_time: Optional[str] = Field(None, pattern=_CLOCK, description="HH:MM")
    morning_routine: List[str] = Field(default_factory=list)
    meal_times: Dict[str, str] = Field(default_factory=dict, description="meal -> time window")
    exercise_schedule: List[str] = Field(default_factory=list)
    meditation_times: List[str] = Field(default_factory=list)
    sleep_time: Optional[str] = Field(None, pattern=_CLOCK, description="HH:MM")


class ScheduleTemplate(ScheduleFields):
    dosha_type: Dosha


class ScheduleUpdateRequest(ScheduleFields):
    pass


class DailySchedule(ScheduleFields):
    id: str
    user_id: str
    dosha_type: Optional[Dosha] = None
    created_at: str
    updated_at: str
