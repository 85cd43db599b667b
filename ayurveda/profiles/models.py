# -*- coding: utf-8 -*-
"""Profiles — Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Gender(str, Enum):
    male = "male"
    female = "female"
    other = "other"


class ProfileUpdateRequest(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=128)
    date_of_birth: Optional[str] = Field(None, pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD")
    gender: Optional[Gender] = None
    phone: Optional[str] = Field(None, max_length=32)
    height: Optional[float] = Field(None, ge=0, le=300, description="cm")
    weight: Optional[float] = Field(None, ge=0, le=500, description="kg")
    medical_conditions: Optional[str] = Field(None, max_length=2000)
    allergies: Optional[str] = Field(None, max_length=2000)


class Profile(BaseModel):
    id: str
    full_name: str
    date_of_birth: Optional[str] = None
    gender: Optional[Gender] = None
    phone: Optional[str] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    medical_conditions: Optional[str] = None
    allergies: Optional[str] = None
    created_at: str
    updated_at: str
