# -*- coding: utf-8 -*-
"""Profiles — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..auth.security import current_user
from .models import Profile, ProfileUpdateRequest
from .storage import get_profile, upsert_profile

router = APIRouter(prefix="/api/profile", tags=["Profile"])


@router.get("", response_model=Profile, summary="Get my profile")
def read_profile(user: dict = Depends(current_user)):
    profile = get_profile(user["id"])
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return Profile(**profile)


@router.put("", response_model=Profile, summary="Update my profile")
def update_profile(request: ProfileUpdateRequest, user: dict = Depends(current_user)):
    return Profile(**upsert_profile(user["id"], request))
