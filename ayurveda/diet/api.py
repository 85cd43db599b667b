# -*- coding: utf-8 -*-
"""Diet — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..auth.security import current_user
from ..quiz.models import Dosha
from ..quiz.storage import require_latest_result
from .models import DietRecommendation, DietRecommendationResponse, DietTemplate, DietTemplatesResponse, DoshaScores
from .storage import get_or_create_recommendation, get_template
from .templates import DIET_TEMPLATES

router = APIRouter(prefix="/api/diet", tags=["Diet"])


@router.get("/recommendation", response_model=DietRecommendationResponse, summary="Diet chart for my Prakriti")
def recommendation(user: dict = Depends(current_user)):
    result = require_latest_result(user["id"])
    rec = get_or_create_recommendation(user["id"], result["dominant_dosha"])
    return DietRecommendationResponse(
        dominant_dosha=result["dominant_dosha"],
        secondary_dosha=result.get("secondary_dosha"),
        scores=DoshaScores(
            vata=result["vata_score"],
            pitta=result["pitta_score"],
            kapha=result["kapha_score"],
        ),
        recommendation=DietRecommendation(**rec),
    )


@router.get("/templates", response_model=DietTemplatesResponse, summary="All diet templates")
def templates(user: dict = Depends(current_user)):  # noqa: ARG001
    return DietTemplatesResponse(
        templates={dosha: DietTemplate(**get_template(dosha)) for dosha in DIET_TEMPLATES}
    )


@router.get("/templates/{dosha}", response_model=DietTemplate, summary="Diet template for a dosha")
def template(dosha: Dosha, user: dict = Depends(current_user)):  # noqa: ARG001
    return DietTemplate(**get_template(dosha.value))
