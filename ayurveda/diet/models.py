# -*- coding: utf-8 -*-
"""Diet — Pydantic models."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..quiz.models import Dosha


class MealSuggestions(BaseModel):
    breakfast: List[str] = Field(default_factory=list)
    lunch: List[str] = Field(default_factory=list)
    dinner: List[str] = Field(default_factory=list)
    snacks: List[str] = Field(default_factory=list)


class DietTemplate(BaseModel):
    dosha_type: Dosha
    foods_to_favor: List[str] = Field(default_factory=list)
    foods_to_avoid: List[str] = Field(default_factory=list)
    meal_suggestions: MealSuggestions = MealSuggestions()
    lifestyle_tips: List[str] = Field(default_factory=list)


class DietRecommendation(DietTemplate):
    id: str
    user_id: str
    created_at: str


class DoshaScores(BaseModel):
    vata: int = Field(0, ge=0)
    pitta: int = Field(0, ge=0)
    kapha: int = Field(0, ge=0)


class DietRecommendationResponse(BaseModel):
    dominant_dosha: Dosha
    secondary_dosha: Optional[Dosha] = None
    scores: DoshaScores
    recommendation: DietRecommendation


class DietTemplatesResponse(BaseModel):
    templates: Dict[str, DietTemplate]
