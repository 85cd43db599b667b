# -*- coding: utf-8 -*-
"""Quiz — Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class Dosha(str, Enum):
    vata = "vata"
    pitta = "pitta"
    kapha = "kapha"


class QuestionCategory(str, Enum):
    physical = "physical"
    mental = "mental"
    behavioral = "behavioral"


class PrakritiQuestion(BaseModel):
    id: str
    category: QuestionCategory
    question: str
    vata_option: str
    pitta_option: str
    kapha_option: str
    order_number: int


class QuestionsResponse(BaseModel):
    count: int
    questions: List[PrakritiQuestion]


class QuizSubmitRequest(BaseModel):
    answers: Dict[str, str] = Field(..., description="question_id -> vata | pitta | kapha")


class PrakritiResult(BaseModel):
    id: str
    user_id: str
    vata_score: int = Field(0, ge=0)
    pitta_score: int = Field(0, ge=0)
    kapha_score: int = Field(0, ge=0)
    dominant_dosha: Dosha
    secondary_dosha: Optional[Dosha] = None
    quiz_answers: Dict[str, str] = Field(default_factory=dict)
    completed_at: str


class ResultsResponse(BaseModel):
    count: int
    results: List[PrakritiResult]
