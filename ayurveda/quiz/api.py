# -*- coding: utf-8 -*-
"""Quiz — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..auth.security import current_user
from .models import PrakritiQuestion, PrakritiResult, QuestionsResponse, QuizSubmitRequest, ResultsResponse
from .storage import get_latest_result, list_questions, list_results, save_result

router = APIRouter(prefix="/api/quiz", tags=["Quiz"])


@router.get("/questions", response_model=QuestionsResponse, summary="List Prakriti questions")
def questions(user: dict = Depends(current_user)):  # noqa: ARG001
    items = [PrakritiQuestion(**q) for q in list_questions()]
    return QuestionsResponse(count=len(items), questions=items)


@router.post("/submit", response_model=PrakritiResult, summary="Submit quiz answers")
def submit(request: QuizSubmitRequest, user: dict = Depends(current_user)):
    result = save_result(user_id=user["id"], answers=request.answers)
    return PrakritiResult(**result)


@router.get("/results/latest", response_model=PrakritiResult, summary="Latest Prakriti result")
def latest_result(user: dict = Depends(current_user)):
    result = get_latest_result(user["id"])
    if not result:
        raise HTTPException(status_code=404, detail="No quiz result yet")
    return PrakritiResult(**result)


@router.get("/results", response_model=ResultsResponse, summary="Prakriti result history")
def results(user: dict = Depends(current_user)):
    items = [PrakritiResult(**r) for r in list_results(user["id"])]
    return ResultsResponse(count=len(items), results=items)
