# -*- coding: utf-8 -*-
"""Auth — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from ..config import settings
from .models import Account, LoginRequest, RegisterRequest, SessionResponse
from .security import TOKEN_COOKIE_NAME, current_user, hash_password, issue_token, verify_password
from .storage import create_user, get_user_by_email

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _start_session(response: Response, user: dict) -> SessionResponse:
    """Issue a token, mirror it into the httpOnly cookie, and return both."""
    token = issue_token(user)
    response.set_cookie(
        TOKEN_COOKIE_NAME,
        token,
        max_age=int(settings.token_ttl_days) * 86400,
        path="/",
        httponly=True,
        secure=bool(settings.cookie_secure),
        samesite="lax",
    )
    return SessionResponse(user=Account.from_row(user), token=token)


@router.post("/register", response_model=SessionResponse, summary="Create an account and its profile")
def register(request: RegisterRequest, response: Response):
    if get_user_by_email(request.email):
        raise HTTPException(status_code=400, detail="Email already registered")
    user = create_user(
        email=request.email,
        password_hash=hash_password(request.password),
        full_name=request.full_name,
    )
    return _start_session(response, user)


@router.post("/login", response_model=SessionResponse, summary="Sign in")
def login(request: LoginRequest, response: Response):
    user = get_user_by_email(request.email)
    if user is None or not verify_password(request.password, user["password_hash"]):
        raise HTTPException(status_code=401, detail="Invalid email or password")
    return _start_session(response, user)


@router.post("/logout", summary="Sign out")
def logout(response: Response):
    response.delete_cookie(TOKEN_COOKIE_NAME, path="/")
    return {"status": "ok"}


@router.get("/me", response_model=Account, summary="Current account")
def me(user: dict = Depends(current_user)):
    return Account.from_row(user)
