# -*- coding: utf-8 -*-
"""Auth — Pydantic models."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, field_validator


class Credentials(BaseModel):
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        return value.strip().lower()


class RegisterRequest(Credentials):
    # Matches the sign-up form's six-character minimum.
    password: str = Field(..., min_length=6, max_length=128)
    full_name: str = Field(..., min_length=1, max_length=128)


class LoginRequest(Credentials):
    pass


class Account(BaseModel):
    id: str
    email: str
    full_name: Optional[str] = None
    is_admin: bool = False
    created_at: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Account":
        return cls(
            id=row["id"],
            email=row["email"],
            full_name=row.get("full_name"),
            is_admin=bool(row.get("is_admin")),
            created_at=row["created_at"],
        )


class SessionResponse(BaseModel):
    user: Account
    token: str
