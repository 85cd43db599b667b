# -*- coding: utf-8 -*-
"""Auth — password hashing, session tokens and request dependencies.

Tokens are HS256 JWTs whose claims carry the user id, email and admin flag.
They are read from ``Authorization: Bearer`` first, then from the session cookie.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
import os
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping, Optional

from fastapi import HTTPException, Request
from pydantic import BaseModel, ValidationError

from ..config import settings
from .storage import get_user_by_id

TOKEN_COOKIE_NAME = "ayurveda_token"

_HASH_SCHEME = "pbkdf2_sha256"
_HASH_ITERATIONS = 200_000
_TOKEN_HEADER = {"alg": "HS256", "typ": "JWT"}


class TokenClaims(BaseModel):
    sub: str
    email: str
    is_admin: bool = False
    iat: int
    exp: int


def _b64(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def _unb64(text: str) -> bytes:
    return base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)


def hash_password(password: str) -> str:
    salt = os.urandom(16)
    digest = _derive(password, salt, _HASH_ITERATIONS)
    return "$".join([_HASH_SCHEME, str(_HASH_ITERATIONS), _b64(salt), _b64(digest)])


def verify_password(password: str, stored: str) -> bool:
    parts = stored.split("$")
    if len(parts) != 4 or parts[0] != _HASH_SCHEME:
        return False
    try:
        iterations = int(parts[1])
        salt, expected = _unb64(parts[2]), _unb64(parts[3])
    except ValueError:
        return False
    return hmac.compare_digest(_derive(password, salt, iterations), expected)


def _signature(signing_input: str) -> str:
    mac = hmac.new(settings.jwt_secret.encode("utf-8"), signing_input.encode("ascii"), hashlib.sha256)
    return _b64(mac.digest())


def issue_token(user: Mapping[str, Any], ttl: Optional[timedelta] = None) -> str:
    """Sign a session token for a user row."""
    issued = datetime.now(timezone.utc)
    lifetime = ttl if ttl is not None else timedelta(days=int(settings.token_ttl_days))
    claims = TokenClaims(
        sub=user["id"],
        email=user["email"],
        is_admin=bool(user.get("is_admin")),
        iat=int(issued.timestamp()),
        exp=int((issued + lifetime).timestamp()),
    )
    segments = [
        _b64(json.dumps(_TOKEN_HEADER, separators=(",", ":")).encode("utf-8")),
        _b64(claims.model_dump_json().encode("utf-8")),
    ]
    signing_input = ".".join(segments)
    return f"{signing_input}.{_signature(signing_input)}"


def read_claims(token: str) -> TokenClaims:
    segments = token.split(".")
    if len(segments) != 3 or not hmac.compare_digest(_signature(".".join(segments[:2])), segments[2]):
        raise HTTPException(status_code=401, detail="Invalid token")
    try:
        claims = TokenClaims.model_validate(json.loads(_unb64(segments[1])))
    except (ValueError, ValidationError) as exc:
        raise HTTPException(status_code=401, detail="Invalid token") from exc
    if claims.exp < int(datetime.now(timezone.utc).timestamp()):
        raise HTTPException(status_code=401, detail="Token expired")
    return claims


def _token_from(request: Request) -> Optional[str]:
    auth = request.headers.get("authorization") or ""
    if auth.lower().startswith("bearer "):
        return auth.split(" ", 1)[1].strip() or None
    return request.cookies.get(TOKEN_COOKIE_NAME) or None


def current_user(request: Request) -> Dict[str, Any]:
    """Resolve the signed-in user; the auth middleware and route dependencies share it."""
    user = getattr(request.state, "user", None)
    if user:
        return user

    token = _token_from(request)
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")
    claims = read_claims(token)
    user = get_user_by_id(claims.sub)
    if not user:
        raise HTTPException(status_code=401, detail="User not found")

    request.state.user = user
    request.state.claims = claims
    return user


def require_admin(request: Request) -> Dict[str, Any]:
    # Both the token claim and the stored flag must hold, so a revoke applies immediately.
    user = current_user(request)
    claims: Optional[TokenClaims] = getattr(request.state, "claims", None)
    if not (claims and claims.is_admin and user.get("is_admin")):
        raise HTTPException(status_code=403, detail="Admin access required")
    return user
