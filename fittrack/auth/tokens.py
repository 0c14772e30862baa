# -*- coding: utf-8 -*-
"""Auth — session tokens.

A session token is a compact HS256 JWT whose claims identify the FitTrack user
(``sub`` = user id) and carry issue/expiry times as unix seconds. Tokens are
signed with ``settings.jwt_secret`` and live ``settings.token_ttl_days``.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError

from ..config import settings


class InvalidTokenError(ValueError):
    pass


class TokenClaims(BaseModel):
    sub: str = Field(..., min_length=1)
    email: str
    iat: int
    exp: int


def b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def b64url_decode(data: str) -> bytes:
    return base64.urlsafe_b64decode(data + "=" * (-len(data) % 4))


_HEADER = b64url_encode(json.dumps({"alg": "HS256", "typ": "JWT"}, separators=(",", ":")).encode("utf-8"))


def _sign(signing_input: str, secret: str) -> str:
    mac = hmac.new(secret.encode("utf-8"), signing_input.encode("utf-8"), hashlib.sha256)
    return b64url_encode(mac.digest())


def issue_token(
    user: Dict[str, Any],
    *,
    secret: Optional[str] = None,
    ttl: Optional[timedelta] = None,
    now: Optional[datetime] = None,
) -> str:
    """Sign a token for a users-table row."""
    issued = now or datetime.now(timezone.utc)
    expires = issued + (ttl if ttl is not None else timedelta(days=int(settings.token_ttl_days)))
    claims = TokenClaims(
        sub=user["id"],
        email=user["email"],
        iat=int(issued.timestamp()),
        exp=int(expires.timestamp()),
    )
    signing_input = f"{_HEADER}.{b64url_encode(claims.model_dump_json().encode('utf-8'))}"
    return f"{signing_input}.{_sign(signing_input, secret or settings.jwt_secret)}"


def read_token(token: str, *, secret: Optional[str] = None, now: Optional[datetime] = None) -> TokenClaims:
    """Verify signature and expiry; raises InvalidTokenError on any problem."""
    parts = token.split(".")
    if len(parts) != 3 or parts[0] != _HEADER:
        raise InvalidTokenError("Malformed token")
    signing_input = f"{parts[0]}.{parts[1]}"
    expected = _sign(signing_input, secret or settings.jwt_secret)
    if not hmac.compare_digest(expected.encode("ascii"), parts[2].encode("utf-8")):
        raise InvalidTokenError("Bad token signature")
    try:
        claims = TokenClaims.model_validate_json(b64url_decode(parts[1]))
    except (ValueError, ValidationError) as exc:
        raise InvalidTokenError("Malformed token claims") from exc
    current = now or datetime.now(timezone.utc)
    if claims.exp <= int(current.timestamp()):
        raise InvalidTokenError("Token expired")
    return claims
