# -*- coding: utf-8 -*-
"""Auth — resolving the calling user for API requests.

The session token is read from ``Authorization: Bearer <token>`` first and
from the ``fittrack_token`` cookie otherwise. Every failure is a 401.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, Request

from .storage import get_user_by_id
from .tokens import InvalidTokenError, read_token

logger = logging.getLogger(__name__)

TOKEN_COOKIE_NAME = "fittrack_token"


def request_token(request: Request) -> Optional[str]:
    scheme, _, value = (request.headers.get("authorization") or "").partition(" ")
    if scheme.lower() == "bearer":
        return value.strip() or None
    return request.cookies.get(TOKEN_COOKIE_NAME) or None


def authenticate_request(request: Request) -> Dict[str, Any]:
    """Users-table row of the caller; cached on ``request.state.user``."""
    cached = getattr(request.state, "user", None)
    if cached:
        return cached

    token = request_token(request)
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")
    try:
        claims = read_token(token)
    except InvalidTokenError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc

    user = get_user_by_id(claims.sub)
    if not user:
        logger.info("Token for unknown user %s rejected", claims.sub)
        raise HTTPException(status_code=401, detail="User not found")

    request.state.user = user
    return user


def get_current_user(user: Dict[str, Any] = Depends(authenticate_request)) -> Dict[str, Any]:
    return user
