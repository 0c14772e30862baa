# -*- coding: utf-8 -*-
"""Profile — API endpoints (names, dietary preference, daily goals)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..auth.security import get_current_user
from ..auth.storage import get_user_by_email, get_user_by_id, get_user_by_username, update_user
from .models import ProfileResponse, ProfileUpdateRequest

router = APIRouter(prefix="/api/user", tags=["Profile"])


def _profile(row: dict) -> ProfileResponse:
    return ProfileResponse.model_validate({k: row.get(k) for k in ProfileResponse.model_fields})


@router.get("/profile", response_model=ProfileResponse, summary="Get the current user's profile")
def get_profile(user: dict = Depends(get_current_user)):
    row = get_user_by_id(user["id"])
    if not row:
        raise HTTPException(status_code=404, detail="User not found")
    return _profile(row)


@router.put("/profile", response_model=ProfileResponse, summary="Update the current user's profile")
def update_profile(request: ProfileUpdateRequest, user: dict = Depends(get_current_user)):
    updates = request.model_dump(exclude_none=True, mode="json")
    if "email" in updates:
        other = get_user_by_email(updates["email"])
        if other and other["id"] != user["id"]:
            raise HTTPException(status_code=400, detail="Email already registered")
    if "username" in updates:
        other = get_user_by_username(updates["username"])
        if other and other["id"] != user["id"]:
            raise HTTPException(status_code=400, detail="Username already taken")

    row = update_user(user["id"], updates)
    if not row:
        raise HTTPException(status_code=404, detail="User not found")
    return _profile(row)
