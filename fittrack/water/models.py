# -*- coding: utf-8 -*-
"""Water intake — Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from ..timeutil import normalize_timestamp


class WaterIntakeCreateRequest(BaseModel):
    date: str = Field(..., description="ISO8601 timestamp or YYYY-MM-DD")
    amount: float = Field(..., gt=0, description="liters")

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value: object) -> str:
        return normalize_timestamp(value)


class WaterIntake(BaseModel):
    id: str
    user_id: str
    date: str
    amount: float
    created_at: str
