# -*- coding: utf-8 -*-
"""Body measurements — Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..timeutil import normalize_timestamp


class MeasurementValues(BaseModel):
    weight: Optional[float] = Field(None, gt=0, description="kg")
    body_fat_percentage: Optional[float] = Field(None, ge=0, le=100)
    muscle_mass: Optional[float] = Field(None, gt=0, description="kg")
    waist: Optional[float] = Field(None, gt=0, description="cm")
    chest: Optional[float] = Field(None, gt=0, description="cm")
    bicep: Optional[float] = Field(None, gt=0, description="cm")
    thigh: Optional[float] = Field(None, gt=0, description="cm")
    height: Optional[float] = Field(None, gt=0, description="cm")


class MeasurementCreateRequest(MeasurementValues):
    date: str = Field(..., description="ISO8601 timestamp or YYYY-MM-DD")

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value: object) -> str:
        return normalize_timestamp(value)


class BodyMeasurement(MeasurementValues):
    id: str
    user_id: str
    date: str
    created_at: str


class MeasurementDeleteResponse(BaseModel):
    message: str = "Measurement deleted"
