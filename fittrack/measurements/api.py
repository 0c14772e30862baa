# -*- coding: utf-8 -*-
"""Body measurements — API endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ..auth.security import get_current_user
from .models import BodyMeasurement, MeasurementCreateRequest, MeasurementDeleteResponse
from .storage import create_measurement, delete_measurement, get_body_measurements

router = APIRouter(prefix="/api/measurements", tags=["Measurements"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[BodyMeasurement], summary="List body measurements (newest first)")
def list_measurements(user: dict = Depends(get_current_user)):
    return get_body_measurements(user["id"])


@router.post("", response_model=BodyMeasurement, summary="Record a body measurement")
def record_measurement(request: MeasurementCreateRequest, user: dict = Depends(get_current_user)):
    measurement = create_measurement(user["id"], request)
    logger.info("User %s recorded measurement %s", user["id"], measurement.id)
    return measurement


@router.delete("/{measurement_id}", response_model=MeasurementDeleteResponse, summary="Delete a body measurement")
def remove_measurement(measurement_id: str, user: dict = Depends(get_current_user)):
    if not delete_measurement(user["id"], measurement_id):
        raise HTTPException(status_code=404, detail="Measurement not found")
    logger.info("User %s deleted measurement %s", user["id"], measurement_id)
    return MeasurementDeleteResponse()
