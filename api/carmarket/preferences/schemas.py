"""
Preference API schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from carmarket.storage.base import VEHICLE_ID_MAX, VEHICLE_ID_MIN


class PreferenceRequest(BaseModel):
    username: str | None = None
    vehicleID: int | None = Field(default=None, ge=VEHICLE_ID_MIN, le=VEHICLE_ID_MAX)
    likesOrDislikes: str | None = None
