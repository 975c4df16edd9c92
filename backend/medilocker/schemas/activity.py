"""
Activity Pydantic schemas.
"""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ActivityCreate(BaseModel):
    """Schema for recording an activity on behalf of the caller."""

    action: str = Field(..., min_length=1, max_length=100)
    details: str = Field("", max_length=2000)

    model_config = ConfigDict(str_strip_whitespace=True)


class ActivityResponse(BaseModel):
    id: int
    action: str
    details: str
    timestamp: datetime

    model_config = ConfigDict(from_attributes=True)


class ActivityListResponse(BaseModel):
    success: bool = True
    activities: list[ActivityResponse]


class ActivityLoggedResponse(BaseModel):
    success: bool = True
    message: str = "Activity logged successfully"
