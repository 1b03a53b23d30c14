import datetime as dt
from typing import Dict, Optional

from pydantic import BaseModel, field_validator

from photoboard.schemas.enum import Grade


class PhotoFeatures(BaseModel):
    """Metadata submitted alongside an uploaded image."""

    date: Optional[dt.date] = None
    grade: Optional[Grade] = None
    order: Optional[str] = None
    student: bool = False

    @field_validator("date", "grade", "order", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("student", mode="before")
    @classmethod
    def parse_student(cls, value):
        # Only an explicit true marks a student; anything else is False.
        return value is True or value == "true"


class PhotoResponse(BaseModel):
    id: int
    filename: str
    url: Optional[str] = None
    date: Optional[dt.date] = None
    grade: Optional[str] = None
    order: Optional[str] = None
    student: bool = False
    created_at: Optional[dt.datetime] = None
    pixel_width: Optional[int] = None
    pixel_height: Optional[int] = None

    class Config:
        from_attributes = True


class DeleteResponse(BaseModel):
    success: bool
    message: str


class StatsResponse(BaseModel):
    total: int
    students: int
    by_grade: Dict[str, int] = {}
