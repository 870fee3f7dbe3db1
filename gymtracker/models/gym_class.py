"""Gym class attendance record models for gymtracker."""

import re
from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def validate_class_date(value: str) -> str:
    """Check that a value is a real calendar date written as YYYY-MM-DD.

    Args:
        value: Candidate date string

    Returns:
        The unchanged date string

    Raises:
        ValueError: If the string is malformed or names a non-existent day
    """
    if not DATE_PATTERN.fullmatch(value):
        raise ValueError("Date must be in YYYY-MM-DD format")
    try:
        date.fromisoformat(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid calendar date")
    return value


class GymClass(BaseModel):
    """One attendance entry owned by a user."""

    id: str = Field(..., description="Unique record identifier (UUID v4)")
    user_id: str = Field(..., alias="userId", description="User ID who owns this record")
    date: str = Field(..., description="Class date (YYYY-MM-DD)")
    attendance: int = Field(..., ge=0, description="Number of participants")
    notes: Optional[str] = Field(None, description="Free-text notes")
    created_at: datetime = Field(..., alias="createdAt", description="Record creation timestamp")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True


class GymClassCreate(BaseModel):
    """Payload for recording a new class."""

    date: str = Field(..., description="Class date (YYYY-MM-DD)")
    attendance: int = Field(..., ge=0, strict=True, description="Number of participants")
    notes: Optional[str] = Field(None, description="Free-text notes")

    @field_validator("date")
    @classmethod
    def check_date(cls, v: str) -> str:
        return validate_class_date(v)


class GymClassUpdate(BaseModel):
    """Partial payload for editing a class. Only fields sent are applied."""

    date: Optional[str] = Field(None, description="Class date (YYYY-MM-DD)")
    attendance: Optional[int] = Field(None, ge=0, strict=True, description="Number of participants")
    notes: Optional[str] = Field(None, description="Free-text notes (null clears)")

    @field_validator("date", "attendance", mode="before")
    @classmethod
    def reject_null(cls, v):
        # notes may be cleared; date and attendance may only be replaced
        if v is None:
            raise ValueError("Field may be omitted but not null")
        return v

    @field_validator("date")
    @classmethod
    def check_date(cls, v: str) -> str:
        return validate_class_date(v)
