"""User data model for gymtracker."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class User(BaseModel):
    """User model for gymtracker."""

    id: str = Field(..., description="Unique user identifier (identity subject)")
    email: Optional[str] = Field(None, description="User email address")
    first_name: Optional[str] = Field(None, alias="firstName", description="Given name")
    last_name: Optional[str] = Field(None, alias="lastName", description="Family name")
    profile_image_url: Optional[str] = Field(None, alias="profileImageUrl", description="Avatar URL")
    created_at: datetime = Field(..., alias="createdAt", description="User creation timestamp")
    updated_at: datetime = Field(..., alias="updatedAt", description="User last update timestamp")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True


class UpsertUser(BaseModel):
    """Fields accepted when creating or replacing a user."""

    id: str
    email: Optional[str] = None
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    profile_image_url: Optional[str] = Field(None, alias="profileImageUrl")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
