"""
UserPreferences model - stores per-user notification settings.
"""

from typing import Optional
from sqlmodel import SQLModel, Field


class UserPreferences(SQLModel, table=True):
    """Stores user preferences and settings."""
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(index=True, unique=True)
    email_address: Optional[str] = Field(default=None)
