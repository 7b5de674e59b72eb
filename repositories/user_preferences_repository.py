"""
UserPreferences Repository - data access layer for UserPreferences model.
"""

from typing import Optional
from sqlmodel import select

from db_engine import get_session
from models import UserPreferences


class UserPreferencesRepository:
    """Repository for UserPreferences CRUD operations."""

    @staticmethod
    def get_by_user(user_id: str) -> Optional[UserPreferences]:
        """Retrieve preferences for a user, or None if never saved."""
        with get_session() as session:
            statement = select(UserPreferences).where(UserPreferences.user_id == user_id)
            return session.exec(statement).first()

    @staticmethod
    def save_email(user_id: str, email: str) -> UserPreferences:
        """Save or update a user's notification email."""
        with get_session() as session:
            statement = select(UserPreferences).where(UserPreferences.user_id == user_id)
            prefs = session.exec(statement).first()

            if prefs:
                prefs.email_address = email
            else:
                prefs = UserPreferences(user_id=user_id, email_address=email)
            session.add(prefs)
            session.commit()
            session.refresh(prefs)
            return prefs
