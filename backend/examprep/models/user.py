"""User profile model."""

from enum import Enum

from sqlalchemy import Column, DateTime, String
from sqlalchemy.sql import func

from examprep.db.base import Base


class UserRole(str, Enum):
    """User role enum."""

    STUDENT = "student"
    ADMIN = "admin"


class UserProfile(Base):
    """Application profile for an auth-provider user. `id` is the provider's user id."""

    __tablename__ = "user_profiles"

    id = Column(String(36), primary_key=True)
    full_name = Column(String(255), nullable=True)
    role = Column(String(20), nullable=False, default=UserRole.STUDENT.value)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
