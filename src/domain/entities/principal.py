"""
Principal Entity

Identity record owned by the local identity provider.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class Principal(SQLModel, table=True):
    """
    Principal entity - an authenticated person.

    Business Rules:
    - Email must be unique across all principals
    - Password stored as bcrypt hash (cost factor 12)
    - session_version is bumped on sign-out; tokens carrying an older
      version are rejected
    """

    __tablename__ = "principals"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)
    session_version: int = Field(default=0)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
