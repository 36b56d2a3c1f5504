"""
Profile Entity

Per-principal details kept by the tenant store.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class Profile(SQLModel, table=True):
    """
    Profile entity - one-to-one with a principal.

    Business Rules:
    - Created lazily on first reference (ensure is idempotent)
    - active_organization_id selects the principal's active tenant
    - last_active_at is stamped on tenant switches
    """

    __tablename__ = "profiles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    principal_id: UUID = Field(unique=True, index=True, nullable=False)

    full_name: Optional[str] = Field(default=None, max_length=255)
    active_organization_id: Optional[UUID] = Field(
        default=None, foreign_key="organizations.id"
    )
    last_active_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
