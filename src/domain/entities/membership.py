"""
Membership Entity

Links a Principal to an Organization with a role.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import RoleName


class Membership(SQLModel, table=True):
    """
    Membership entity - links Principal to Organization with a role.

    Business Rules:
    - (principal_id, organization_id) must be unique
    - is_blocked is independent of the organization's own block flag
    - Super-admin memberships are never blocked or removed through
      tenant management
    - Removal is a hard delete
    """

    __tablename__ = "memberships"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    principal_id: UUID = Field(nullable=False, index=True)
    organization_id: UUID = Field(
        foreign_key="organizations.id", nullable=False, index=True
    )

    role_id: UUID = Field(foreign_key="roles.id", nullable=False)
    role_name: RoleName = Field(nullable=False)
    is_blocked: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index(
            "idx_membership_principal_organization",
            "principal_id",
            "organization_id",
            unique=True,
        ),
        Index("idx_membership_role_name", "role_name"),
    )
