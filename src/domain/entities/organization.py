"""
Organization Entity

Represents a tenant: an isolated customer account.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Organization(SQLModel, table=True):
    """
    Organization entity - a tenant.

    Business Rules:
    - registration_number and tax_number are unique across tenants
    - Exactly one organization is marked is_default; it is seeded once and is
      exempt from blocking and seat enforcement
    - is_blocked blocks every member without touching membership rows
    - Expiration is derived from subscription_end_date on every read
    """

    __tablename__ = "organizations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)

    registration_number: str = Field(unique=True, max_length=100)
    tax_number: str = Field(unique=True, max_length=100)

    # Contact fields
    email: Optional[str] = Field(default=None, max_length=255)
    address: Optional[str] = Field(default=None, max_length=500)
    phone: Optional[str] = Field(default=None, max_length=50)

    is_default: bool = Field(default=False)
    is_blocked: bool = Field(default=False)

    # Subscription
    subscription_plan_id: Optional[UUID] = Field(
        default=None, foreign_key="subscription_plans.id"
    )
    subscription_start_date: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )
    subscription_end_date: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_organization_is_default", "is_default"),)
