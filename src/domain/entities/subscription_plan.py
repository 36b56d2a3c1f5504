"""
Subscription Plan Entity

Immutable reference data describing seats and price.
"""

from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class SubscriptionPlan(SQLModel, table=True):
    """Subscription plan - max_users is the organization's seat limit"""

    __tablename__ = "subscription_plans"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(unique=True, max_length=100)
    max_users: int = Field(nullable=False)
    # Minor currency units
    price: int = Field(default=0)
    currency: str = Field(default="USD", max_length=3)
