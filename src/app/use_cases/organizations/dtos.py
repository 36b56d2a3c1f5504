"""
Organization Administration DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel


class UpdateOrganizationCommand(BaseModel):
    """
    Partial update; only fields explicitly set are applied, so an explicit
    None clears an optional field
    """

    name: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    subscription_plan_id: Optional[UUID] = None
    subscription_start_date: Optional[datetime] = None
    subscription_end_date: Optional[datetime] = None
    is_blocked: Optional[bool] = None


class PlanInfo(BaseModel):
    id: str
    name: str
    max_users: int
    price: int
    currency: str


class MemberInfo(BaseModel):
    membership_id: str
    principal_id: str
    email: Optional[str]
    display_name: str
    role: str
    is_blocked: bool


class OrganizationResponse(BaseModel):
    id: str
    name: str
    registration_number: str
    tax_number: str
    email: Optional[str]
    address: Optional[str]
    phone: Optional[str]
    is_default: bool
    is_blocked: bool
    subscription_plan_id: Optional[str]
    subscription_start_date: Optional[datetime]
    subscription_end_date: Optional[datetime]


class OrganizationOverview(OrganizationResponse):
    plan: Optional[PlanInfo]
    member_count: int
    # None when the subscription reference cannot be resolved
    is_expired: Optional[bool]
    can_add_member: bool
    members: List[MemberInfo]


class OrganizationListResponse(BaseModel):
    organizations: List[OrganizationOverview]


def to_organization_response(organization) -> OrganizationResponse:
    return OrganizationResponse(**organization_fields(organization))


def organization_fields(organization) -> dict:
    return {
        "id": str(organization.id),
        "name": organization.name,
        "registration_number": organization.registration_number,
        "tax_number": organization.tax_number,
        "email": organization.email,
        "address": organization.address,
        "phone": organization.phone,
        "is_default": organization.is_default,
        "is_blocked": organization.is_blocked,
        "subscription_plan_id": (
            str(organization.subscription_plan_id)
            if organization.subscription_plan_id
            else None
        ),
        "subscription_start_date": organization.subscription_start_date,
        "subscription_end_date": organization.subscription_end_date,
    }
