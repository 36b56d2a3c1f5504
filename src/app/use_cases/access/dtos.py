"""
Access Use Case DTOs (Data Transfer Objects)

All Response classes for session and access-state use cases.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class TenantAccess(BaseModel):
    """A principal's standing in one organization"""

    organization_id: str
    name: str
    role: str
    is_default: bool
    membership_blocked: bool
    organization_blocked: bool
    # membership_blocked OR organization_blocked, never for the default tenant
    is_blocked: bool
    # None when the subscription reference cannot be resolved
    is_expired: Optional[bool]
    subscription_end_date: Optional[datetime] = None


class AccessStateResponse(BaseModel):
    """Effective state of a principal, recomputed on every read"""

    principal_id: str
    full_name: Optional[str]
    active_organization: Optional[TenantAccess]
    # Profile points at a tenant the principal no longer belongs to
    dangling_active_organization_id: Optional[str] = None
    is_super_admin: bool
    organizations: List[TenantAccess]


class SwitchTenantResponse(BaseModel):
    organization_id: str
    name: str
    role: str
    is_blocked: bool


class ProfileResponse(BaseModel):
    principal_id: str
    full_name: Optional[str]
    active_organization_id: Optional[str]
    last_active_at: Optional[datetime]


class TenantInfo(BaseModel):
    id: str
    name: str
    role: str


class SignInResponse(BaseModel):
    access_token: str
    principal_id: str
    active_organization_id: Optional[str]
    organizations: List[TenantInfo]


class SignOutResponse(BaseModel):
    status: str
