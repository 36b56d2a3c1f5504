"""
Provisioning Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- *Command: Input to use case (validated business intent)
- *Response: Output from use case (structured result)
"""

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class CreateOrganizationCommand(BaseModel):
    """
    Create organization command - principal becomes Admin of a new tenant

    The principal is signed in when the credentials match an existing
    account, otherwise created.
    """

    organization_name: str
    registration_number: str
    tax_number: str
    address: Optional[str] = None
    phone: Optional[str] = None
    contact_email: Optional[str] = None
    email: str
    password: str
    full_name: Optional[str] = None


class JoinOrganizationCommand(BaseModel):
    """Join organization command - principal becomes Member of an existing tenant"""

    organization_id: UUID
    email: str
    password: str
    full_name: Optional[str] = None
    # False: authenticate an existing principal instead of creating one
    new_principal: bool = True


# ============================================================================
# Response DTOs
# ============================================================================


class OrganizationSummary(BaseModel):
    id: str
    name: str


class ProvisioningResponse(BaseModel):
    """Result of a completed create or join flow"""

    principal_id: str
    principal_created: bool
    organization: OrganizationSummary
    membership_id: str
    role: str


class JoinableOrganizationsResponse(BaseModel):
    organizations: List[OrganizationSummary]
