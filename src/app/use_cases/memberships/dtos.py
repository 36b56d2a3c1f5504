"""
Membership Use Case DTOs (Data Transfer Objects)
"""

from pydantic import BaseModel


class MembershipResponse(BaseModel):
    """A membership row as seen by tenant administration"""

    id: str
    principal_id: str
    organization_id: str
    role: str
    is_blocked: bool


class RemoveMemberResponse(BaseModel):
    """Response for remove member use case"""

    status: str
    membership_id: str
    # The removed tenant is still the principal's active one; callers
    # decide how to resolve the dangling reference
    was_active_organization: bool


def to_membership_response(membership) -> MembershipResponse:
    return MembershipResponse(
        id=str(membership.id),
        principal_id=str(membership.principal_id),
        organization_id=str(membership.organization_id),
        role=membership.role_name.value,
        is_blocked=membership.is_blocked,
    )
