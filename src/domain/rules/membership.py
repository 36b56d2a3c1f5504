"""
Membership Invariant Checker

Validates a proposed membership insert against a snapshot of current state.
The snapshot is read separately from the eventual insert, so a positive
answer is advisory under concurrent writers; the storage unique index is the
authoritative backstop for duplicates.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.domain.entities import AssignmentPath, Membership, RoleName
from src.domain.errors import (
    DUPLICATE_MEMBERSHIP,
    ROLE_NOT_ASSIGNABLE,
    SEAT_LIMIT_EXCEEDED,
    SUBSCRIPTION_PLAN_NOT_FOUND,
)


@dataclass(frozen=True)
class MembershipSnapshot:
    """State of the target organization as read just before the insert"""

    # Memberships already linking this principal to this organization
    existing: List[Membership] = field(default_factory=list)
    # All memberships of the organization, block status irrelevant
    member_count: int = 0
    # None when the organization has no resolvable plan
    seat_limit: Optional[int] = None
    is_default_organization: bool = False


def check_membership_insert(
    principal_id: UUID,
    organization_id: UUID,
    role: RoleName,
    snapshot: MembershipSnapshot,
    path: AssignmentPath = AssignmentPath.self_service,
) -> Result[None]:
    """
    Decide whether (principal_id, organization_id, role) may be inserted.

    Checks, in order: role assignability, uniqueness, seat limit.

    Returns:
        Return.ok(None) when allowed, otherwise an Error with one of
        ROLE_NOT_ASSIGNABLE, DUPLICATE_MEMBERSHIP, SEAT_LIMIT_EXCEEDED or
        SUBSCRIPTION_PLAN_NOT_FOUND
    """
    if path == AssignmentPath.self_service and role == RoleName.super_admin:
        return Return.err(
            Error(
                ROLE_NOT_ASSIGNABLE,
                "Super-admin cannot be assigned through self-service",
            )
        )

    # Creator-only: a privileged role goes to the first member of a new tenant
    if path == AssignmentPath.organization_creation and snapshot.member_count > 0:
        return Return.err(
            Error(
                ROLE_NOT_ASSIGNABLE,
                f"{role.value} can only be assigned to the creator of a new organization",
            )
        )

    for membership in snapshot.existing:
        if (
            membership.principal_id == principal_id
            and membership.organization_id == organization_id
        ):
            return Return.err(
                Error(
                    DUPLICATE_MEMBERSHIP,
                    "Principal is already a member of this organization",
                )
            )

    if snapshot.is_default_organization:
        return Return.ok(None)

    if snapshot.seat_limit is None:
        return Return.err(
            Error(
                SUBSCRIPTION_PLAN_NOT_FOUND,
                "Organization has no subscription plan; seat limit unknown",
            )
        )

    if snapshot.member_count >= snapshot.seat_limit:
        return Return.err(
            Error(
                SEAT_LIMIT_EXCEEDED,
                f"Organization has reached its seat limit of {snapshot.seat_limit}",
                {"seat_limit": snapshot.seat_limit, "member_count": snapshot.member_count},
            )
        )

    return Return.ok(None)
