from uuid import uuid4

from src.domain.entities import AssignmentPath, Membership, RoleName
from src.domain.errors import (
    DUPLICATE_MEMBERSHIP,
    ROLE_NOT_ASSIGNABLE,
    SEAT_LIMIT_EXCEEDED,
    SUBSCRIPTION_PLAN_NOT_FOUND,
)
from src.domain.rules import MembershipSnapshot, check_membership_insert


def _membership(principal_id, organization_id, role=RoleName.member):
    return Membership(
        principal_id=principal_id,
        organization_id=organization_id,
        role_id=uuid4(),
        role_name=role,
    )


def test_member_allowed_below_seat_limit():
    result = check_membership_insert(
        uuid4(), uuid4(), RoleName.member, MembershipSnapshot(member_count=1, seat_limit=2)
    )

    assert result.is_ok()


def test_seat_limit_counts_every_membership():
    result = check_membership_insert(
        uuid4(), uuid4(), RoleName.member, MembershipSnapshot(member_count=2, seat_limit=2)
    )

    assert result.is_err()
    assert result.error.code == SEAT_LIMIT_EXCEEDED
    assert result.error.details == {"seat_limit": 2, "member_count": 2}


def test_duplicate_membership_rejected():
    principal_id, organization_id = uuid4(), uuid4()
    snapshot = MembershipSnapshot(
        existing=[_membership(principal_id, organization_id)],
        member_count=1,
        seat_limit=10,
    )

    result = check_membership_insert(principal_id, organization_id, RoleName.member, snapshot)

    assert result.is_err()
    assert result.error.code == DUPLICATE_MEMBERSHIP


def test_super_admin_never_self_service():
    result = check_membership_insert(
        uuid4(), uuid4(), RoleName.super_admin, MembershipSnapshot(seat_limit=10)
    )

    assert result.is_err()
    assert result.error.code == ROLE_NOT_ASSIGNABLE


def test_privileged_role_only_for_creator():
    snapshot = MembershipSnapshot(member_count=1, seat_limit=10)

    result = check_membership_insert(
        uuid4(), uuid4(), RoleName.admin, snapshot, path=AssignmentPath.organization_creation
    )

    assert result.is_err()
    assert result.error.code == ROLE_NOT_ASSIGNABLE


def test_creator_gets_admin_on_empty_organization():
    result = check_membership_insert(
        uuid4(),
        uuid4(),
        RoleName.admin,
        MembershipSnapshot(member_count=0, seat_limit=2),
        path=AssignmentPath.organization_creation,
    )

    assert result.is_ok()


def test_default_organization_exempt_from_seat_limit():
    snapshot = MembershipSnapshot(
        member_count=500, seat_limit=None, is_default_organization=True
    )

    result = check_membership_insert(uuid4(), uuid4(), RoleName.member, snapshot)

    assert result.is_ok()


def test_missing_plan_fails_closed():
    result = check_membership_insert(
        uuid4(), uuid4(), RoleName.member, MembershipSnapshot(member_count=0)
    )

    assert result.is_err()
    assert result.error.code == SUBSCRIPTION_PLAN_NOT_FOUND
