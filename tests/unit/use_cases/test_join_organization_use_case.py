from uuid import uuid4

import pytest

from libs.result import Error, Return
from src.app.use_cases.provisioning import JoinOrganizationCommand, JoinOrganizationUseCase
from src.domain.entities import Membership, Organization, Profile, RoleName, SubscriptionPlan
from src.domain.errors import (
    ALREADY_REGISTERED,
    DUPLICATE_MEMBERSHIP,
    INVALID_CREDENTIALS,
    INVALID_INPUT,
    ORGANIZATION_NOT_FOUND,
    SEAT_LIMIT_EXCEEDED,
)


@pytest.fixture
def plan():
    return SubscriptionPlan(name="Free", max_users=2)


@pytest.fixture
def organization(mock_store, plan):
    org = Organization(
        name="Acme Corp",
        registration_number="REG-1",
        tax_number="TAX-1",
        subscription_plan_id=plan.id,
    )
    mock_store.organizations.get_by_id.return_value = org
    mock_store.plans.get_by_id.return_value = plan
    return org


def _command(organization, new_principal=True):
    return JoinOrganizationCommand(
        organization_id=organization.id,
        email="member@acme.com",
        password="secret123",
        new_principal=new_principal,
    )


@pytest.mark.asyncio
async def test_new_principal_joins_as_member(mock_store, mock_identity, organization):
    principal_id = uuid4()
    mock_identity.create_principal.return_value = Return.ok(principal_id)

    result = await JoinOrganizationUseCase(mock_store, mock_identity).execute(
        _command(organization)
    )

    assert result.is_ok()
    assert result.value.role == RoleName.member.value
    assert result.value.principal_created is True

    profile = mock_store.profiles.create.call_args[0][0]
    assert profile.active_organization_id == organization.id
    membership = mock_store.memberships.create.call_args[0][0]
    assert membership.role_name == RoleName.member


@pytest.mark.asyncio
async def test_existing_principal_switches_active_tenant(
    mock_store, mock_identity, organization
):
    principal_id = uuid4()
    previous = uuid4()
    mock_identity.authenticate.return_value = Return.ok(principal_id)
    mock_store.profiles.get_by_principal_id.return_value = Profile(
        principal_id=principal_id, active_organization_id=previous
    )

    result = await JoinOrganizationUseCase(mock_store, mock_identity).execute(
        _command(organization, new_principal=False)
    )

    assert result.is_ok()
    assert result.value.principal_created is False
    updated = mock_store.profiles.update.call_args[0][0]
    assert updated.active_organization_id == organization.id
    mock_identity.create_principal.assert_not_called()


@pytest.mark.asyncio
async def test_duplicate_join_rejected_without_side_effects(
    mock_store, mock_identity, organization
):
    principal_id = uuid4()
    mock_identity.authenticate.return_value = Return.ok(principal_id)
    mock_store.profiles.get_by_principal_id.return_value = Profile(principal_id=principal_id)
    mock_store.memberships.get_by_principal_and_organization.return_value = Membership(
        principal_id=principal_id,
        organization_id=organization.id,
        role_id=uuid4(),
        role_name=RoleName.member,
    )
    mock_store.memberships.count_by_organization_id.return_value = 1

    result = await JoinOrganizationUseCase(mock_store, mock_identity).execute(
        _command(organization, new_principal=False)
    )

    assert result.is_err()
    assert result.error.code == DUPLICATE_MEMBERSHIP
    mock_store.memberships.create.assert_not_called()
    mock_store.profiles.update.assert_not_called()


@pytest.mark.asyncio
async def test_seat_limit_rolls_back_new_principal(mock_store, mock_identity, organization):
    principal_id = uuid4()
    mock_identity.create_principal.return_value = Return.ok(principal_id)
    mock_store.memberships.count_by_organization_id.return_value = 2

    result = await JoinOrganizationUseCase(mock_store, mock_identity).execute(
        _command(organization)
    )

    assert result.is_err()
    assert result.error.code == SEAT_LIMIT_EXCEEDED
    assert result.error.details["failed_step"] == "check_membership"
    mock_store.profiles.delete.assert_awaited_once()
    mock_identity.delete_principal.assert_awaited_once_with(principal_id)


@pytest.mark.asyncio
async def test_taken_email_stops_before_writes(mock_store, mock_identity, organization):
    mock_identity.create_principal.return_value = Return.err(
        Error(ALREADY_REGISTERED, "User already registered")
    )

    result = await JoinOrganizationUseCase(mock_store, mock_identity).execute(
        _command(organization)
    )

    assert result.is_err()
    assert result.error.code == ALREADY_REGISTERED
    mock_store.profiles.create.assert_not_called()
    mock_identity.delete_principal.assert_not_called()


@pytest.mark.asyncio
async def test_wrong_password_for_existing_principal(mock_store, mock_identity, organization):
    mock_identity.authenticate.return_value = Return.err(
        Error(INVALID_CREDENTIALS, "Invalid email or password")
    )

    result = await JoinOrganizationUseCase(mock_store, mock_identity).execute(
        _command(organization, new_principal=False)
    )

    assert result.is_err()
    assert result.error.code == INVALID_CREDENTIALS


@pytest.mark.asyncio
async def test_unknown_or_default_organization(mock_store, mock_identity, organization):
    mock_store.organizations.get_by_id.return_value = None
    result = await JoinOrganizationUseCase(mock_store, mock_identity).execute(
        _command(organization)
    )
    assert result.error.code == ORGANIZATION_NOT_FOUND

    organization.is_default = True
    mock_store.organizations.get_by_id.return_value = organization
    result = await JoinOrganizationUseCase(mock_store, mock_identity).execute(
        _command(organization)
    )
    assert result.error.code == INVALID_INPUT
    mock_identity.create_principal.assert_not_called()
