from uuid import uuid4

import pytest

from libs.result import Error, Return
from src.app.use_cases.provisioning import CreateOrganizationCommand, CreateOrganizationUseCase
from src.domain.entities import Organization, Profile, RoleName, SubscriptionPlan
from src.domain.errors import (
    ALREADY_REGISTERED,
    DEPENDENCY_FAILURE,
    INVALID_CREDENTIALS,
    INVALID_INPUT,
    TENANT_ALREADY_EXISTS,
    DependencyError,
    StoreConflictError,
)


@pytest.fixture
def command():
    return CreateOrganizationCommand(
        organization_name="Acme Corp",
        registration_number="REG-1",
        tax_number="TAX-1",
        email="owner@acme.com",
        password="secret123",
        full_name="Olive Owner",
    )


@pytest.fixture
def free_plan(mock_store):
    plan = SubscriptionPlan(name="Free", max_users=2)
    mock_store.plans.list_all.return_value = [plan]
    mock_store.plans.get_by_id.return_value = plan
    return plan


@pytest.mark.asyncio
async def test_new_principal_becomes_admin(mock_store, mock_identity, command, free_plan):
    principal_id = uuid4()
    mock_identity.authenticate.return_value = Return.err(
        Error(INVALID_CREDENTIALS, "Invalid email or password")
    )
    mock_identity.create_principal.return_value = Return.ok(principal_id)

    result = await CreateOrganizationUseCase(mock_store, mock_identity).execute(command)

    assert result.is_ok()
    response = result.value
    assert response.principal_id == str(principal_id)
    assert response.principal_created is True
    assert response.role == RoleName.admin.value
    assert response.organization.name == "Acme Corp"

    organization = mock_store.organizations.create.call_args[0][0]
    assert organization.subscription_plan_id == free_plan.id
    assert organization.is_default is False

    profile = mock_store.profiles.update.call_args[0][0]
    assert str(profile.active_organization_id) == response.organization.id

    membership = mock_store.memberships.create.call_args[0][0]
    assert membership.role_name == RoleName.admin
    assert membership.principal_id == principal_id


@pytest.mark.asyncio
async def test_existing_principal_signed_in(mock_store, mock_identity, command, free_plan):
    principal_id = uuid4()
    mock_identity.authenticate.return_value = Return.ok(principal_id)
    mock_store.profiles.get_by_principal_id.return_value = Profile(principal_id=principal_id)

    result = await CreateOrganizationUseCase(mock_store, mock_identity).execute(command)

    assert result.is_ok()
    assert result.value.principal_created is False
    mock_identity.create_principal.assert_not_called()
    mock_store.profiles.create.assert_not_called()


@pytest.mark.asyncio
async def test_duplicate_identifiers_rejected_before_any_write(
    mock_store, mock_identity, command
):
    mock_store.organizations.find_by_registration_or_tax_number.return_value = [
        Organization(name="Other", registration_number="REG-1", tax_number="TAX-9")
    ]

    result = await CreateOrganizationUseCase(mock_store, mock_identity).execute(command)

    assert result.is_err()
    assert result.error.code == TENANT_ALREADY_EXISTS
    mock_identity.authenticate.assert_not_called()
    mock_store.organizations.create.assert_not_called()


@pytest.mark.asyncio
async def test_known_email_with_wrong_password(mock_store, mock_identity, command):
    mock_identity.authenticate.return_value = Return.err(
        Error(INVALID_CREDENTIALS, "Invalid email or password")
    )
    mock_identity.create_principal.return_value = Return.err(
        Error(ALREADY_REGISTERED, "User already registered")
    )

    result = await CreateOrganizationUseCase(mock_store, mock_identity).execute(command)

    assert result.is_err()
    assert result.error.code == ALREADY_REGISTERED
    mock_store.organizations.create.assert_not_called()
    mock_identity.delete_principal.assert_not_called()


@pytest.mark.asyncio
async def test_organization_failure_deletes_new_principal_and_profile(
    mock_store, mock_identity, command, free_plan
):
    principal_id = uuid4()
    mock_identity.authenticate.return_value = Return.err(
        Error(INVALID_CREDENTIALS, "Invalid email or password")
    )
    mock_identity.create_principal.return_value = Return.ok(principal_id)
    mock_store.organizations.create.side_effect = DependencyError(
        "store.organizations.create", RuntimeError("connection lost")
    )

    result = await CreateOrganizationUseCase(mock_store, mock_identity).execute(command)

    assert result.is_err()
    assert result.error.code == DEPENDENCY_FAILURE
    assert result.error.details["failed_step"] == "create_organization"
    assert result.error.details["compensation_failed"] is False
    mock_store.profiles.delete.assert_awaited_once()
    mock_identity.delete_principal.assert_awaited_once_with(principal_id)
    mock_store.memberships.create.assert_not_called()


@pytest.mark.asyncio
async def test_identifier_race_on_insert_reports_tenant_conflict(
    mock_store, mock_identity, command, free_plan
):
    principal_id = uuid4()
    mock_identity.authenticate.return_value = Return.err(
        Error(INVALID_CREDENTIALS, "Invalid email or password")
    )
    mock_identity.create_principal.return_value = Return.ok(principal_id)
    mock_store.organizations.create.side_effect = StoreConflictError(
        "store.organizations.create", RuntimeError("UNIQUE constraint failed")
    )

    result = await CreateOrganizationUseCase(mock_store, mock_identity).execute(command)

    assert result.is_err()
    assert result.error.code == TENANT_ALREADY_EXISTS
    assert result.error.details["failed_step"] == "create_organization"
    assert result.error.details["compensation_failed"] is False
    mock_store.profiles.delete.assert_awaited_once()
    mock_identity.delete_principal.assert_awaited_once_with(principal_id)
    mock_store.memberships.create.assert_not_called()


@pytest.mark.asyncio
async def test_membership_failure_rolls_back_everything(
    mock_store, mock_identity, command, free_plan
):
    principal_id = uuid4()
    mock_identity.authenticate.return_value = Return.err(
        Error(INVALID_CREDENTIALS, "Invalid email or password")
    )
    mock_identity.create_principal.return_value = Return.ok(principal_id)
    mock_store.memberships.create.side_effect = DependencyError("store.memberships.create")

    result = await CreateOrganizationUseCase(mock_store, mock_identity).execute(command)

    assert result.is_err()
    steps = [c["step"] for c in result.error.details["compensations"]]
    assert steps == [
        "set_active_organization",
        "create_organization",
        "ensure_profile",
        "resolve_principal",
    ]
    mock_store.organizations.delete.assert_awaited_once()
    mock_identity.delete_principal.assert_awaited_once_with(principal_id)


@pytest.mark.asyncio
async def test_short_password_rejected(mock_store, mock_identity, command):
    command.password = "short"

    result = await CreateOrganizationUseCase(mock_store, mock_identity).execute(command)

    assert result.is_err()
    assert result.error.code == INVALID_INPUT
    mock_identity.authenticate.assert_not_called()
