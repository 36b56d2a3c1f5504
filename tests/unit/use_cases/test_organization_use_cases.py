from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from src.app.services.identity_provider import PrincipalInfo
from src.app.use_cases.organizations import (
    ListOrganizationsUseCase,
    SetOrganizationBlockUseCase,
    UpdateOrganizationCommand,
    UpdateOrganizationUseCase,
)
from src.domain.entities import Membership, Organization, RoleName, SubscriptionPlan
from src.domain.errors import (
    DEFAULT_ORGANIZATION_IMMUTABLE,
    INVALID_INPUT,
    INVALID_SUBSCRIPTION_WINDOW,
    ORGANIZATION_NOT_FOUND,
    SUBSCRIPTION_PLAN_NOT_FOUND,
)


def _organization(**kwargs):
    return Organization(name="Acme", registration_number="R", tax_number="T", **kwargs)


@pytest.mark.asyncio
async def test_block_organization(mock_store):
    organization = _organization()
    mock_store.organizations.get_by_id.return_value = organization

    result = await SetOrganizationBlockUseCase(mock_store).execute(organization.id, True)

    assert result.is_ok()
    assert result.value.is_blocked is True


@pytest.mark.asyncio
async def test_default_organization_cannot_be_blocked(mock_store):
    mock_store.organizations.get_by_id.return_value = _organization(is_default=True)

    result = await SetOrganizationBlockUseCase(mock_store).execute(uuid4(), True)

    assert result.error.code == DEFAULT_ORGANIZATION_IMMUTABLE
    mock_store.organizations.update.assert_not_called()


@pytest.mark.asyncio
async def test_default_organization_can_be_unblocked(mock_store):
    mock_store.organizations.get_by_id.return_value = _organization(is_default=True)

    result = await SetOrganizationBlockUseCase(mock_store).execute(uuid4(), False)

    assert result.is_ok()
    assert result.value.is_blocked is False
    mock_store.organizations.update.assert_awaited_once()


@pytest.mark.asyncio
async def test_block_unknown_organization(mock_store):
    result = await SetOrganizationBlockUseCase(mock_store).execute(uuid4(), False)

    assert result.error.code == ORGANIZATION_NOT_FOUND


@pytest.mark.asyncio
async def test_update_only_sent_fields(mock_store):
    organization = _organization(phone="555-0100", address="1 Main St")
    mock_store.organizations.get_by_id.return_value = organization

    command = UpdateOrganizationCommand(name="  Acme Ltd ", phone=None)
    result = await UpdateOrganizationUseCase(mock_store).execute(organization.id, command)

    assert result.is_ok()
    assert result.value.name == "Acme Ltd"
    assert result.value.phone is None
    assert result.value.address == "1 Main St"


@pytest.mark.asyncio
async def test_update_rejects_inverted_subscription_window(mock_store):
    mock_store.organizations.get_by_id.return_value = _organization()
    start = datetime(2025, 6, 1)

    command = UpdateOrganizationCommand(
        subscription_start_date=start, subscription_end_date=start - timedelta(days=1)
    )
    result = await UpdateOrganizationUseCase(mock_store).execute(uuid4(), command)

    assert result.error.code == INVALID_SUBSCRIPTION_WINDOW
    mock_store.organizations.update.assert_not_called()


@pytest.mark.asyncio
async def test_update_rejects_blank_name_and_unknown_plan(mock_store):
    mock_store.organizations.get_by_id.return_value = _organization()

    result = await UpdateOrganizationUseCase(mock_store).execute(
        uuid4(), UpdateOrganizationCommand(name="   ")
    )
    assert result.error.code == INVALID_INPUT

    result = await UpdateOrganizationUseCase(mock_store).execute(
        uuid4(), UpdateOrganizationCommand(subscription_plan_id=uuid4())
    )
    assert result.error.code == SUBSCRIPTION_PLAN_NOT_FOUND


@pytest.mark.asyncio
async def test_list_organizations_overview(mock_store, mock_identity):
    plan = SubscriptionPlan(name="Free", max_users=2)
    default = _organization(is_default=True)
    acme = _organization(
        subscription_plan_id=plan.id,
        subscription_end_date=datetime.utcnow() - timedelta(days=1),
    )
    principal_id = uuid4()
    membership = Membership(
        principal_id=principal_id,
        organization_id=acme.id,
        role_id=uuid4(),
        role_name=RoleName.admin,
    )
    mock_store.organizations.list_all.return_value = [acme, default]
    mock_store.plans.get_by_id.return_value = plan
    mock_store.memberships.list_by_organization_id.side_effect = lambda org_id: (
        [membership] if org_id == acme.id else []
    )
    mock_identity.get_principal.return_value = PrincipalInfo(
        id=principal_id, email="olive.owner@acme.com"
    )

    result = await ListOrganizationsUseCase(mock_store, mock_identity).execute()

    assert result.is_ok()
    acme_view, default_view = result.value.organizations
    assert acme_view.member_count == 1
    assert acme_view.is_expired is True
    assert acme_view.can_add_member is True
    assert acme_view.plan.name == "Free"
    assert acme_view.members[0].display_name == "Olive Owner"
    assert default_view.is_expired is False
    assert default_view.can_add_member is True
