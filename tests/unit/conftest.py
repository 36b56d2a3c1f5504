import pytest
from unittest.mock import AsyncMock, MagicMock

from src.domain.entities import Role


@pytest.fixture
def mock_store():
    """Mock TenantStore with every repository"""
    store = MagicMock()
    store.__aenter__ = AsyncMock(return_value=store)
    store.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions

    store.profiles = MagicMock()
    store.profiles.get_by_principal_id = AsyncMock(return_value=None)
    store.profiles.create = AsyncMock(side_effect=lambda profile: profile)
    store.profiles.update = AsyncMock(side_effect=lambda profile: profile)
    store.profiles.delete = AsyncMock()

    store.organizations = MagicMock()
    store.organizations.get_by_id = AsyncMock(return_value=None)
    store.organizations.get_default = AsyncMock(return_value=None)
    store.organizations.find_by_registration_or_tax_number = AsyncMock(return_value=[])
    store.organizations.list_all = AsyncMock(return_value=[])
    store.organizations.list_non_default = AsyncMock(return_value=[])
    store.organizations.create = AsyncMock(side_effect=lambda org: org)
    store.organizations.update = AsyncMock(side_effect=lambda org: org)
    store.organizations.delete = AsyncMock()

    store.memberships = MagicMock()
    store.memberships.get_by_id = AsyncMock(return_value=None)
    store.memberships.get_by_principal_and_organization = AsyncMock(return_value=None)
    store.memberships.list_by_principal_id = AsyncMock(return_value=[])
    store.memberships.list_by_organization_id = AsyncMock(return_value=[])
    store.memberships.count_by_organization_id = AsyncMock(return_value=0)
    store.memberships.create = AsyncMock(side_effect=lambda membership: membership)
    store.memberships.update = AsyncMock(side_effect=lambda membership: membership)
    store.memberships.delete = AsyncMock()

    store.roles = MagicMock()
    store.roles.get_by_name = AsyncMock(side_effect=lambda name: Role(name=name))
    store.plans = MagicMock()
    store.plans.get_by_id = AsyncMock(return_value=None)
    store.plans.list_all = AsyncMock(return_value=[])
    return store


@pytest.fixture
def mock_identity():
    """Mock IdentityProvider"""
    identity = MagicMock()
    identity.create_principal = AsyncMock()
    identity.authenticate = AsyncMock()
    identity.delete_principal = AsyncMock()
    identity.get_principal = AsyncMock(return_value=None)
    identity.find_by_email = AsyncMock(return_value=None)
    identity.list_principals = AsyncMock(return_value=[])
    identity.issue_session = AsyncMock(return_value="session-token")
    identity.validate_session = AsyncMock(return_value=None)
    identity.sign_out = AsyncMock()
    return identity
