from uuid import uuid4

import pytest

from src.app.services.identity_provider import PrincipalInfo
from src.app.use_cases.principals import ListPrincipalsUseCase
from src.domain.entities import Membership, Organization, Profile, RoleName


@pytest.mark.asyncio
async def test_list_principals_ensures_profiles(mock_store, mock_identity):
    with_profile = PrincipalInfo(id=uuid4(), email="zed@acme.com")
    without_profile = PrincipalInfo(id=uuid4(), email="amy.adams@acme.com")
    mock_identity.list_principals.return_value = [with_profile, without_profile]

    profiles = {with_profile.id: Profile(principal_id=with_profile.id, full_name="Zed")}
    mock_store.profiles.get_by_principal_id.side_effect = lambda pid: profiles.get(pid)

    organization = Organization(name="Acme", registration_number="R", tax_number="T")
    mock_store.organizations.get_by_id.return_value = organization
    mock_store.memberships.list_by_principal_id.side_effect = lambda pid: (
        [
            Membership(
                principal_id=pid,
                organization_id=organization.id,
                role_id=uuid4(),
                role_name=RoleName.member,
            )
        ]
        if pid == with_profile.id
        else []
    )

    result = await ListPrincipalsUseCase(mock_store, mock_identity).execute()

    assert result.is_ok()
    names = [p.display_name for p in result.value.principals]
    assert names == ["Amy Adams", "Zed"]
    mock_store.profiles.create.assert_awaited_once()
    zed = result.value.principals[1]
    assert zed.memberships[0].organization_name == "Acme"
