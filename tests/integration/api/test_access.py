import pytest
from httpx import AsyncClient

from tests.integration.helpers import create_organization, join_organization, sign_in


@pytest.mark.asyncio
async def test_switch_active_organization(client: AsyncClient):
    first = await create_organization(client, "1", email="founder@acme.com")
    second = await create_organization(client, "2", email="founder@acme.com")
    headers = await sign_in(client, "founder@acme.com", "secret123")

    response = await client.post(
        "/me/active-organization",
        json={"organization_id": first["organization"]["id"]},
        headers=headers,
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Acme 1"
    me = (await client.get("/me", headers=headers)).json()
    assert me["active_organization"]["organization_id"] == first["organization"]["id"]
    assert second["organization"]["id"] in [o["organization_id"] for o in me["organizations"]]


@pytest.mark.asyncio
async def test_switch_to_foreign_organization_rejected(client: AsyncClient):
    mine = await create_organization(client, "1")
    other = await create_organization(client, "2")
    headers = await sign_in(client, "owner1@acme.com", "secret123")

    response = await client.post(
        "/me/active-organization",
        json={"organization_id": other["organization"]["id"]},
        headers=headers,
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "NOT_A_MEMBER"
    me = (await client.get("/me", headers=headers)).json()
    assert me["active_organization"]["organization_id"] == mine["organization"]["id"]


@pytest.mark.asyncio
async def test_update_profile(client: AsyncClient):
    await create_organization(client, "1")
    headers = await sign_in(client, "owner1@acme.com", "secret123")

    response = await client.put(
        "/me/profile", json={"full_name": "  Olive Owner  "}, headers=headers
    )

    assert response.status_code == 200
    assert response.json()["full_name"] == "Olive Owner"


@pytest.mark.asyncio
async def test_blocked_organization_reported_in_access_state(
    client: AsyncClient, admin_headers
):
    org = await create_organization(client, "1")
    org_id = org["organization"]["id"]

    response = await client.post(
        f"/organizations/{org_id}/block", json={"blocked": True}, headers=admin_headers
    )
    assert response.status_code == 200

    headers = await sign_in(client, "owner1@acme.com", "secret123")
    me = (await client.get("/me", headers=headers)).json()
    active = me["active_organization"]
    assert active["organization_blocked"] is True
    assert active["membership_blocked"] is False
    assert active["is_blocked"] is True


@pytest.mark.asyncio
async def test_removed_membership_leaves_dangling_active_tenant(
    client: AsyncClient, admin_headers
):
    org = await create_organization(client, "1")
    joined = await join_organization(client, org["organization"]["id"], "member@acme.com")
    membership_id = joined.json()["membership_id"]
    headers = await sign_in(client, "member@acme.com", "secret123")

    response = await client.delete(f"/memberships/{membership_id}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["was_active_organization"] is True
    me = (await client.get("/me", headers=headers)).json()
    assert me["active_organization"] is None
    assert me["dangling_active_organization_id"] == org["organization"]["id"]
    assert me["organizations"] == []
