SUPER_ADMIN_EMAIL = "root@tenancy.com"
SUPER_ADMIN_PASSWORD = "root-password"


async def sign_in(client, email, password) -> dict:
    response = await client.post("/auth/signin", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


async def create_organization(client, suffix="1", email=None, password="secret123") -> dict:
    response = await client.post(
        "/auth/organizations",
        json={
            "organization_name": f"Acme {suffix}",
            "registration_number": f"REG-{suffix}",
            "tax_number": f"TAX-{suffix}",
            "email": email or f"owner{suffix}@acme.com",
            "password": password,
            "full_name": f"Owner {suffix}",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


async def join_organization(client, organization_id, email, password="secret123", new=True):
    return await client.post(
        "/auth/join",
        json={
            "organization_id": organization_id,
            "email": email,
            "password": password,
            "new_principal": new,
        },
    )
