from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.identity_provider import IdentityProvider
from src.app.services.tenant_store import TenantStore
from src.app.use_cases.principals import ListPrincipalsUseCase, PrincipalListResponse
from src.depends import get_identity_provider, get_tenant_store, require_super_admin

router = APIRouter(prefix="/principals", tags=["Principals"])


@router.get("", status_code=status.HTTP_200_OK, response_model=PrincipalListResponse)
async def list_principals(
    _: UUID = Depends(require_super_admin),
    store: TenantStore = Depends(get_tenant_store),
    identity: IdentityProvider = Depends(get_identity_provider),
):
    """Every principal with display name and memberships (Super-admin)"""
    use_case = ListPrincipalsUseCase(store, identity)
    result = await use_case.execute()

    if result.is_err():
        raise_for_error(result.error)
    return result.value
