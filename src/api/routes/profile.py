from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.tenant_store import TenantStore
from src.app.use_cases.access import (
    AccessStateResponse,
    ProfileResponse,
    ResolveAccessStateUseCase,
    SwitchTenantResponse,
    SwitchTenantUseCase,
    UpdateProfileUseCase,
)
from src.depends import get_current_principal, get_tenant_store

router = APIRouter(prefix="/me", tags=["Profile"])


@router.get("", status_code=status.HTTP_200_OK, response_model=AccessStateResponse)
async def get_access_state(
    principal_id: UUID = Depends(get_current_principal),
    store: TenantStore = Depends(get_tenant_store),
):
    """
    Effective access state of the caller

    Active organization with role, block and expiration flags, plus every
    organization the caller belongs to.
    """
    use_case = ResolveAccessStateUseCase(store)
    result = await use_case.execute(principal_id)

    if result.is_err():
        raise_for_error(result.error)
    return result.value


class UpdateProfileRequest(BaseModel):
    full_name: Optional[str] = Field(None, max_length=255)


@router.put("/profile", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def update_profile(
    request: UpdateProfileRequest,
    principal_id: UUID = Depends(get_current_principal),
    store: TenantStore = Depends(get_tenant_store),
):
    use_case = UpdateProfileUseCase(store)
    result = await use_case.execute(principal_id, request.full_name)

    if result.is_err():
        raise_for_error(result.error)
    return result.value


class SwitchTenantRequest(BaseModel):
    """
    Switch tenant HTTP request payload

    Validates incoming request for switching active tenant.
    """

    organization_id: UUID = Field(..., description="Target organization ID to switch to")


@router.post(
    "/active-organization",
    status_code=status.HTTP_200_OK,
    response_model=SwitchTenantResponse,
)
async def switch_tenant(
    request: SwitchTenantRequest,
    principal_id: UUID = Depends(get_current_principal),
    store: TenantStore = Depends(get_tenant_store),
):
    """
    Switch Active Tenant

    Raises:
        - 400 Bad Request: NOT_A_MEMBER
        - 401 Unauthorized: Invalid or expired token
        - 404 Not Found: ORGANIZATION_NOT_FOUND
    """
    use_case = SwitchTenantUseCase(store)
    result = await use_case.execute(principal_id, request.organization_id)

    if result.is_err():
        raise_for_error(result.error)
    return result.value
