from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr

from src.api.error import raise_for_error
from src.app.services.identity_provider import IdentityProvider
from src.app.services.tenant_store import TenantStore
from src.app.use_cases.memberships import AddMemberUseCase, MembershipResponse
from src.app.use_cases.organizations import (
    ListOrganizationsUseCase,
    OrganizationListResponse,
    OrganizationResponse,
    SetOrganizationBlockUseCase,
    UpdateOrganizationCommand,
    UpdateOrganizationUseCase,
)
from src.app.use_cases.provisioning import (
    JoinableOrganizationsResponse,
    ListJoinableOrganizationsUseCase,
)
from src.depends import get_identity_provider, get_tenant_store, require_super_admin

router = APIRouter(prefix="/organizations", tags=["Organizations"])


@router.get(
    "/joinable",
    status_code=status.HTTP_200_OK,
    response_model=JoinableOrganizationsResponse,
)
async def list_joinable_organizations(store: TenantStore = Depends(get_tenant_store)):
    """Organizations offered on the join form; public"""
    use_case = ListJoinableOrganizationsUseCase(store)
    result = await use_case.execute()

    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=OrganizationListResponse)
async def list_organizations(
    _: UUID = Depends(require_super_admin),
    store: TenantStore = Depends(get_tenant_store),
    identity: IdentityProvider = Depends(get_identity_provider),
):
    """Every organization with plan, members and seat usage (Super-admin)"""
    use_case = ListOrganizationsUseCase(store, identity)
    result = await use_case.execute()

    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/{organization_id}",
    status_code=status.HTTP_200_OK,
    response_model=OrganizationResponse,
)
async def update_organization(
    organization_id: UUID,
    request: UpdateOrganizationCommand,
    _: UUID = Depends(require_super_admin),
    store: TenantStore = Depends(get_tenant_store),
):
    """
    Edit an organization (Super-admin)

    Only fields present in the body are changed.

    Raises:
        - 400 Bad Request: INVALID_INPUT, INVALID_SUBSCRIPTION_WINDOW,
                          DEFAULT_ORGANIZATION_IMMUTABLE
        - 404 Not Found: ORGANIZATION_NOT_FOUND, SUBSCRIPTION_PLAN_NOT_FOUND
    """
    use_case = UpdateOrganizationUseCase(store)
    result = await use_case.execute(organization_id, request)

    if result.is_err():
        raise_for_error(result.error)
    return result.value


class BlockRequest(BaseModel):
    blocked: bool


@router.post(
    "/{organization_id}/block",
    status_code=status.HTTP_200_OK,
    response_model=OrganizationResponse,
)
async def set_organization_block(
    organization_id: UUID,
    request: BlockRequest,
    _: UUID = Depends(require_super_admin),
    store: TenantStore = Depends(get_tenant_store),
):
    """
    Block or unblock an organization (Super-admin)

    Raises:
        - 400 Bad Request: DEFAULT_ORGANIZATION_IMMUTABLE
        - 404 Not Found: ORGANIZATION_NOT_FOUND
    """
    use_case = SetOrganizationBlockUseCase(store)
    result = await use_case.execute(organization_id, request.blocked)

    if result.is_err():
        raise_for_error(result.error)
    return result.value


class AddMemberRequest(BaseModel):
    email: EmailStr


@router.post(
    "/{organization_id}/members",
    status_code=status.HTTP_201_CREATED,
    response_model=MembershipResponse,
)
async def add_member(
    organization_id: UUID,
    request: AddMemberRequest,
    _: UUID = Depends(require_super_admin),
    store: TenantStore = Depends(get_tenant_store),
    identity: IdentityProvider = Depends(get_identity_provider),
):
    """
    Add an existing principal as Member (Super-admin)

    Raises:
        - 404 Not Found: PRINCIPAL_NOT_FOUND, ORGANIZATION_NOT_FOUND
        - 409 Conflict: DUPLICATE_MEMBERSHIP, SEAT_LIMIT_EXCEEDED
    """
    use_case = AddMemberUseCase(store, identity)
    result = await use_case.execute(organization_id, request.email)

    if result.is_err():
        raise_for_error(result.error)
    return result.value
