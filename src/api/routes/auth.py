from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.app.services.identity_provider import IdentityProvider
from src.app.services.tenant_store import TenantStore
from src.app.use_cases.access import (
    SignInResponse,
    SignInUseCase,
    SignOutResponse,
    SignOutUseCase,
)
from src.app.use_cases.provisioning import (
    CreateOrganizationCommand,
    CreateOrganizationUseCase,
    JoinOrganizationCommand,
    JoinOrganizationUseCase,
    ProvisioningResponse,
)
from src.depends import get_current_principal, get_identity_provider, get_tenant_store

router = APIRouter(prefix="/auth", tags=["Authentication"])


class CreateOrganizationRequest(BaseModel):
    """
    Create organization HTTP request payload

    Validates incoming HTTP request before converting to
    CreateOrganizationCommand.
    """

    organization_name: str = Field(..., min_length=1, max_length=255)
    registration_number: str = Field(..., min_length=1)
    tax_number: str = Field(..., min_length=1)
    address: Optional[str] = None
    phone: Optional[str] = None
    contact_email: Optional[EmailStr] = None
    email: EmailStr = Field(..., description="Admin principal email address")
    password: str = Field(..., min_length=8, description="Password (min 8 chars)")
    full_name: Optional[str] = None


@router.post(
    "/organizations",
    status_code=status.HTTP_201_CREATED,
    response_model=ProvisioningResponse,
)
async def create_organization(
    request: CreateOrganizationRequest,
    store: TenantStore = Depends(get_tenant_store),
    identity: IdentityProvider = Depends(get_identity_provider),
):
    """
    Register a new organization

    Signs the principal in (or creates it) and makes it Admin of the new
    organization.

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIALS
        - 409 Conflict: TENANT_ALREADY_EXISTS, ALREADY_REGISTERED
        - 500 Internal Server Error: COMPENSATION_FAILURE
        - 502 Bad Gateway: DEPENDENCY_FAILURE
    """
    command = CreateOrganizationCommand(**request.model_dump())

    use_case = CreateOrganizationUseCase(store, identity)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)
    return result.value


class JoinOrganizationRequest(BaseModel):
    """Join organization HTTP request payload"""

    organization_id: UUID
    email: EmailStr
    password: str = Field(..., min_length=1)
    full_name: Optional[str] = None
    new_principal: bool = True


@router.post(
    "/join", status_code=status.HTTP_201_CREATED, response_model=ProvisioningResponse
)
async def join_organization(
    request: JoinOrganizationRequest,
    store: TenantStore = Depends(get_tenant_store),
    identity: IdentityProvider = Depends(get_identity_provider),
):
    """
    Join an existing organization as Member

    Raises:
        - 400 Bad Request: INVALID_INPUT
        - 401 Unauthorized: INVALID_CREDENTIALS
        - 404 Not Found: ORGANIZATION_NOT_FOUND
        - 409 Conflict: ALREADY_REGISTERED, DUPLICATE_MEMBERSHIP,
                        SEAT_LIMIT_EXCEEDED
    """
    command = JoinOrganizationCommand(**request.model_dump())

    use_case = JoinOrganizationUseCase(store, identity)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)
    return result.value


class SignInRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


@router.post("/signin", status_code=status.HTTP_200_OK, response_model=SignInResponse)
async def sign_in(
    request: SignInRequest,
    store: TenantStore = Depends(get_tenant_store),
    identity: IdentityProvider = Depends(get_identity_provider),
):
    """
    Sign in

    Returns a session token and the organizations the principal belongs to.

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIALS, NO_MEMBERSHIPS
    """
    use_case = SignInUseCase(store, identity)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/signout", status_code=status.HTTP_200_OK, response_model=SignOutResponse)
async def sign_out(
    principal_id: UUID = Depends(get_current_principal),
    identity: IdentityProvider = Depends(get_identity_provider),
):
    """Sign out; every token issued so far stops validating"""
    use_case = SignOutUseCase(identity)
    result = await use_case.execute(principal_id)

    if result.is_err():
        raise_for_error(result.error)
    return result.value
