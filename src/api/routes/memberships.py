from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from src.api.error import raise_for_error
from src.app.services.tenant_store import TenantStore
from src.app.use_cases.memberships import (
    MembershipResponse,
    RemoveMemberResponse,
    RemoveMemberUseCase,
    SetMembershipBlockUseCase,
)
from src.depends import get_tenant_store, require_super_admin

router = APIRouter(prefix="/memberships", tags=["Memberships"])


class BlockMembershipRequest(BaseModel):
    blocked: bool


@router.post(
    "/{membership_id}/block",
    status_code=status.HTTP_200_OK,
    response_model=MembershipResponse,
)
async def set_membership_block(
    membership_id: UUID,
    request: BlockMembershipRequest,
    _: UUID = Depends(require_super_admin),
    store: TenantStore = Depends(get_tenant_store),
):
    """
    Block or unblock one membership (Super-admin)

    Raises:
        - 404 Not Found: MEMBERSHIP_NOT_FOUND
    """
    use_case = SetMembershipBlockUseCase(store)
    result = await use_case.execute(membership_id, request.blocked)

    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{membership_id}",
    status_code=status.HTTP_200_OK,
    response_model=RemoveMemberResponse,
)
async def remove_membership(
    membership_id: UUID,
    _: UUID = Depends(require_super_admin),
    store: TenantStore = Depends(get_tenant_store),
):
    """
    Remove a membership (Super-admin)

    Raises:
        - 400 Bad Request: SUPER_ADMIN_PROTECTED
        - 404 Not Found: MEMBERSHIP_NOT_FOUND
    """
    use_case = RemoveMemberUseCase(store)
    result = await use_case.execute(membership_id)

    if result.is_err():
        raise_for_error(result.error)
    return result.value
