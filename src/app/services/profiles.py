from typing import Optional
from uuid import UUID

from src.app.services.tenant_store import TenantStore
from src.domain.entities import Profile
from src.domain.errors import StoreConflictError


async def ensure_profile(
    store: TenantStore,
    principal_id: UUID,
    full_name: Optional[str] = None,
    active_organization_id: Optional[UUID] = None,
) -> tuple[Profile, bool]:
    """
    Get the principal's profile, creating it when absent.

    Idempotent: a concurrent creator winning the unique index is treated as
    "already exists".

    Returns:
        (profile, created)
    """
    profile = await store.profiles.get_by_principal_id(principal_id)
    if profile is not None:
        return profile, False

    try:
        profile = await store.profiles.create(
            Profile(
                principal_id=principal_id,
                full_name=full_name,
                active_organization_id=active_organization_id,
            )
        )
    except StoreConflictError:
        profile = await store.profiles.get_by_principal_id(principal_id)
        if profile is None:
            raise
        return profile, False
    return profile, True
