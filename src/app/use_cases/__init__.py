"""
Use Cases

Organized into domain folders:
- provisioning/: Create and join organization sagas
- access/: Sessions, active tenant, access state
- memberships/: Add, remove and block members
- organizations/: Tenant administration
- principals/: Principal listing
"""

from .access import (
    ResolveAccessStateUseCase,
    SignInUseCase,
    SignOutUseCase,
    SwitchTenantUseCase,
    UpdateProfileUseCase,
)
from .memberships import AddMemberUseCase, RemoveMemberUseCase, SetMembershipBlockUseCase
from .organizations import (
    ListOrganizationsUseCase,
    SetOrganizationBlockUseCase,
    UpdateOrganizationUseCase,
)
from .principals import ListPrincipalsUseCase
from .provisioning import (
    CreateOrganizationUseCase,
    JoinOrganizationUseCase,
    ListJoinableOrganizationsUseCase,
)

__all__ = [
    # Provisioning
    "CreateOrganizationUseCase",
    "JoinOrganizationUseCase",
    "ListJoinableOrganizationsUseCase",
    # Access
    "ResolveAccessStateUseCase",
    "SwitchTenantUseCase",
    "UpdateProfileUseCase",
    "SignInUseCase",
    "SignOutUseCase",
    # Memberships
    "AddMemberUseCase",
    "RemoveMemberUseCase",
    "SetMembershipBlockUseCase",
    # Organizations
    "ListOrganizationsUseCase",
    "SetOrganizationBlockUseCase",
    "UpdateOrganizationUseCase",
    # Principals
    "ListPrincipalsUseCase",
]
