"""
Access Use Cases

Sessions, active tenant and effective access state.
"""

from .dtos import (
    AccessStateResponse,
    ProfileResponse,
    SignInResponse,
    SignOutResponse,
    SwitchTenantResponse,
    TenantAccess,
    TenantInfo,
)
from .resolve_access_state_use_case import ResolveAccessStateUseCase
from .sign_in_use_case import SignInUseCase
from .sign_out_use_case import SignOutUseCase
from .switch_tenant_use_case import SwitchTenantUseCase
from .update_profile_use_case import UpdateProfileUseCase

__all__ = [
    "ResolveAccessStateUseCase",
    "SwitchTenantUseCase",
    "UpdateProfileUseCase",
    "SignInUseCase",
    "SignOutUseCase",
    "AccessStateResponse",
    "TenantAccess",
    "SwitchTenantResponse",
    "ProfileResponse",
    "SignInResponse",
    "SignOutResponse",
    "TenantInfo",
]
