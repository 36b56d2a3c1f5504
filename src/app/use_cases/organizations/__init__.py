"""
Organization Administration Use Cases
"""

from .dtos import (
    MemberInfo,
    OrganizationListResponse,
    OrganizationOverview,
    OrganizationResponse,
    PlanInfo,
    UpdateOrganizationCommand,
)
from .list_organizations_use_case import ListOrganizationsUseCase
from .set_organization_block_use_case import SetOrganizationBlockUseCase
from .update_organization_use_case import UpdateOrganizationUseCase

__all__ = [
    "ListOrganizationsUseCase",
    "SetOrganizationBlockUseCase",
    "UpdateOrganizationUseCase",
    "UpdateOrganizationCommand",
    "OrganizationResponse",
    "OrganizationOverview",
    "OrganizationListResponse",
    "MemberInfo",
    "PlanInfo",
]
