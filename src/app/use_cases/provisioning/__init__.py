"""
Provisioning Use Cases

Multi-step account and organization creation.
"""

from .create_organization_use_case import CreateOrganizationUseCase
from .dtos import (
    CreateOrganizationCommand,
    JoinableOrganizationsResponse,
    JoinOrganizationCommand,
    OrganizationSummary,
    ProvisioningResponse,
)
from .join_organization_use_case import JoinOrganizationUseCase
from .list_joinable_organizations_use_case import ListJoinableOrganizationsUseCase

__all__ = [
    "CreateOrganizationUseCase",
    "JoinOrganizationUseCase",
    "ListJoinableOrganizationsUseCase",
    "CreateOrganizationCommand",
    "JoinOrganizationCommand",
    "ProvisioningResponse",
    "OrganizationSummary",
    "JoinableOrganizationsResponse",
]
