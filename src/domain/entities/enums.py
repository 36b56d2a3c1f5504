"""
Tenancy Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class RoleName(str, Enum):
    """Role a principal holds within an organization"""

    super_admin = "Super-admin"
    admin = "Admin"
    member = "Member"


class AssignmentPath(str, Enum):
    """How a membership is being created"""

    # Join flow and administrative add-member
    self_service = "self_service"
    # Create-organization flow, creator only
    organization_creation = "organization_creation"
