"""
Tenancy Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import AssignmentPath, RoleName

# Export all entities
from .principal import Principal
from .profile import Profile
from .organization import Organization
from .subscription_plan import SubscriptionPlan
from .role import Role
from .membership import Membership

__all__ = [
    # Enums
    "AssignmentPath",
    "RoleName",
    # Entities
    "Principal",
    "Profile",
    "Organization",
    "SubscriptionPlan",
    "Role",
    "Membership",
]
