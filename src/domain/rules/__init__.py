"""
Pure tenancy rules - no I/O, deterministic functions of their inputs.
"""

from .access import display_name, effective_block, is_subscription_expired
from .membership import MembershipSnapshot, check_membership_insert

__all__ = [
    "MembershipSnapshot",
    "check_membership_insert",
    "display_name",
    "effective_block",
    "is_subscription_expired",
]
