"""
Membership Management Use Cases
"""

from .add_member_use_case import AddMemberUseCase
from .dtos import MembershipResponse, RemoveMemberResponse
from .remove_member_use_case import RemoveMemberUseCase
from .set_membership_block_use_case import SetMembershipBlockUseCase

__all__ = [
    "AddMemberUseCase",
    "RemoveMemberUseCase",
    "SetMembershipBlockUseCase",
    "MembershipResponse",
    "RemoveMemberResponse",
]
