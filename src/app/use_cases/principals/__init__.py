"""
Principal Administration Use Cases
"""

from .dtos import PrincipalListResponse, PrincipalMembership, PrincipalOverview
from .list_principals_use_case import ListPrincipalsUseCase

__all__ = [
    "ListPrincipalsUseCase",
    "PrincipalListResponse",
    "PrincipalOverview",
    "PrincipalMembership",
]
