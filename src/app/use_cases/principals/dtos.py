from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class PrincipalMembership(BaseModel):
    membership_id: str
    organization_id: str
    organization_name: str
    role: str
    is_blocked: bool


class PrincipalOverview(BaseModel):
    id: str
    email: str
    display_name: str
    full_name: Optional[str]
    active_organization_id: Optional[str]
    last_active_at: Optional[datetime]
    memberships: List[PrincipalMembership]


class PrincipalListResponse(BaseModel):
    principals: List[PrincipalOverview]
