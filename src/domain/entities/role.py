"""
Role Entity

Lookup table backing RoleName; memberships keep both the id and the name.
"""

from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from .enums import RoleName


class Role(SQLModel, table=True):
    __tablename__ = "roles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: RoleName = Field(unique=True, nullable=False)
