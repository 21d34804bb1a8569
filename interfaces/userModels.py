from typing import List

from pydantic import BaseModel

from db.models import UserRole


class IdsUpdate(BaseModel):
    ids: List[int]


class RoleUpdate(BaseModel):
    role: UserRole
