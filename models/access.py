from typing import Dict, List, Optional

from pydantic import BaseModel


class CatalogRead(BaseModel):
    roles: List[str]
    permissions: List[str]


class RolePermissionsRead(BaseModel):
    role: str
    permissions: List[str]


class PermissionCheckRead(BaseModel):
    role: str
    permission: str
    granted: bool


class BuildingAccessRead(BaseModel):
    role: str
    building_id: str
    granted: bool
    rule: str


class NavigationItemRead(BaseModel):
    path: str
    label: str
    icon: Optional[str] = None


class NavigationRead(BaseModel):
    role: str
    items: List[NavigationItemRead]


class RoleTableRead(BaseModel):
    roles: Dict[str, List[str]]
