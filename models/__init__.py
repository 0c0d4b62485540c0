# -------------------------
# Enums
# -------------------------
from .enums import (
    BaseStrEnum,
    UserRole,
    Permission,
)

# -------------------------
# Access Response Models
# -------------------------
from .access import (
    CatalogRead,
    RolePermissionsRead,
    PermissionCheckRead,
    BuildingAccessRead,
    NavigationItemRead,
    NavigationRead,
    RoleTableRead,
)

__all__ = [
    # enums
    "BaseStrEnum",
    "UserRole",
    "Permission",

    # access
    "CatalogRead",
    "RolePermissionsRead",
    "PermissionCheckRead",
    "BuildingAccessRead",
    "NavigationItemRead",
    "NavigationRead",
    "RoleTableRead",
]
