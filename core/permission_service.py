# core/permission_service.py

"""
Authorization engine.

Pure lookups against the read-only access catalogs:
    • has_permission(role, permission)
    • can_access_building(role, building_id, assigned_buildings=None)
    • visible_navigation(role)

The engine never fetches data. For DynamicAssignment roles the caller
gathers the principal's assigned buildings and passes them in.
"""

from typing import FrozenSet, Iterable, List, Mapping, Optional, Sequence

from core.building_access import (
    BUILDING_ACCESS,
    BuildingAccessRule,
    DynamicAssignment,
    FixedAllowList,
    Unrestricted,
)
from core.catalog_validator import validate_catalogs_on_startup
from core.navigation import NAVIGATION_ITEMS, NavigationEntry
from core.permissions import ROLE_PERMISSIONS
from models.enums import Permission, UserRole


class PermissionService:

    def __init__(
        self,
        role_permissions: Mapping[UserRole, FrozenSet[Permission]] = ROLE_PERMISSIONS,
        building_access: Mapping[UserRole, BuildingAccessRule] = BUILDING_ACCESS,
        navigation_items: Sequence[NavigationEntry] = NAVIGATION_ITEMS,
    ):
        validate_catalogs_on_startup(role_permissions, building_access, navigation_items)

        self._role_permissions = role_permissions
        self._building_access = building_access
        self._navigation_items = tuple(navigation_items)

    # -----------------------------------------------------
    # Permissions
    # -----------------------------------------------------
    def permissions_for(self, role: UserRole) -> FrozenSet[Permission]:
        return frozenset(self._role_permissions[role])

    def has_permission(self, role: UserRole, permission: Permission) -> bool:
        return permission in self._role_permissions[role]

    # -----------------------------------------------------
    # Building scoping
    # -----------------------------------------------------
    def building_rule(self, role: UserRole) -> BuildingAccessRule:
        return self._building_access[role]

    def can_access_building(
        self,
        role: UserRole,
        building_id: str,
        assigned_buildings: Optional[Iterable[str]] = None,
    ) -> bool:
        """
        Deny-by-default building check.

        A missing assignment list is treated as an empty one. A bare string
        is not an assignment list and denies. Unknown building ids simply
        fail the membership test.
        """
        rule = self._building_access.get(role)

        if isinstance(rule, Unrestricted):
            return True

        if isinstance(rule, FixedAllowList):
            return building_id in rule.building_ids

        if isinstance(rule, DynamicAssignment):
            if not assigned_buildings or isinstance(assigned_buildings, (str, bytes)):
                return False
            return building_id in assigned_buildings

        return False

    # -----------------------------------------------------
    # Navigation
    # -----------------------------------------------------
    def visible_navigation(self, role: UserRole) -> List[NavigationEntry]:
        return [item for item in self._navigation_items if role in item.roles]


# Process-wide engine over the static catalogs
permission_service = PermissionService()
