from typing import Iterable, Optional

from fastapi import Depends

from core.assignment_store import get_assigned_building_ids
from core.building_access import DynamicAssignment
from core.errors import forbidden
from core.logging_config import logger
from core.permission_service import permission_service
from dependencies.auth import CurrentPrincipal, get_current_principal
from models.enums import Permission


# -----------------------------------------------------
# Permission evaluation
# -----------------------------------------------------
def has_permission(principal: CurrentPrincipal, permission: Permission) -> bool:
    return permission_service.has_permission(principal.role, permission)


# -----------------------------------------------------
# FastAPI dependency wrapper
# -----------------------------------------------------
def requires_permission(permission: Permission):
    """
    Usage:
        @router.get("/", dependencies=[Depends(requires_permission(Permission.view_costs))])
    """

    def dependency(principal: CurrentPrincipal = Depends(get_current_principal)):
        if not has_permission(principal, permission):
            raise forbidden(f"Insufficient permissions: '{permission}' required")
        return principal

    return dependency


# ============================================================
# BUILDING-LEVEL HELPERS
# ============================================================

def resolve_assigned_buildings(
    principal: CurrentPrincipal,
    assigned: Optional[Iterable[str]] = None,
) -> Optional[Iterable[str]]:
    """
    Gather the assignment list for DynamicAssignment roles.
    Explicit `assigned` wins over the store. Other roles get None.
    """
    if not isinstance(permission_service.building_rule(principal.role), DynamicAssignment):
        return None

    if assigned is not None:
        return assigned

    return get_assigned_building_ids(principal.user_id)


def can_access_building(
    principal: CurrentPrincipal,
    building_id: str,
    assigned: Optional[Iterable[str]] = None,
) -> bool:
    assigned_buildings = resolve_assigned_buildings(principal, assigned)
    return permission_service.can_access_building(
        principal.role, building_id, assigned_buildings
    )


def require_building_access(principal: CurrentPrincipal, building_id: str):
    """Raise 403 unless the principal may access the building."""
    if not can_access_building(principal, building_id):
        logger.warning(
            "Building access denied: role=%s user=%r building=%r",
            principal.role, principal.user_id, building_id,
        )
        raise forbidden(f"You do not have access to building {building_id}")
