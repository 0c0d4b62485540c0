from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from core.permission_helpers import (
    can_access_building,
    require_building_access,
    requires_permission,
)
from core.permission_service import permission_service
from dependencies.auth import CurrentPrincipal, get_current_principal, requires_role
from models.access import (
    BuildingAccessRead,
    CatalogRead,
    NavigationItemRead,
    NavigationRead,
    PermissionCheckRead,
    RolePermissionsRead,
    RoleTableRead,
)
from models.enums import Permission, UserRole

router = APIRouter(
    prefix="/access",
    tags=["Access Control"],
)


def _sorted_values(permissions) -> List[str]:
    return sorted(p.value for p in permissions)


# ============================================================
# Catalog
# ============================================================
@router.get("/catalog", response_model=CatalogRead, summary="List roles and permissions")
def get_catalog():
    return CatalogRead(roles=UserRole.list(), permissions=Permission.list())


# ============================================================
# Current principal: permissions
# ============================================================
@router.get("/me/permissions", response_model=RolePermissionsRead)
def my_permissions(principal: CurrentPrincipal = Depends(get_current_principal)):
    return RolePermissionsRead(
        role=principal.role.value,
        permissions=_sorted_values(permission_service.permissions_for(principal.role)),
    )


@router.get("/me/permissions/{permission}", response_model=PermissionCheckRead)
def check_permission(
    permission: str,
    principal: CurrentPrincipal = Depends(get_current_principal),
):
    try:
        parsed = Permission(permission)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown permission: {permission}")

    return PermissionCheckRead(
        role=principal.role.value,
        permission=parsed.value,
        granted=permission_service.has_permission(principal.role, parsed),
    )


# ============================================================
# Current principal: buildings
# ============================================================
@router.get(
    "/me/buildings/{building_id}",
    response_model=BuildingAccessRead,
    summary="Check building access",
    description="Assigned buildings may be passed as repeated `assigned` query params; otherwise they are looked up.",
)
def check_building(
    building_id: str,
    assigned: Optional[List[str]] = Query(None),
    principal: CurrentPrincipal = Depends(get_current_principal),
):
    return BuildingAccessRead(
        role=principal.role.value,
        building_id=building_id,
        granted=can_access_building(principal, building_id, assigned),
        rule=permission_service.building_rule(principal.role).kind,
    )


@router.get(
    "/buildings/{building_id}",
    status_code=204,
    summary="Enforce building access",
    description="204 when access is granted, 403 otherwise. Intended for gateway sub-requests.",
)
def enforce_building(
    building_id: str,
    principal: CurrentPrincipal = Depends(get_current_principal),
):
    require_building_access(principal, building_id)
    return Response(status_code=204)


# ============================================================
# Current principal: navigation
# ============================================================
@router.get("/me/navigation", response_model=NavigationRead)
def my_navigation(principal: CurrentPrincipal = Depends(get_current_principal)):
    items = [
        NavigationItemRead(path=item.path, label=item.label, icon=item.icon)
        for item in permission_service.visible_navigation(principal.role)
    ]
    return NavigationRead(role=principal.role.value, items=items)


# ============================================================
# Staff: another role's permissions
# ============================================================
@router.get(
    "/roles/{role}",
    response_model=RolePermissionsRead,
    dependencies=[Depends(requires_role([UserRole.admin, UserRole.manager]))],
)
def role_permissions(role: str):
    try:
        parsed = UserRole.parse(role)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown role: {role}")

    return RolePermissionsRead(
        role=parsed.value,
        permissions=_sorted_values(permission_service.permissions_for(parsed)),
    )


# ============================================================
# Admin: full role table
# ============================================================
@router.get(
    "/admin/roles",
    response_model=RoleTableRead,
    dependencies=[Depends(requires_permission(Permission.manage_users))],
)
def role_table():
    return RoleTableRead(
        roles={
            role.value: _sorted_values(permission_service.permissions_for(role))
            for role in UserRole
        }
    )
