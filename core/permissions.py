from types import MappingProxyType

from models.enums import Permission, UserRole


# ============================================
# CENTRALIZED ROLE → PERMISSIONS MAP
# ============================================
_ROLE_PERMISSIONS = {

    # =====================================================
    # ADMIN — Full system access
    # =====================================================
    UserRole.admin: frozenset({
        Permission.manage_users,
        Permission.manage_buildings,
        Permission.manage_sensors,
        Permission.system_settings,
        Permission.view_all_buildings,
        Permission.view_detailed_analytics,
        Permission.control_sensors,
        Permission.manage_alerts,
        Permission.export_data,
        Permission.generate_reports,
        Permission.view_costs,
        Permission.view_budget,
        Permission.manage_budget,
        Permission.approve_investments,
        Permission.view_financial_reports,
        Permission.manage_invoices,
    }),

    # =====================================================
    # BUERGERMEISTER — Strategic overview, budget decisions
    # =====================================================
    UserRole.buergermeister: frozenset({
        Permission.view_all_buildings,
        Permission.view_detailed_analytics,
        Permission.generate_reports,
        Permission.view_costs,
        Permission.view_budget,
        Permission.manage_budget,
        Permission.approve_investments,
        Permission.view_financial_reports,
        Permission.export_data,
        Permission.manage_alerts,  # high-level alerts only
    }),

    # =====================================================
    # GEBAEUDEMANAGER — Operations for assigned buildings
    # =====================================================
    UserRole.gebaeudemanager: frozenset({
        Permission.view_assigned_buildings,
        Permission.control_sensors,
        Permission.manage_alerts,
        Permission.view_detailed_analytics,
        Permission.export_data,
        Permission.view_costs,  # assigned buildings only
    }),

    # =====================================================
    # MANAGER — Department management
    # =====================================================
    UserRole.manager: frozenset({
        Permission.view_all_buildings,
        Permission.manage_alerts,
        Permission.export_data,
        Permission.generate_reports,
        Permission.view_costs,
    }),

    # =====================================================
    # USER — Staff access
    # =====================================================
    UserRole.user: frozenset({
        Permission.view_assigned_buildings,
        Permission.view_public_data,
        Permission.export_data,
    }),

    # =====================================================
    # BUERGER — Public citizen access
    # =====================================================
    UserRole.buerger: frozenset({
        Permission.view_public_data,
    }),
}

ROLE_PERMISSIONS = MappingProxyType(_ROLE_PERMISSIONS)
