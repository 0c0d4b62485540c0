from enum import Enum


class BaseStrEnum(str, Enum):
    """
    Base enum that serializes cleanly to a string
    and provides a .list() method for UI dropdowns.
    """

    def __str__(self):
        return str(self.value)

    @classmethod
    def list(cls):
        return [item.value for item in cls]


# -----------------------------------------------------
# USER ROLE
# -----------------------------------------------------
class UserRole(BaseStrEnum):
    """Closed set of principal roles. One role per principal."""

    admin = "admin"
    manager = "manager"
    user = "user"
    buergermeister = "buergermeister"    # Mayor
    gebaeudemanager = "gebaeudemanager"  # Building manager
    buerger = "buerger"                  # Citizen

    @classmethod
    def parse(cls, token: str) -> "UserRole":
        """
        Parse a role token handed over by the identity layer.

        Accepts the canonical value (any case) and the legacy
        `gebaeude_manager` spelling. Raises ValueError otherwise.
        """
        normalized = (token or "").strip().lower()
        normalized = _ROLE_ALIASES.get(normalized, normalized)
        return cls(normalized)


_ROLE_ALIASES = {
    "gebaeude_manager": UserRole.gebaeudemanager.value,
}


# -----------------------------------------------------
# PERMISSION
# -----------------------------------------------------
class Permission(BaseStrEnum):
    """Closed set of capability tokens."""

    # System administration
    manage_users = "manage_users"
    manage_buildings = "manage_buildings"
    manage_sensors = "manage_sensors"
    system_settings = "system_settings"

    # Data access
    view_all_buildings = "view_all_buildings"
    view_assigned_buildings = "view_assigned_buildings"
    view_public_data = "view_public_data"
    view_detailed_analytics = "view_detailed_analytics"

    # Operations
    control_sensors = "control_sensors"
    manage_alerts = "manage_alerts"
    export_data = "export_data"
    generate_reports = "generate_reports"

    # Financial
    view_costs = "view_costs"
    view_budget = "view_budget"
    manage_budget = "manage_budget"
    approve_investments = "approve_investments"
    view_financial_reports = "view_financial_reports"
    manage_invoices = "manage_invoices"
