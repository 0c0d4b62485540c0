from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

from models.enums import UserRole


@dataclass(frozen=True)
class NavigationEntry:
    path: str
    label: str
    icon: Optional[str]
    roles: FrozenSet[UserRole]


_STAFF = frozenset({
    UserRole.admin,
    UserRole.buergermeister,
    UserRole.manager,
})


# ============================================
# NAVIGATION CATALOG (order is the menu order)
# ============================================
NAVIGATION_ITEMS: Tuple[NavigationEntry, ...] = (
    NavigationEntry(
        path="/dashboard",
        label="Dashboard",
        icon="LayoutDashboard",
        roles=_STAFF | {UserRole.gebaeudemanager, UserRole.user},
    ),
    NavigationEntry(
        path="/energy-flow",
        label="Stadt-Daten",
        icon="Zap",
        roles=_STAFF | {UserRole.gebaeudemanager},
    ),
    NavigationEntry(
        path="/analytics/ai",
        label="Analytics",
        icon="BarChart3",
        roles=_STAFF,
    ),
    NavigationEntry(
        path="/alerts",
        label="Alerts",
        icon="AlertTriangle",
        roles=_STAFF | {UserRole.gebaeudemanager},
    ),
    NavigationEntry(
        path="/admin",
        label="Admin",
        icon="Settings",
        roles=frozenset({UserRole.admin}),
    ),
    NavigationEntry(
        path="/admin/sensors",
        label="Sensorverwaltung",
        icon="Radio",
        roles=frozenset({UserRole.admin, UserRole.gebaeudemanager}),
    ),
    NavigationEntry(
        path="/public",
        label="Öffentliche Daten",
        icon="Globe",
        roles=frozenset({UserRole.buerger}),
    ),
)
