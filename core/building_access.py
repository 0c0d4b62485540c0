# core/building_access.py

"""
Building access policy: one rule per role.

  • Unrestricted       every building
  • FixedAllowList     a static, named set of buildings
  • DynamicAssignment  the caller supplies the principal's assignments
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Union

from models.enums import UserRole


@dataclass(frozen=True)
class Unrestricted:
    kind: str = field(default="unrestricted", init=False)


@dataclass(frozen=True)
class FixedAllowList:
    building_ids: FrozenSet[str]
    kind: str = field(default="fixed_allow_list", init=False)


@dataclass(frozen=True)
class DynamicAssignment:
    kind: str = field(default="dynamic_assignment", init=False)


BuildingAccessRule = Union[Unrestricted, FixedAllowList, DynamicAssignment]


# Buildings open to the public
PUBLIC_BUILDING_IDS = frozenset({"rathaus-hechingen"})


# ============================================
# ROLE → BUILDING ACCESS RULE
# ============================================
_BUILDING_ACCESS = {
    UserRole.admin: Unrestricted(),
    UserRole.buergermeister: Unrestricted(),
    UserRole.manager: Unrestricted(),

    # Assignments come from the assignment store, per request
    UserRole.gebaeudemanager: DynamicAssignment(),
    UserRole.user: DynamicAssignment(),

    UserRole.buerger: FixedAllowList(PUBLIC_BUILDING_IDS),
}

BUILDING_ACCESS = MappingProxyType(_BUILDING_ACCESS)
