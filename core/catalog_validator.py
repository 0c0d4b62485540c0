# core/catalog_validator.py

from typing import Iterable, List, Mapping, Optional

from core.building_access import (
    BUILDING_ACCESS,
    DynamicAssignment,
    FixedAllowList,
    Unrestricted,
)
from core.errors import CatalogConfigurationError
from core.logging_config import logger
from core.navigation import NAVIGATION_ITEMS, NavigationEntry
from core.permissions import ROLE_PERMISSIONS
from models.enums import Permission, UserRole

_RULE_TYPES = (Unrestricted, FixedAllowList, DynamicAssignment)


def validate_role_permissions(role_permissions: Mapping) -> List[str]:
    """
    Every role needs exactly one permission entry made of known permissions.
    Returns list of problems.
    """
    problems = []

    for role in UserRole:
        if role not in role_permissions:
            problems.append(f"role '{role}' has no permission entry")
            continue
        granted = role_permissions[role]
        if granted is None:
            problems.append(f"role '{role}' has a null permission entry")
            continue
        for permission in granted:
            if not isinstance(permission, Permission):
                problems.append(
                    f"role '{role}' grants unknown permission {permission!r}"
                )

    for key in role_permissions:
        if not isinstance(key, UserRole):
            problems.append(f"permission table lists unknown role {key!r}")

    return problems


def validate_building_access(building_access: Mapping) -> List[str]:
    """
    Every role needs exactly one building access rule.
    Returns list of problems.
    """
    problems = []

    for role in UserRole:
        rule = building_access.get(role)
        if rule is None:
            problems.append(f"role '{role}' has no building access rule")
        elif not isinstance(rule, _RULE_TYPES):
            problems.append(
                f"role '{role}' has unsupported building access rule {rule!r}"
            )

    for key in building_access:
        if not isinstance(key, UserRole):
            problems.append(f"building access table lists unknown role {key!r}")

    return problems


def validate_navigation(items: Iterable[NavigationEntry]) -> List[str]:
    """Navigation entries may only reference known roles."""
    problems = []
    seen_paths = set()

    for item in items:
        if item.path in seen_paths:
            problems.append(f"navigation path '{item.path}' is declared twice")
        seen_paths.add(item.path)
        for role in item.roles:
            if not isinstance(role, UserRole):
                problems.append(
                    f"navigation entry '{item.path}' references unknown role {role!r}"
                )

    return problems


def validate_catalogs(
    role_permissions: Optional[Mapping] = None,
    building_access: Optional[Mapping] = None,
    navigation_items: Optional[Iterable[NavigationEntry]] = None,
) -> List[str]:
    """
    Validate all access catalogs. Defaults to the process-wide tables.
    Returns the combined list of problems (empty when consistent).
    """
    if role_permissions is None:
        role_permissions = ROLE_PERMISSIONS
    if building_access is None:
        building_access = BUILDING_ACCESS
    if navigation_items is None:
        navigation_items = NAVIGATION_ITEMS

    return (
        validate_role_permissions(role_permissions)
        + validate_building_access(building_access)
        + validate_navigation(navigation_items)
    )


def validate_catalogs_on_startup(
    role_permissions: Optional[Mapping] = None,
    building_access: Optional[Mapping] = None,
    navigation_items: Optional[Iterable[NavigationEntry]] = None,
):
    """
    Validate catalogs on application startup.
    Raises CatalogConfigurationError if anything is inconsistent.
    """
    problems = validate_catalogs(role_permissions, building_access, navigation_items)

    if problems:
        for problem in problems:
            logger.error(f"Catalog defect: {problem}")
        raise CatalogConfigurationError(problems)

    logger.info("Access catalog validation passed")
