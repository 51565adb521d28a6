# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role-based access control for the payment console.

All tables are compiled in and immutable; every decision function is pure.
"""

from payconsole.rbac.evaluator import (
    PermissionRequirement,
    effective_roles,
    get_role_permissions,
    get_roles_permissions,
    has_all_permissions,
    has_any_permission,
    has_permission,
    satisfies_requirement,
)
from payconsole.rbac.menu import (
    MenuItem,
    PortalType,
    SubMenuItem,
    build_menu_for_subject,
    filter_menu_items,
)
from payconsole.rbac.normalization import normalize_role, normalize_roles
from payconsole.rbac.permissions import GLOBAL_WILDCARD, Permission
from payconsole.rbac.registry import AuthorizationRegistry, RegistryConfigurationError
from payconsole.rbac.roles import ROLE_PERMISSIONS, RoleCode
from payconsole.rbac.routes import (
    RouteConfig,
    get_route_permission,
    has_no_permission_requirement,
    is_public_route,
    normalize_path,
    requires_auth_only,
)
from payconsole.rbac.subject import Subject
from payconsole.rbac.user_types import (
    UserType,
    filter_valid_roles,
    is_role_valid_for_user_type,
)

__all__ = [  # noqa: RUF022
    # Catalog and role map
    "GLOBAL_WILDCARD",
    "Permission",
    "RoleCode",
    "ROLE_PERMISSIONS",
    # Normalization and user types
    "normalize_role",
    "normalize_roles",
    "UserType",
    "is_role_valid_for_user_type",
    "filter_valid_roles",
    # Evaluator
    "PermissionRequirement",
    "has_permission",
    "has_any_permission",
    "has_all_permissions",
    "get_role_permissions",
    "get_roles_permissions",
    "effective_roles",
    "satisfies_requirement",
    # Routes
    "RouteConfig",
    "get_route_permission",
    "normalize_path",
    "requires_auth_only",
    "has_no_permission_requirement",
    "is_public_route",
    # Menu
    "MenuItem",
    "SubMenuItem",
    "PortalType",
    "filter_menu_items",
    "build_menu_for_subject",
    # Registry
    "AuthorizationRegistry",
    "RegistryConfigurationError",
    "Subject",
]
