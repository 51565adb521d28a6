# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Start-up snapshot and self-check of the authorization tables."""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import ClassVar

from payconsole.rbac.normalization import ROLE_DISPLAY_NAMES
from payconsole.rbac.permissions import ALL_PERMISSION_CODES
from payconsole.rbac.roles import RESERVED_ROLES, ROLE_PERMISSIONS
from payconsole.rbac.routes import PUBLIC_ROUTES, ROUTE_PERMISSIONS
from payconsole.rbac.user_types import USER_TYPE_ROLES

logger = logging.getLogger(__name__)


class RegistryConfigurationError(Exception):
    """The compiled authorization tables are inconsistent."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("; ".join(problems))


@dataclass(frozen=True)
class RegistrySummary:
    """Counts reported after a successful self-check."""

    permissions: int
    roles: int
    routes: int
    user_types: int
    empty_roles: list[str] = field(default_factory=list)


class AuthorizationRegistry:
    """Read-only view of every authorization table.

    Built once at start-up; nothing in here changes afterwards, so it can
    be shared by all requests without locking.
    """

    _instance: ClassVar["AuthorizationRegistry | None"] = None

    def __init__(
        self,
        permissions: frozenset[str] = ALL_PERMISSION_CODES,
        role_permissions: MappingProxyType = ROLE_PERMISSIONS,
        display_names: MappingProxyType = ROLE_DISPLAY_NAMES,
        user_type_roles: MappingProxyType = USER_TYPE_ROLES,
        route_permissions: MappingProxyType = ROUTE_PERMISSIONS,
        reserved_roles: frozenset[str] = RESERVED_ROLES,
        public_routes: frozenset[str] = PUBLIC_ROUTES,
    ) -> None:
        self.permissions = frozenset(permissions)
        self.role_permissions = MappingProxyType(
            {code: tuple(tokens) for code, tokens in role_permissions.items()}
        )
        self.display_names = MappingProxyType(dict(display_names))
        self.user_type_roles = MappingProxyType(
            {user_type: tuple(roles) for user_type, roles in user_type_roles.items()}
        )
        self.route_permissions = MappingProxyType(dict(route_permissions))
        self.reserved_roles = frozenset(reserved_roles)
        self.public_routes = frozenset(public_routes)

    @classmethod
    def get_instance(cls) -> "AuthorizationRegistry":
        """Get the shared registry, building it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the shared registry (for testing)."""
        cls._instance = None

    def _check_roles(self) -> list[str]:
        problems = []
        for code, tokens in self.role_permissions.items():
            unknown = [token for token in tokens if token not in self.permissions]
            if unknown:
                problems.append(f"Role {code} references unknown permissions: {unknown}")
            if not tokens and code not in self.reserved_roles:
                problems.append(f"Role {code} grants nothing and is not reserved")
        return problems

    def _check_display_names(self) -> list[str]:
        return [
            f"Display name '{name}' points at unknown role {code}"
            for name, code in self.display_names.items()
            if code not in self.role_permissions
        ]

    def _check_user_types(self) -> list[str]:
        return [
            f"User type {user_type} allows unknown role {code}"
            for user_type, codes in self.user_type_roles.items()
            for code in codes
            if code not in self.role_permissions
        ]

    def _check_routes(self) -> list[str]:
        problems = []
        for path, config in self.route_permissions.items():
            for token in config.required_permissions:
                if token not in self.permissions:
                    problems.append(f"Route {path} requires unknown permission {token}")
        return problems

    def _check_public_routes(self) -> list[str]:
        return [
            f"Public route {path} also carries a requirement"
            for path in sorted(self.public_routes)
            if path in self.route_permissions
            and self.route_permissions[path].has_requirement
        ]

    def validate(self) -> RegistrySummary:
        """Run the start-up self-check.

        Raises:
            RegistryConfigurationError: If any table references something
                that does not exist, or a role silently grants nothing.
        """
        problems = (
            self._check_roles()
            + self._check_display_names()
            + self._check_user_types()
            + self._check_routes()
            + self._check_public_routes()
        )
        if problems:
            for problem in problems:
                logger.error(f"Authorization table check failed: {problem}")
            raise RegistryConfigurationError(problems)

        empty_roles = sorted(
            code for code, tokens in self.role_permissions.items() if not tokens
        )
        return RegistrySummary(
            permissions=len(self.permissions),
            roles=len(self.role_permissions),
            routes=len(self.route_permissions),
            user_types=len(self.user_type_roles),
            empty_roles=empty_roles,
        )
