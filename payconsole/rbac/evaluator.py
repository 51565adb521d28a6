# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission decision functions.

Everything in here is pure: no I/O, no logging, no shared mutable state.
Callers that want diagnostics wrap these calls (see
``payconsole.services.authorization_service``).
"""

from collections.abc import Iterable
from dataclasses import dataclass

from payconsole.rbac.normalization import normalize_role, normalize_roles
from payconsole.rbac.permissions import GLOBAL_WILDCARD, WILDCARD_SUFFIX
from payconsole.rbac.roles import lookup_role_permissions
from payconsole.rbac.user_types import filter_valid_roles, is_role_valid_for_user_type


@dataclass(frozen=True)
class PermissionRequirement:
    """What a route or menu item asks of a subject.

    Either a single ``permission``, or a list of ``permissions`` that must
    all be held (``require_all``) or of which one is enough.
    """

    permission: str | None = None
    permissions: tuple[str, ...] = ()
    require_all: bool = False

    @property
    def has_requirement(self) -> bool:
        return bool(self.permission or self.permissions)

    @property
    def required_permissions(self) -> tuple[str, ...]:
        if self.permission:
            return (self.permission,)
        return self.permissions


def _grants_everything(tokens: tuple[str, ...], _permission: str) -> bool:
    return GLOBAL_WILDCARD in tokens


def _grants_exactly(tokens: tuple[str, ...], permission: str) -> bool:
    return permission in tokens


def _wildcard_covers(token: str, permission: str) -> bool:
    if not token.endswith(WILDCARD_SUFFIX):
        return False
    prefix = token[: -len(WILDCARD_SUFFIX)]
    return permission == prefix or permission.startswith(prefix + ".")


def _grants_by_resource_wildcard(tokens: tuple[str, ...], permission: str) -> bool:
    return any(_wildcard_covers(token, permission) for token in tokens)


# Checked in order; no match means deny.
_GRANT_CHECKS = (
    _grants_everything,
    _grants_exactly,
    _grants_by_resource_wildcard,
)


def get_role_permissions(role: str) -> tuple[str, ...]:
    """Raw token list of a role given by code or display name."""
    return lookup_role_permissions(normalize_role(role))


def has_permission(role: str, permission: str, user_type: str | None = None) -> bool:
    """Check whether a single role grants ``permission``.

    When ``user_type`` is given and the role is not valid for it, the
    answer is False without looking at the role's grants.
    """
    if user_type is not None and not is_role_valid_for_user_type(role, user_type):
        return False

    tokens = get_role_permissions(role)
    return any(check(tokens, permission) for check in _GRANT_CHECKS)


def effective_roles(roles: Iterable[str], user_type: str | None = None) -> list[str]:
    """Normalize roles and, if a user type is given, drop the invalid ones."""
    normalized = normalize_roles(roles)
    if user_type is None:
        return normalized
    return filter_valid_roles(normalized, user_type)


def has_any_permission(
    roles: Iterable[str], permission: str, user_type: str | None = None
) -> bool:
    """True if at least one (valid) role grants ``permission``."""
    return any(has_permission(role, permission) for role in effective_roles(roles, user_type))


def has_all_permissions(
    roles: Iterable[str], permission: str, user_type: str | None = None
) -> bool:
    """True if every (valid) role grants ``permission``.

    An empty list after filtering is a denial, not a vacuous truth.
    """
    valid = effective_roles(roles, user_type)
    return bool(valid) and all(has_permission(role, permission) for role in valid)


def get_roles_permissions(roles: Iterable[str], user_type: str | None = None) -> set[str]:
    """Union of the raw token lists of all (valid) roles.

    Wildcards are returned as-is, not expanded.
    """
    tokens: set[str] = set()
    for role in effective_roles(roles, user_type):
        tokens.update(lookup_role_permissions(role))
    return tokens


def satisfies_requirement(
    roles: Iterable[str],
    requirement: PermissionRequirement,
    user_type: str | None = None,
) -> bool:
    """Evaluate a route or menu requirement against a role list.

    A requirement without permissions is always satisfied; callers decide
    separately whether the subject needs to be authenticated at all.
    """
    roles = list(roles)
    if requirement.permission:
        return has_any_permission(roles, requirement.permission, user_type)
    if not requirement.permissions:
        return True

    combine = all if requirement.require_all else any
    return combine(
        has_any_permission(roles, permission, user_type)
        for permission in requirement.permissions
    )
