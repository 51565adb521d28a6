# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User types and the roles each of them may hold.

A merchant account must never be able to act with a platform role (and
vice versa), whatever the identity provider claims. Roles that are not
valid for the subject's type are dropped before any permission lookup.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from payconsole.rbac.normalization import normalize_role
from payconsole.rbac.roles import RESERVED_ROLES, RoleCode


class UserType(str, Enum):
    """Coarse subject categories."""

    ROOT_USER = "ROOT_USER"
    SYSTEM_USER = "SYSTEM_USER"
    MERCHANT_USER = "MERCHANT_USER"


USER_TYPE_ROLES = MappingProxyType({
    UserType.ROOT_USER.value: (RoleCode.SUPER_ADMIN.value,),
    UserType.SYSTEM_USER.value: (
        RoleCode.SYSTEM_ADMIN.value,
        RoleCode.SECURITY_ADMIN.value,
        RoleCode.BUSINESS_ADMIN.value,
        RoleCode.FINANCE_ADMIN.value,
        RoleCode.COMPLIANCE_ADMIN.value,
        RoleCode.PAYMENT_OPERATOR.value,
        *sorted(RESERVED_ROLES),
    ),
    UserType.MERCHANT_USER.value: (
        RoleCode.MERCHANT_ADMIN.value,
        RoleCode.MERCHANT_USER.value,
        RoleCode.MERCHANT_FINANCE.value,
        RoleCode.MERCHANT_SUPPORT.value,
    ),
})


@dataclass(frozen=True)
class RoleValidation:
    """Outcome of validating a whole role list against a user type."""

    is_valid: bool
    invalid_roles: list[str] = field(default_factory=list)


def get_valid_roles_for_user_type(user_type: str | None) -> tuple[str, ...]:
    """Return the role codes allowed for a user type (empty if unknown)."""
    if not user_type:
        return ()
    return USER_TYPE_ROLES.get(user_type, ())


def is_role_valid_for_user_type(role: str, user_type: str | None) -> bool:
    """Check whether a role (code or display name) fits the user type."""
    if not role or not user_type:
        return False
    return normalize_role(role) in get_valid_roles_for_user_type(user_type)


def filter_valid_roles(roles: Iterable[str], user_type: str | None) -> list[str]:
    """Keep only the roles valid for the user type, in their original order."""
    if not user_type:
        return []
    return [role for role in roles if is_role_valid_for_user_type(role, user_type)]


def validate_roles_for_user_type(
    roles: Iterable[str], user_type: str | None
) -> RoleValidation:
    """Report which roles do not belong to the user type.

    Without a user type nothing can be judged, so the list counts as valid.
    """
    roles = list(roles)
    if not user_type or not roles:
        return RoleValidation(is_valid=True)

    invalid = [role for role in roles if not is_role_valid_for_user_type(role, user_type)]
    return RoleValidation(is_valid=not invalid, invalid_roles=invalid)
