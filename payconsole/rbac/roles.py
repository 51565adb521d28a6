# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role codes and the static role -> permission map."""

from enum import Enum
from types import MappingProxyType

from payconsole.rbac.permissions import Permission


class RoleCode(str, Enum):
    """Canonical role codes that carry permission grants."""

    SUPER_ADMIN = "SUPER_ADMIN"
    SYSTEM_ADMIN = "SYSTEM_ADMIN"
    SECURITY_ADMIN = "SECURITY_ADMIN"
    BUSINESS_ADMIN = "BUSINESS_ADMIN"
    FINANCE_ADMIN = "FINANCE_ADMIN"
    COMPLIANCE_ADMIN = "COMPLIANCE_ADMIN"
    MERCHANT_ADMIN = "MERCHANT_ADMIN"
    MERCHANT_USER = "MERCHANT_USER"
    MERCHANT_FINANCE = "MERCHANT_FINANCE"
    MERCHANT_SUPPORT = "MERCHANT_SUPPORT"
    PAYMENT_OPERATOR = "PAYMENT_OPERATOR"


# Platform roles accepted for staff accounts that have no grants yet.
RESERVED_ROLES: frozenset[str] = frozenset({
    "PAYMENT_ANALYST",
    "SETTLEMENT_OPERATOR",
    "RECONCILIATION_USER",
    "SUPPORT_AGENT",
    "SUPPORT_SUPERVISOR",
    "ESCALATION_MANAGER",
    "TECHNICAL_ADMIN",
    "DEVELOPER",
    "SYSTEM_MONITOR",
    "AUDITOR",
    "COMPLIANCE_OFFICER",
    "RISK_ANALYST",
})


def _tokens(*permissions: Permission) -> tuple[str, ...]:
    return tuple(p.value for p in permissions)


_ROLE_PERMISSIONS: dict[str, tuple[str, ...]] = {
    # Full system access
    RoleCode.SUPER_ADMIN.value: _tokens(Permission.ALL),
    # System configuration and monitoring
    RoleCode.SYSTEM_ADMIN.value: _tokens(
        Permission.USERS_ALL,
        Permission.ROLES_ALL,
        Permission.PAYMENT_GATEWAYS_ALL,
        Permission.AUDIT_AND_LOGS_VIEW,
        Permission.TRANSACTIONS_VIEW,
        Permission.DISBURSEMENTS_VIEW,
        Permission.MERCHANTS_VIEW,
    ),
    # Security policies and audit
    RoleCode.SECURITY_ADMIN.value: _tokens(
        Permission.USERS_VIEW,
        Permission.USERS_UPDATE,
        Permission.USERS_LOCK,
        Permission.USERS_UNLOCK,
        Permission.ROLES_VIEW,
        Permission.AUDIT_AND_LOGS_ALL,
        Permission.MERCHANTS_VIEW,
        Permission.TRANSACTIONS_VIEW,
        Permission.DISBURSEMENTS_VIEW,
    ),
    # Business operations
    RoleCode.BUSINESS_ADMIN.value: _tokens(
        Permission.MERCHANTS_ALL,
        Permission.TRANSACTIONS_VIEW,
        Permission.TRANSACTIONS_UPDATE,
        Permission.TRANSACTIONS_UPDATE_STATUS,
        Permission.DISBURSEMENTS_VIEW,
        Permission.DISBURSEMENTS_UPDATE,
        Permission.DISBURSEMENTS_UPDATE_STATUS,
        Permission.PAYMENT_GATEWAYS_VIEW,
    ),
    # Financial operations and settlements
    RoleCode.FINANCE_ADMIN.value: _tokens(
        Permission.TRANSACTIONS_ALL,
        Permission.DISBURSEMENTS_ALL,
        Permission.MERCHANTS_VIEW,
        Permission.PAYMENT_GATEWAYS_VIEW,
        Permission.AUDIT_AND_LOGS_VIEW,
    ),
    # KYC / AML
    RoleCode.COMPLIANCE_ADMIN.value: _tokens(
        Permission.MERCHANTS_VIEW,
        Permission.MERCHANTS_VERIFY_KYC,
        Permission.TRANSACTIONS_VIEW,
        Permission.DISBURSEMENTS_VIEW,
        Permission.AUDIT_AND_LOGS_VIEW,
    ),
    RoleCode.MERCHANT_ADMIN.value: _tokens(
        Permission.MERCHANTS_VIEW,
        Permission.MERCHANTS_UPDATE,
        Permission.MERCHANTS_MANAGE_API_KEYS,
        Permission.TRANSACTIONS_VIEW,
        Permission.DISBURSEMENTS_VIEW,
    ),
    RoleCode.MERCHANT_USER.value: _tokens(
        Permission.MERCHANTS_VIEW,
        Permission.TRANSACTIONS_VIEW,
        Permission.DISBURSEMENTS_VIEW,
    ),
    RoleCode.MERCHANT_FINANCE.value: _tokens(
        Permission.MERCHANTS_VIEW,
        Permission.TRANSACTIONS_VIEW,
        Permission.DISBURSEMENTS_VIEW,
        Permission.TRANSACTIONS_EXPORT,
        Permission.DISBURSEMENTS_EXPORT,
    ),
    RoleCode.MERCHANT_SUPPORT.value: _tokens(
        Permission.MERCHANTS_VIEW,
        Permission.TRANSACTIONS_VIEW,
        Permission.DISBURSEMENTS_VIEW,
    ),
    # Payment processing and monitoring
    RoleCode.PAYMENT_OPERATOR.value: _tokens(
        Permission.TRANSACTIONS_VIEW,
        Permission.TRANSACTIONS_UPDATE_STATUS,
        Permission.TRANSACTIONS_RETRY,
        Permission.TRANSACTIONS_COMPLETE,
        Permission.TRANSACTIONS_CANCEL,
        Permission.DISBURSEMENTS_VIEW,
        Permission.DISBURSEMENTS_UPDATE_STATUS,
        Permission.DISBURSEMENTS_RETRY,
        Permission.DISBURSEMENTS_COMPLETE,
        Permission.DISBURSEMENTS_CANCEL,
        Permission.PAYMENT_GATEWAYS_VIEW,
    ),
}
_ROLE_PERMISSIONS.update({code: () for code in sorted(RESERVED_ROLES)})

ROLE_PERMISSIONS = MappingProxyType(_ROLE_PERMISSIONS)

DEFAULT_ROLES = [
    {
        "code": RoleCode.SUPER_ADMIN.value,
        "name": "Super Administrator",
        "description": "Full system access and control.",
    },
    {
        "code": RoleCode.SYSTEM_ADMIN.value,
        "name": "System Administrator",
        "description": "System configuration, users, roles and gateways.",
    },
    {
        "code": RoleCode.SECURITY_ADMIN.value,
        "name": "Security Administrator",
        "description": "Security policies, account locks and audit management.",
    },
    {
        "code": RoleCode.BUSINESS_ADMIN.value,
        "name": "Business Administrator",
        "description": "Merchant management and business operations.",
    },
    {
        "code": RoleCode.FINANCE_ADMIN.value,
        "name": "Finance Administrator",
        "description": "Financial operations and settlements.",
    },
    {
        "code": RoleCode.COMPLIANCE_ADMIN.value,
        "name": "Compliance Administrator",
        "description": "Regulatory compliance and KYC/AML review.",
    },
    {
        "code": RoleCode.MERCHANT_ADMIN.value,
        "name": "Merchant Administrator",
        "description": "Merchant profile and API key management.",
    },
    {
        "code": RoleCode.MERCHANT_USER.value,
        "name": "Merchant User",
        "description": "Regular merchant operations.",
    },
    {
        "code": RoleCode.MERCHANT_FINANCE.value,
        "name": "Merchant Finance",
        "description": "Merchant financial operations and exports.",
    },
    {
        "code": RoleCode.MERCHANT_SUPPORT.value,
        "name": "Merchant Support",
        "description": "Merchant customer support (read only).",
    },
    {
        "code": RoleCode.PAYMENT_OPERATOR.value,
        "name": "Payment Operator",
        "description": "Payment processing and monitoring.",
    },
]


def is_known_role(code: str) -> bool:
    """Return True if the code keys the role map (reserved roles included)."""
    return code in ROLE_PERMISSIONS


def lookup_role_permissions(code: str) -> tuple[str, ...]:
    """Return the raw token list of a canonical code.

    Unknown codes resolve to an empty tuple, never to an error.
    """
    return ROLE_PERMISSIONS.get(code, ())
