# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission catalog for the payment console.

Tokens have the form ``<resource>.<action>``. Every resource also has an
aggregate wildcard ``<resource>.*`` and the global wildcard ``*`` grants
everything. Tokens are compared case-sensitively and are never trimmed.
"""

from enum import Enum

GLOBAL_WILDCARD = "*"
WILDCARD_SUFFIX = ".*"


class Permission(str, Enum):
    """All permission tokens known to the console."""

    # User management
    USERS_VIEW = "users.view"
    USERS_CREATE = "users.create"
    USERS_UPDATE = "users.update"
    USERS_DELETE = "users.delete"
    USERS_ACTIVATE = "users.activate"
    USERS_DEACTIVATE = "users.deactivate"
    USERS_LOCK = "users.lock"
    USERS_UNLOCK = "users.unlock"
    USERS_RESET_PASSWORD = "users.reset_password"
    USERS_ASSIGN_ROLES = "users.assign_roles"
    USERS_ALL = "users.*"

    # Transactions
    TRANSACTIONS_VIEW = "transactions.view"
    TRANSACTIONS_CREATE = "transactions.create"
    TRANSACTIONS_UPDATE = "transactions.update"
    TRANSACTIONS_DELETE = "transactions.delete"
    TRANSACTIONS_UPDATE_STATUS = "transactions.update_status"
    TRANSACTIONS_RETRY = "transactions.retry"
    TRANSACTIONS_REFUND = "transactions.refund"
    TRANSACTIONS_COMPLETE = "transactions.complete"
    TRANSACTIONS_CANCEL = "transactions.cancel"
    TRANSACTIONS_EXPORT = "transactions.export"
    TRANSACTIONS_ALL = "transactions.*"

    # Disbursements
    DISBURSEMENTS_VIEW = "disbursements.view"
    DISBURSEMENTS_CREATE = "disbursements.create"
    DISBURSEMENTS_UPDATE = "disbursements.update"
    DISBURSEMENTS_DELETE = "disbursements.delete"
    DISBURSEMENTS_UPDATE_STATUS = "disbursements.update_status"
    DISBURSEMENTS_RETRY = "disbursements.retry"
    DISBURSEMENTS_COMPLETE = "disbursements.complete"
    DISBURSEMENTS_CANCEL = "disbursements.cancel"
    DISBURSEMENTS_EXPORT = "disbursements.export"
    DISBURSEMENTS_ALL = "disbursements.*"

    # Merchants
    MERCHANTS_VIEW = "merchants.view"
    MERCHANTS_CREATE = "merchants.create"
    MERCHANTS_UPDATE = "merchants.update"
    MERCHANTS_DELETE = "merchants.delete"
    MERCHANTS_ACTIVATE = "merchants.activate"
    MERCHANTS_DEACTIVATE = "merchants.deactivate"
    MERCHANTS_VERIFY_KYC = "merchants.verify_kyc"
    MERCHANTS_MANAGE_API_KEYS = "merchants.manage_api_keys"
    MERCHANTS_EXPORT = "merchants.export"
    MERCHANTS_ALL = "merchants.*"

    # Roles
    ROLES_VIEW = "roles.view"
    ROLES_CREATE = "roles.create"
    ROLES_UPDATE = "roles.update"
    ROLES_DELETE = "roles.delete"
    ROLES_ALL = "roles.*"

    # Payment gateways
    PAYMENT_GATEWAYS_VIEW = "payment_gateways.view"
    PAYMENT_GATEWAYS_CREATE = "payment_gateways.create"
    PAYMENT_GATEWAYS_UPDATE = "payment_gateways.update"
    PAYMENT_GATEWAYS_DELETE = "payment_gateways.delete"
    PAYMENT_GATEWAYS_TOGGLE_STATUS = "payment_gateways.toggle_status"
    PAYMENT_GATEWAYS_ALL = "payment_gateways.*"

    # Audit and logs
    AUDIT_AND_LOGS_VIEW = "audit_and_logs.view"
    AUDIT_AND_LOGS_ALL = "audit_and_logs.*"

    # System
    SYSTEM_ADMIN = "system.admin"
    ALL = GLOBAL_WILDCARD


_RESOURCE_LABELS = {
    "users": "users",
    "transactions": "transactions",
    "disbursements": "disbursements",
    "merchants": "merchants",
    "roles": "roles",
    "payment_gateways": "payment gateways",
    "audit_and_logs": "audit trail and logs",
    "system": "the system",
}


def is_wildcard(token: str) -> bool:
    """Return True for the global wildcard and resource wildcards."""
    return token == GLOBAL_WILDCARD or token.endswith(WILDCARD_SUFFIX)


def resource_of(token: str) -> str | None:
    """Return the resource part of a token, or None for the global wildcard."""
    if token == GLOBAL_WILDCARD:
        return None
    return token.split(".", 1)[0]


def _describe(token: str) -> str:
    if token == GLOBAL_WILDCARD:
        return "All permissions on every resource"
    resource, action = token.split(".", 1)
    label = _RESOURCE_LABELS.get(resource, resource)
    if action == "*":
        return f"All actions on {label}"
    return f"{action.replace('_', ' ').capitalize()} {label}"


CORE_PERMISSIONS = [
    {
        "code": perm.value,
        "resource": resource_of(perm.value) or "system",
        "description": _describe(perm.value),
        "wildcard": is_wildcard(perm.value),
    }
    for perm in Permission
]

ALL_PERMISSION_CODES: frozenset[str] = frozenset(perm.value for perm in Permission)

RESOURCES: tuple[str, ...] = tuple(dict.fromkeys(p["resource"] for p in CORE_PERMISSIONS))


def permissions_for_resource(resource: str) -> list[str]:
    """List the catalog tokens of one resource, wildcard included."""
    return [p["code"] for p in CORE_PERMISSIONS if p["resource"] == resource]
