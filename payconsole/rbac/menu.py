# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Navigation trees and the permission-aware menu filter."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from payconsole.rbac.evaluator import PermissionRequirement, satisfies_requirement
from payconsole.rbac.permissions import Permission
from payconsole.rbac.user_types import UserType


class PortalType(str, Enum):
    """Which console a subject lands in."""

    ADMIN = "admin"
    MERCHANT = "merchant"


@dataclass(frozen=True)
class SubMenuItem:
    """A child entry, shown whenever its parent is shown."""

    title: str
    url: str
    icon: str


@dataclass(frozen=True)
class MenuItem:
    """A top level navigation entry and its access requirement."""

    title: str
    url: str
    icon: str
    permission: str | None = None
    permissions: tuple[str, ...] = ()
    require_all: bool = False
    allowed_user_types: tuple[str, ...] = ()
    sub_items: tuple[SubMenuItem, ...] = ()

    @property
    def requirement(self) -> PermissionRequirement:
        return PermissionRequirement(
            permission=self.permission,
            permissions=self.permissions,
            require_all=self.require_all,
        )


ADMIN_MENU: tuple[MenuItem, ...] = (
    # No permission: every authenticated admin user sees the dashboard
    MenuItem(title="Dashboard", url="/admin/dashboard", icon="IconDashboard"),
    MenuItem(
        title="Transactions",
        url="/admin/transactions",
        icon="IconListDetails",
        permission=Permission.TRANSACTIONS_VIEW.value,
    ),
    MenuItem(
        title="Disbursements",
        url="/admin/disbursements",
        icon="IconFolder",
        permission=Permission.DISBURSEMENTS_VIEW.value,
    ),
    MenuItem(
        title="Merchants",
        url="/admin/merchants",
        icon="IconBuildingStore",
        permission=Permission.MERCHANTS_VIEW.value,
    ),
    MenuItem(
        title="Gateways",
        url="/admin/gateways",
        icon="IconCreditCard",
        permission=Permission.PAYMENT_GATEWAYS_VIEW.value,
    ),
    MenuItem(
        title="Users & Roles",
        url="/admin/users",
        icon="IconUserScan",
        permission=Permission.USERS_VIEW.value,
        sub_items=(
            SubMenuItem(title="Users", url="/admin/users", icon="IconUsers"),
            SubMenuItem(title="Roles", url="/admin/roles", icon="IconFingerprint"),
        ),
    ),
    MenuItem(
        title="Logs",
        url="/admin/logs",
        icon="IconChartBar",
        permission=Permission.AUDIT_AND_LOGS_VIEW.value,
    ),
)

MERCHANT_MENU: tuple[MenuItem, ...] = (
    MenuItem(title="Dashboard", url="/merchant/dashboard", icon="IconDashboard"),
    MenuItem(
        title="Transactions",
        url="/merchant/transactions",
        icon="IconListDetails",
        permission=Permission.TRANSACTIONS_VIEW.value,
    ),
    MenuItem(
        title="Disbursements",
        url="/merchant/disbursements",
        icon="IconFolder",
        permission=Permission.DISBURSEMENTS_VIEW.value,
    ),
    MenuItem(
        title="Settings",
        url="/merchant/settings",
        icon="IconSettings",
        permission=Permission.MERCHANTS_VIEW.value,
    ),
)

_MENUS = {
    PortalType.ADMIN: ADMIN_MENU,
    PortalType.MERCHANT: MERCHANT_MENU,
}


def get_portal_for_user_type(user_type: str | None) -> PortalType:
    """Merchant staff get the merchant portal; everyone else the admin one."""
    if user_type == UserType.MERCHANT_USER.value:
        return PortalType.MERCHANT
    return PortalType.ADMIN


def get_menu_for_portal(portal: PortalType) -> tuple[MenuItem, ...]:
    return _MENUS.get(portal, ADMIN_MENU)


def get_menu_for_user_type(user_type: str | None) -> tuple[MenuItem, ...]:
    return get_menu_for_portal(get_portal_for_user_type(user_type))


def is_menu_item_visible(
    item: MenuItem, roles: Sequence[str], user_type: str | None = None
) -> bool:
    """Decide whether one item is shown to the subject."""
    if item.allowed_user_types and user_type not in item.allowed_user_types:
        return False
    if not item.requirement.has_requirement:
        return True
    return satisfies_requirement(roles, item.requirement, user_type)


def filter_menu_items(
    items: Iterable[MenuItem], roles: Iterable[str], user_type: str | None = None
) -> list[MenuItem]:
    """Return the items the subject may see.

    Sub-items are carried along with their parent and not checked again.
    """
    roles = list(roles)
    return [item for item in items if is_menu_item_visible(item, roles, user_type)]


def build_menu_for_subject(
    roles: Iterable[str], user_type: str | None
) -> tuple[PortalType, list[MenuItem]]:
    """Pick the subject's navigation tree and filter it."""
    portal = get_portal_for_user_type(user_type)
    return portal, filter_menu_items(get_menu_for_portal(portal), roles, user_type)
