# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Route -> permission resolution for console pages.

Static routes come from the navigation trees plus a few extra entries.
Pages with an identifier in the path (``/admin/merchants/{uid}``) are
declared as templates and matched with Starlette's path compiler; a
template either points at the static route whose requirement it shares
or carries its own requirement. A path no template knows still loses a
trailing segment shaped like an identifier (UUID, number, or an opaque
alphanumeric token over 10 characters).

Routes that resolve to nothing require authentication only. This is the
opposite of the evaluator, which denies anything it does not know.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from types import MappingProxyType

from starlette.routing import compile_path

from payconsole.rbac.evaluator import PermissionRequirement
from payconsole.rbac.menu import ADMIN_MENU, MERCHANT_MENU, MenuItem
from payconsole.rbac.permissions import Permission


@dataclass(frozen=True)
class RouteConfig(PermissionRequirement):
    """Requirement attached to a console route."""

    requires_auth_only: bool = False


@dataclass(frozen=True)
class DynamicRoute:
    """A parameterised page path.

    ``resolves_to`` names the static route whose requirement applies; when
    ``config`` is set the template is registered under its own pattern.
    """

    template: str
    resolves_to: str | None = None
    config: RouteConfig | None = None
    regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        path_regex, _, _ = compile_path(self.template)
        object.__setattr__(self, "regex", path_regex)

    @property
    def key(self) -> str:
        return self.resolves_to or self.template

    def matches(self, path: str) -> bool:
        return self.regex.match(path) is not None


_DETAIL_OF_DISBURSEMENT = RouteConfig(
    permissions=(
        Permission.DISBURSEMENTS_VIEW.value,
        Permission.TRANSACTIONS_VIEW.value,
    ),
)

LOGIN_ROUTE = "/login"

# Open without a session; they must not carry a requirement.
PUBLIC_ROUTES: frozenset[str] = frozenset({LOGIN_ROUTE})

EXTRA_ROUTES: dict[str, RouteConfig] = {
    "/payment-gateways": RouteConfig(permission=Permission.PAYMENT_GATEWAYS_VIEW.value),
    "/change-password": RouteConfig(requires_auth_only=True),
    "/unauthorized": RouteConfig(requires_auth_only=True),
    "/dashboard": RouteConfig(requires_auth_only=True),
    # Pre-portal pages, still linked from e-mails and bookmarks
    "/transactions": RouteConfig(permission=Permission.TRANSACTIONS_VIEW.value),
    "/disbursements": RouteConfig(permission=Permission.DISBURSEMENTS_VIEW.value),
    "/merchants": RouteConfig(permission=Permission.MERCHANTS_VIEW.value),
    "/gateways": RouteConfig(permission=Permission.PAYMENT_GATEWAYS_VIEW.value),
    "/logs": RouteConfig(permission=Permission.AUDIT_AND_LOGS_VIEW.value),
    "/roles": RouteConfig(permission=Permission.ROLES_VIEW.value),
}

DYNAMIC_ROUTES: tuple[DynamicRoute, ...] = (
    DynamicRoute("/admin/transactions/{id}", resolves_to="/admin/transactions"),
    DynamicRoute("/admin/disbursements/{id}", resolves_to="/admin/disbursements"),
    DynamicRoute("/admin/merchants/{uid}", resolves_to="/admin/merchants"),
    DynamicRoute("/transactions/{id}", resolves_to="/transactions"),
    DynamicRoute("/disbursements/{id}", config=_DETAIL_OF_DISBURSEMENT),
    DynamicRoute("/merchants/{uid}", resolves_to="/merchants"),
    DynamicRoute("/merchant/transactions/{id}", resolves_to="/merchant/transactions"),
    DynamicRoute("/merchant/disbursements/{id}", config=_DETAIL_OF_DISBURSEMENT),
)


def _config_for_item(item: MenuItem) -> RouteConfig:
    return RouteConfig(
        permission=item.permission,
        permissions=item.permissions,
        require_all=item.require_all,
    )


def build_route_permissions(
    menus: Iterable[Iterable[MenuItem]],
    extra: dict[str, RouteConfig],
    dynamic: Iterable[DynamicRoute] = (),
) -> MappingProxyType:
    """Assemble the read-only route registry.

    Menu entries come first, sub-items share their parent's requirement
    unless they have an entry of their own, and explicit extras win.
    """
    routes: dict[str, RouteConfig] = {}
    children: dict[str, RouteConfig] = {}
    for menu in menus:
        for item in menu:
            if not item.url or item.url == "#":
                continue
            config = _config_for_item(item)
            routes[item.url] = config
            for sub_item in item.sub_items:
                children.setdefault(sub_item.url, config)

    for url, config in children.items():
        routes.setdefault(url, config)
    routes.update(extra)
    for route in dynamic:
        if route.config is not None:
            routes[route.template] = route.config
    return MappingProxyType(routes)


ROUTE_PERMISSIONS = build_route_permissions(
    (ADMIN_MENU, MERCHANT_MENU), EXTRA_ROUTES, DYNAMIC_ROUTES
)


_UUID_SEGMENT = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)
_NUMERIC_SEGMENT = re.compile(r"^[0-9]+$")
_OPAQUE_SEGMENT = re.compile(r"^[a-z0-9]{11,}$", re.IGNORECASE)


def _strip_trailing_slash(path: str) -> str:
    stripped = path.rstrip("/")
    return stripped or "/"


def _looks_like_identifier(segment: str) -> bool:
    return bool(
        _UUID_SEGMENT.match(segment)
        or _NUMERIC_SEGMENT.match(segment)
        or _OPAQUE_SEGMENT.match(segment)
    )


def _drop_trailing_identifier(path: str) -> str:
    """Drop the last segment of a multi-segment path if it looks like an id."""
    segments = [segment for segment in path.split("/") if segment]
    if len(segments) > 1 and _looks_like_identifier(segments[-1]):
        return "/" + "/".join(segments[:-1])
    return path


def match_dynamic_route(path: str) -> DynamicRoute | None:
    """Return the first template matching ``path`` (already stripped)."""
    for route in DYNAMIC_ROUTES:
        if route.matches(path):
            return route
    return None


def normalize_path(path: str) -> str:
    """Map a concrete page path to its registry key.

    ``/admin/disbursements/8841/`` becomes ``/admin/disbursements``.
    Paths that match no template lose a trailing identifier segment, so
    ``/admin/users/2f1c9a0e77b4d`` resolves like ``/admin/users``.
    """
    stripped = _strip_trailing_slash(path)
    if stripped in ROUTE_PERMISSIONS:
        return stripped
    route = match_dynamic_route(stripped)
    if route is not None:
        return route.key
    return _drop_trailing_identifier(stripped)


def get_route_permission(path: str) -> RouteConfig | None:
    """Resolve the requirement for a page path.

    None means no specific requirement: the page is open to any
    authenticated subject.
    """
    config = ROUTE_PERMISSIONS.get(normalize_path(path))
    if config is not None:
        return config
    return ROUTE_PERMISSIONS.get(path)


def requires_auth_only(path: str) -> bool:
    """True if the route is explicitly marked as authentication-only."""
    config = get_route_permission(path)
    return config is not None and config.requires_auth_only


def has_no_permission_requirement(path: str) -> bool:
    """True if any authenticated subject may open the route."""
    config = get_route_permission(path)
    return config is None or config.requires_auth_only or not config.has_requirement


def is_public_route(path: str) -> bool:
    """True if the page is open without a session."""
    return _strip_trailing_slash(path) in PUBLIC_ROUTES
