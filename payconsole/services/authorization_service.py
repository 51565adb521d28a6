# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authorization service.

Thin caller-side layer around the pure RBAC functions: it turns their
answers into request-level decisions and writes the diagnostics, so the
decision functions themselves stay free of side effects.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from payconsole.config import settings
from payconsole.rbac.evaluator import (
    PermissionRequirement,
    get_roles_permissions,
    has_any_permission,
    satisfies_requirement,
)
from payconsole.rbac.menu import MenuItem, PortalType, build_menu_for_subject
from payconsole.rbac.routes import (
    LOGIN_ROUTE,
    RouteConfig,
    get_route_permission,
    is_public_route,
    normalize_path,
)
from payconsole.rbac.subject import Subject
from payconsole.rbac.user_types import validate_roles_for_user_type

logger = logging.getLogger(__name__)


class RouteDecisionReason(str, Enum):
    """Why a route guard decision came out the way it did."""

    PUBLIC = "public"
    ALREADY_AUTHENTICATED = "already_authenticated"
    UNAUTHENTICATED = "unauthenticated"
    AUTH_ONLY = "auth_only"
    NO_REQUIREMENT = "no_requirement"
    PERMITTED = "permitted"
    DENIED = "denied"


@dataclass(frozen=True)
class RouteDecision:
    """Outcome of guarding one page navigation."""

    path: str
    normalized_path: str
    allowed: bool
    reason: RouteDecisionReason
    redirect_to: str | None = None
    config: RouteConfig | None = None


@dataclass(frozen=True)
class SubjectPermissions:
    """A subject's effective roles and the tokens they grant."""

    roles: list[str]
    dropped_roles: list[str] = field(default_factory=list)
    permissions: set[str] = field(default_factory=set)


def _decision_logging(log: logging.Logger) -> bool:
    return settings.authz_decision_logging and log.isEnabledFor(logging.DEBUG)


def _report_dropped_roles(subject: Subject, log: logging.Logger) -> list[str]:
    validation = validate_roles_for_user_type(subject.roles, subject.user_type)
    if not validation.is_valid:
        log.warning(
            f"Subject {subject.subject_id} ({subject.user_type}) presented roles "
            f"not valid for its user type: {validation.invalid_roles}"
        )
    return validation.invalid_roles


def check_permission(
    subject: Subject, permission: str, log: logging.Logger | None = None
) -> bool:
    """Check one permission for a subject, logging the decision."""
    log = log or logger
    allowed = has_any_permission(subject.roles, permission, subject.user_type)
    if _decision_logging(log):
        log.debug(
            f"Permission {permission} for {subject.subject_id} "
            f"roles={list(subject.roles)} user_type={subject.user_type}: "
            f"{'granted' if allowed else 'denied'}"
        )
    return allowed


def check_requirement(
    subject: Subject,
    requirement: PermissionRequirement,
    log: logging.Logger | None = None,
) -> bool:
    """Check a single/any/all permission requirement for a subject."""
    log = log or logger
    allowed = satisfies_requirement(subject.roles, requirement, subject.user_type)
    if _decision_logging(log):
        mode = "all" if requirement.require_all else "any"
        log.debug(
            f"Requirement {list(requirement.required_permissions)} ({mode}) for "
            f"{subject.subject_id}: {'granted' if allowed else 'denied'}"
        )
    return allowed


def resolve_subject_permissions(
    subject: Subject, log: logging.Logger | None = None
) -> SubjectPermissions:
    """Resolve the permission set a subject effectively holds."""
    log = log or logger
    dropped = _report_dropped_roles(subject, log)
    roles = [role for role in subject.roles if role not in dropped]
    return SubjectPermissions(
        roles=roles,
        dropped_roles=dropped,
        permissions=get_roles_permissions(subject.roles, subject.user_type),
    )


def build_menu(
    subject: Subject, log: logging.Logger | None = None
) -> tuple[PortalType, list[MenuItem]]:
    """Build the navigation menu the subject is allowed to see."""
    log = log or logger
    portal, items = build_menu_for_subject(subject.roles, subject.user_type)
    if _decision_logging(log):
        log.debug(
            f"Menu for {subject.subject_id} ({portal.value}): "
            f"{[item.title for item in items]}"
        )
    return portal, items


def _decide(
    path: str,
    allowed: bool,
    reason: RouteDecisionReason,
    redirect_to: str | None = None,
    config: RouteConfig | None = None,
) -> RouteDecision:
    return RouteDecision(
        path=path,
        normalized_path=normalize_path(path),
        allowed=allowed,
        reason=reason,
        redirect_to=redirect_to,
        config=config,
    )


def _guard(subject: Subject | None, path: str) -> RouteDecision:
    if is_public_route(path):
        if subject is not None and normalize_path(path) == LOGIN_ROUTE:
            return _decide(
                path, False, RouteDecisionReason.ALREADY_AUTHENTICATED, settings.home_path
            )
        return _decide(path, True, RouteDecisionReason.PUBLIC)

    if subject is None:
        return _decide(path, False, RouteDecisionReason.UNAUTHENTICATED, LOGIN_ROUTE)

    config = get_route_permission(path)
    if config is None:
        return _decide(path, True, RouteDecisionReason.NO_REQUIREMENT)
    if config.requires_auth_only:
        return _decide(path, True, RouteDecisionReason.AUTH_ONLY, config=config)
    if not config.has_requirement:
        return _decide(path, True, RouteDecisionReason.NO_REQUIREMENT, config=config)

    if satisfies_requirement(subject.roles, config, subject.user_type):
        return _decide(path, True, RouteDecisionReason.PERMITTED, config=config)
    return _decide(
        path, False, RouteDecisionReason.DENIED, settings.unauthorized_path, config
    )


def authorize_route(
    subject: Subject | None, path: str, log: logging.Logger | None = None
) -> RouteDecision:
    """Decide whether a subject may open a console page.

    Unregistered pages are open to any authenticated subject; only pages
    with a registered requirement are checked against the subject's roles.
    """
    log = log or logger
    decision = _guard(subject, path)
    if not decision.allowed and decision.reason == RouteDecisionReason.DENIED:
        log.info(
            f"Access to {path} denied for {subject.subject_id}: requires "
            f"{list(decision.config.required_permissions)}"
        )
    elif _decision_logging(log):
        log.debug(
            f"Route {path} -> {decision.normalized_path}: {decision.reason.value}"
            + (f", redirect to {decision.redirect_to}" if decision.redirect_to else "")
        )
    return decision
