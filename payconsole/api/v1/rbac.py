# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""RBAC endpoints: catalog, roles, the caller's permissions and route checks."""

from fastapi import APIRouter, Depends, Query

from payconsole.api.deps import (
    get_current_subject,
    get_optional_subject,
    get_registry,
    require_any_permission,
    require_permission,
)
from payconsole.rbac.permissions import CORE_PERMISSIONS, Permission
from payconsole.rbac.registry import AuthorizationRegistry
from payconsole.rbac.roles import DEFAULT_ROLES
from payconsole.rbac.subject import Subject
from payconsole.schemas.rbac import (
    PermissionCheckSchema,
    PermissionSchema,
    RoleSchema,
    RouteConfigSchema,
    RouteDecisionSchema,
    SubjectPermissionsSchema,
)
from payconsole.services import authorization_service

router = APIRouter()


@router.get("/rbac/permissions", response_model=list[PermissionSchema], summary="List the permission catalog")
def list_permissions(
    subject: Subject = Depends(require_permission(Permission.ROLES_VIEW.value)),
):
    """Retrieve every permission token the console knows.
    Requires roles.view permission.
    """
    return [PermissionSchema(**permission) for permission in CORE_PERMISSIONS]


@router.get("/rbac/roles", response_model=list[RoleSchema], summary="List all roles")
def list_roles(
    registry: AuthorizationRegistry = Depends(get_registry),
    subject: Subject = Depends(
        require_any_permission([Permission.ROLES_VIEW.value, Permission.USERS_ASSIGN_ROLES.value])
    ),
):
    """Retrieve every role code with its display name, raw grants and the
    user types it is valid for.
    Requires roles.view or users.assign_roles permission.
    """
    described = {role["code"]: role for role in DEFAULT_ROLES}
    roles = []
    for code, tokens in registry.role_permissions.items():
        role = described.get(code, {})
        roles.append(
            RoleSchema(
                code=code,
                name=role.get("name"),
                description=role.get("description"),
                permissions=list(tokens),
                user_types=[
                    user_type
                    for user_type, codes in registry.user_type_roles.items()
                    if code in codes
                ],
                reserved=code in registry.reserved_roles,
            )
        )
    return roles


@router.get("/rbac/me/permissions", response_model=SubjectPermissionsSchema, summary="Get current subject's effective permissions")
def get_my_permissions(subject: Subject = Depends(get_current_subject)):
    """Retrieve the caller's canonical roles, the roles dropped because they
    do not fit its user type, and the union of granted tokens.
    """
    resolved = authorization_service.resolve_subject_permissions(subject)
    return SubjectPermissionsSchema(
        subject_id=subject.subject_id,
        user_type=subject.user_type,
        roles=resolved.roles,
        dropped_roles=resolved.dropped_roles,
        permissions=sorted(resolved.permissions),
    )


@router.get("/rbac/me/check", response_model=PermissionCheckSchema, summary="Check one permission for the current subject")
def check_my_permission(
    permission: str = Query(..., min_length=1),
    subject: Subject = Depends(get_current_subject),
):
    """Answer whether the caller holds a permission. A "no" is a normal
    answer, not an error.
    """
    return PermissionCheckSchema(
        permission=permission,
        granted=authorization_service.check_permission(subject, permission),
    )


@router.get("/rbac/routes/authorize", response_model=RouteDecisionSchema, summary="Guard a console page")
def authorize_route(
    path: str = Query(..., min_length=1),
    subject: Subject | None = Depends(get_optional_subject),
):
    """Decide whether the caller may open a console page, and where to send
    it otherwise. Pages without a registered requirement are open to any
    authenticated caller.
    """
    decision = authorization_service.authorize_route(subject, path)
    return RouteDecisionSchema(
        path=decision.path,
        normalized_path=decision.normalized_path,
        allowed=decision.allowed,
        reason=decision.reason.value,
        redirect_to=decision.redirect_to,
        config=(
            RouteConfigSchema.model_validate(decision.config)
            if decision.config is not None
            else None
        ),
    )
