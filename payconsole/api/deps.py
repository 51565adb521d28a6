# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

from fastapi import Depends, HTTPException, Request, status

from payconsole.config import settings
from payconsole.rbac.evaluator import PermissionRequirement
from payconsole.rbac.registry import AuthorizationRegistry
from payconsole.rbac.subject import Subject
from payconsole.services import authorization_service


def get_registry() -> AuthorizationRegistry:
    """Get the shared authorization registry."""
    return AuthorizationRegistry.get_instance()


def _split_roles(header: str | None) -> list[str]:
    if not header:
        return []
    return [role.strip() for role in header.split(",") if role.strip()]


def get_optional_subject(request: Request) -> Subject | None:
    """Get the subject forwarded by the session gateway, if any."""
    subject_id = request.headers.get(settings.subject_id_header)
    if not subject_id:
        return None

    return Subject.from_raw(
        subject_id=subject_id,
        raw_roles=_split_roles(request.headers.get(settings.subject_roles_header)),
        user_type=(request.headers.get(settings.subject_type_header) or "").strip() or None,
    )


def get_current_subject(
    subject: Subject | None = Depends(get_optional_subject),
) -> Subject:
    """Get the authenticated subject or fail with 401."""
    if subject is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return subject


def require_permission(permission: str):
    """Dependency for permission-based authorization."""

    def dependency(subject: Subject = Depends(get_current_subject)) -> Subject:
        if not authorization_service.check_permission(subject, permission):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission denied: {permission}",
            )
        return subject

    return dependency


def require_any_permission(permissions: list[str], require_all: bool = False):
    """Dependency requiring one (or, with ``require_all``, each) of several permissions."""
    requirement = PermissionRequirement(
        permissions=tuple(permissions), require_all=require_all
    )

    def dependency(subject: Subject = Depends(get_current_subject)) -> Subject:
        if not authorization_service.check_requirement(subject, requirement):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission denied: {', '.join(permissions)}",
            )
        return subject

    return dependency
