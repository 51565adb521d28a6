# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""RBAC schemas."""

from pydantic import BaseModel, ConfigDict


class PermissionSchema(BaseModel):
    """Schema representing a catalog permission."""

    code: str
    resource: str
    description: str
    wildcard: bool


class RoleSchema(BaseModel):
    """Schema representing a role and its raw grants."""

    code: str
    name: str | None
    description: str | None
    permissions: list[str]
    user_types: list[str]
    reserved: bool = False


class SubjectPermissionsSchema(BaseModel):
    """Schema representing the current subject's effective permissions."""

    subject_id: str
    user_type: str | None
    roles: list[str]
    dropped_roles: list[str]
    permissions: list[str]


class PermissionCheckSchema(BaseModel):
    """Schema for a single permission decision."""

    permission: str
    granted: bool


class RouteConfigSchema(BaseModel):
    """Schema representing a route requirement."""

    model_config = ConfigDict(from_attributes=True)

    permission: str | None
    permissions: list[str]
    require_all: bool
    requires_auth_only: bool


class RouteDecisionSchema(BaseModel):
    """Schema for a route guard decision."""

    model_config = ConfigDict(from_attributes=True)

    path: str
    normalized_path: str
    allowed: bool
    reason: str
    redirect_to: str | None
    config: RouteConfigSchema | None
