# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from payconsole.api.v1 import navigation, rbac

api_router = APIRouter()

# Navigation routes
api_router.include_router(navigation.router, prefix="/navigation", tags=["navigation"])

# RBAC routes
api_router.include_router(rbac.router, tags=["rbac"])
