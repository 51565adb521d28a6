# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from payconsole import __version__
from payconsole.api.deps import get_registry
from payconsole.config import settings
from payconsole.rbac.registry import AuthorizationRegistry
from payconsole.schemas.common import HealthResponse

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler: check the authorization tables."""
    logger.info("Checking authorization tables...")
    registry = AuthorizationRegistry.get_instance()
    summary = registry.validate()
    logger.info(
        f"Authorization tables ready: {summary.roles} roles, "
        f"{summary.permissions} permissions, {summary.routes} routes"
    )
    if summary.empty_roles:
        logger.warning(f"Roles without any grant: {', '.join(summary.empty_roles)}")

    yield

    logger.info("Shutting down authorization service...")


app = FastAPI(
    title=settings.app_name,
    description="Role-based access control for the payment administration console",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", response_model=HealthResponse)
def health_check(registry: AuthorizationRegistry = Depends(get_registry)) -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        roles=len(registry.role_permissions),
        permissions=len(registry.permissions),
        routes=len(registry.route_permissions),
    )


# Import and include API router after it's created
from payconsole.api.v1.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")
