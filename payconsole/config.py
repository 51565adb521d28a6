# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings loaded from the environment."""

from pydantic_settings import BaseSettings


def _split(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Runtime settings.

    The authorization tables themselves are compiled in and cannot be
    changed through configuration.
    """

    # App
    app_name: str = "Payment Console Authorization"
    environment: str = "development"
    log_level: str = "INFO"
    allowed_origins: str = "http://localhost:3000"

    # Emit one debug record per authorization decision
    authz_decision_logging: bool = False

    # Identity collaborator (headers set by the upstream session gateway)
    subject_id_header: str = "X-Subject-Id"
    subject_roles_header: str = "X-Subject-Roles"
    subject_type_header: str = "X-Subject-Type"

    # Route guard redirect targets
    unauthorized_path: str = "/unauthorized"
    home_path: str = "/dashboard"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def cors_origins(self) -> list[str]:
        return _split(self.allowed_origins)


settings = Settings()
