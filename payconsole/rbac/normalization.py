# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role name normalization.

The identity provider hands out roles either as canonical codes
(``FINANCE_ADMIN``) or as display names (``"Finance Administrator"``).
Everything past the identity boundary works with codes only.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType

from payconsole.rbac.roles import DEFAULT_ROLES, is_known_role

ROLE_DISPLAY_NAMES = MappingProxyType({role["name"]: role["code"] for role in DEFAULT_ROLES})


@dataclass(frozen=True)
class RoleCodeRef:
    """A role given by its canonical code (known or not)."""

    code: str


@dataclass(frozen=True)
class RoleDisplayName:
    """A role given by its human readable name."""

    name: str

    @property
    def code(self) -> str:
        """The role code, or the name itself if no role is called that."""
        return ROLE_DISPLAY_NAMES.get(self.name, self.name)


RoleRef = RoleCodeRef | RoleDisplayName


def parse_role(raw: str) -> RoleRef:
    """Classify a raw role string.

    Known codes win over display names; anything unrecognised is kept as
    an (unknown) code so it resolves to no permissions downstream.
    """
    if is_known_role(raw):
        return RoleCodeRef(raw)
    if raw in ROLE_DISPLAY_NAMES:
        return RoleDisplayName(raw)
    return RoleCodeRef(raw)


def resolve_role(ref: RoleRef) -> str:
    """Return the canonical code for a tagged role."""
    return ref.code


def normalize_role(role: str) -> str:
    """Map a display name to its code; codes and unknown strings pass through."""
    return resolve_role(parse_role(role))


def normalize_roles(roles: Iterable[str]) -> list[str]:
    """Normalize every role, keeping order and duplicates."""
    return [normalize_role(role) for role in roles]
