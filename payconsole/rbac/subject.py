# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""The authenticated subject, as handed over by the identity provider."""

from collections.abc import Iterable
from dataclasses import dataclass

from payconsole.rbac.normalization import parse_role, resolve_role


@dataclass(frozen=True)
class Subject:
    """An already-authenticated caller.

    ``roles`` holds canonical codes only; ``raw_roles`` keeps what the
    identity provider sent, for diagnostics.
    """

    subject_id: str
    roles: tuple[str, ...]
    user_type: str | None = None
    raw_roles: tuple[str, ...] = ()

    @classmethod
    def from_raw(
        cls,
        subject_id: str,
        raw_roles: Iterable[str],
        user_type: str | None = None,
    ) -> "Subject":
        """Resolve every role to its code once, at the boundary."""
        raw = tuple(role for role in raw_roles if role)
        return cls(
            subject_id=subject_id,
            roles=tuple(resolve_role(parse_role(role)) for role in raw),
            user_type=user_type or None,
            raw_roles=raw,
        )
