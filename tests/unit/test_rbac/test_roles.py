# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the role -> permission map."""

import pytest

from payconsole.rbac.permissions import ALL_PERMISSION_CODES
from payconsole.rbac.roles import (
    DEFAULT_ROLES,
    RESERVED_ROLES,
    ROLE_PERMISSIONS,
    RoleCode,
    is_known_role,
    lookup_role_permissions,
)


class TestRolePermissions:
    """Tests for ROLE_PERMISSIONS."""

    def test_super_admin_is_exactly_the_global_wildcard(self):
        """Test the super admin grant."""
        assert ROLE_PERMISSIONS["SUPER_ADMIN"] == ("*",)

    def test_every_role_code_has_an_entry(self):
        """Test that every RoleCode keys the map."""
        for code in RoleCode:
            assert code.value in ROLE_PERMISSIONS
            assert ROLE_PERMISSIONS[code.value], f"{code.value} grants nothing"

    def test_reserved_roles_are_empty(self):
        """Test that reserved roles exist but grant nothing."""
        for code in RESERVED_ROLES:
            assert ROLE_PERMISSIONS[code] == ()

    def test_tokens_are_in_catalog(self):
        """Test that no role references an unknown token."""
        for code, tokens in ROLE_PERMISSIONS.items():
            assert set(tokens) <= ALL_PERMISSION_CODES, code

    def test_finance_admin_grants(self):
        """Test finance admin wildcards."""
        assert "transactions.*" in ROLE_PERMISSIONS["FINANCE_ADMIN"]
        assert "disbursements.*" in ROLE_PERMISSIONS["FINANCE_ADMIN"]

    def test_map_is_read_only(self):
        """Test that the map cannot be mutated at runtime."""
        with pytest.raises(TypeError):
            ROLE_PERMISSIONS["HACKER"] = ("*",)


class TestLookup:
    """Tests for lookup helpers."""

    def test_unknown_code_resolves_to_empty(self):
        """Test deny-by-default lookup."""
        assert lookup_role_permissions("NOT_A_ROLE") == ()
        assert lookup_role_permissions("") == ()

    def test_lookup_is_case_sensitive(self):
        """Test that codes are not case-folded."""
        assert lookup_role_permissions("super_admin") == ()

    def test_is_known_role(self):
        """Test known role detection."""
        assert is_known_role("MERCHANT_USER") is True
        assert is_known_role("AUDITOR") is True
        assert is_known_role("Merchant User") is False

    def test_default_roles_have_unique_names(self):
        """Test display names are unique."""
        names = [role["name"] for role in DEFAULT_ROLES]
        assert len(names) == len(set(names))
        assert {role["code"] for role in DEFAULT_ROLES} == {c.value for c in RoleCode}
