# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for role name normalization."""

import pytest

from payconsole.rbac.normalization import (
    ROLE_DISPLAY_NAMES,
    RoleCodeRef,
    RoleDisplayName,
    normalize_role,
    normalize_roles,
    parse_role,
    resolve_role,
)

SAMPLE_ROLES = [
    "FINANCE_ADMIN",
    "Finance Administrator",
    "Merchant Support",
    "AUDITOR",
    "unknown-role",
    "",
    " Finance Administrator ",
    "finance administrator",
]


class TestNormalizeRole:
    """Tests for normalize_role."""

    def test_code_is_unchanged(self):
        """Test that a canonical code passes through."""
        assert normalize_role("FINANCE_ADMIN") == "FINANCE_ADMIN"

    def test_display_name_maps_to_code(self):
        """Test that display names are translated."""
        assert normalize_role("Finance Administrator") == "FINANCE_ADMIN"
        assert normalize_role("Payment Operator") == "PAYMENT_OPERATOR"

    def test_unknown_passes_through(self):
        """Test the silent pass-through of unknown strings."""
        assert normalize_role("Chief Fun Officer") == "Chief Fun Officer"

    def test_no_trimming_or_case_folding(self):
        """Test that near-miss names are not recognised."""
        assert normalize_role(" Finance Administrator ") == " Finance Administrator "
        assert normalize_role("finance administrator") == "finance administrator"

    @pytest.mark.parametrize("role", SAMPLE_ROLES)
    def test_idempotent(self, role):
        """Test normalize(normalize(r)) == normalize(r)."""
        assert normalize_role(normalize_role(role)) == normalize_role(role)

    def test_every_display_name_resolves(self):
        """Test the display name table is complete."""
        for name, code in ROLE_DISPLAY_NAMES.items():
            assert normalize_role(name) == code

    def test_normalize_roles_keeps_order_and_duplicates(self):
        """Test list normalization."""
        assert normalize_roles(["Merchant User", "MERCHANT_USER", "x"]) == [
            "MERCHANT_USER",
            "MERCHANT_USER",
            "x",
        ]


class TestTaggedRoles:
    """Tests for tagged role values."""

    def test_parse_code(self):
        """Test parsing a known code."""
        assert parse_role("SUPER_ADMIN") == RoleCodeRef("SUPER_ADMIN")

    def test_parse_display_name(self):
        """Test parsing a display name."""
        ref = parse_role("Super Administrator")
        assert isinstance(ref, RoleDisplayName)
        assert resolve_role(ref) == "SUPER_ADMIN"

    def test_parse_unknown_is_code(self):
        """Test unknown strings become unknown codes."""
        assert parse_role("nobody") == RoleCodeRef("nobody")

    def test_unknown_display_name_resolves_to_itself(self):
        """Test a hand-built display name nobody uses still resolves."""
        ref = RoleDisplayName("Chief Vibes Officer")
        assert ref.code == "Chief Vibes Officer"
        assert resolve_role(ref) == "Chief Vibes Officer"
