# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for user type validation."""

from payconsole.rbac.user_types import (
    USER_TYPE_ROLES,
    UserType,
    filter_valid_roles,
    get_valid_roles_for_user_type,
    is_role_valid_for_user_type,
    validate_roles_for_user_type,
)


class TestValidRoles:
    """Tests for get_valid_roles_for_user_type."""

    def test_root_user_only_super_admin(self):
        """Test the root user table."""
        assert get_valid_roles_for_user_type("ROOT_USER") == ("SUPER_ADMIN",)

    def test_merchant_roles(self):
        """Test merchant staff roles."""
        assert set(get_valid_roles_for_user_type("MERCHANT_USER")) == {
            "MERCHANT_ADMIN",
            "MERCHANT_USER",
            "MERCHANT_FINANCE",
            "MERCHANT_SUPPORT",
        }

    def test_unknown_or_missing_type(self):
        """Test unknown and missing user types."""
        assert get_valid_roles_for_user_type("ALIEN") == ()
        assert get_valid_roles_for_user_type(None) == ()
        assert get_valid_roles_for_user_type("") == ()

    def test_user_types_do_not_share_roles(self):
        """Test that no role is valid for two user types."""
        seen: set[str] = set()
        for roles in USER_TYPE_ROLES.values():
            assert seen.isdisjoint(roles)
            seen.update(roles)

    def test_enum_matches_table(self):
        """Test every UserType has a table entry."""
        assert set(USER_TYPE_ROLES) == {t.value for t in UserType}


class TestIsRoleValid:
    """Tests for is_role_valid_for_user_type."""

    def test_valid_pairing(self):
        """Test a platform role on a platform account."""
        assert is_role_valid_for_user_type("FINANCE_ADMIN", "SYSTEM_USER") is True

    def test_display_name_is_normalized(self):
        """Test display names are resolved before validation."""
        assert is_role_valid_for_user_type("Finance Administrator", "SYSTEM_USER") is True

    def test_cross_type_pairing(self):
        """Test a merchant role on a platform account."""
        assert is_role_valid_for_user_type("MERCHANT_ADMIN", "SYSTEM_USER") is False
        assert is_role_valid_for_user_type("SYSTEM_ADMIN", "MERCHANT_USER") is False

    def test_empty_arguments(self):
        """Test empty role or type."""
        assert is_role_valid_for_user_type("", "SYSTEM_USER") is False
        assert is_role_valid_for_user_type("SYSTEM_ADMIN", None) is False


class TestFilterAndValidate:
    """Tests for filter_valid_roles and validate_roles_for_user_type."""

    def test_filter_keeps_order(self):
        """Test filtering preserves order of valid roles."""
        roles = ["PAYMENT_OPERATOR", "MERCHANT_USER", "SYSTEM_ADMIN"]
        assert filter_valid_roles(roles, "SYSTEM_USER") == ["PAYMENT_OPERATOR", "SYSTEM_ADMIN"]

    def test_filter_without_user_type(self):
        """Test that filtering without a type yields nothing."""
        assert filter_valid_roles(["SYSTEM_ADMIN"], None) == []

    def test_filter_empty(self):
        """Test filtering an empty list."""
        assert filter_valid_roles([], "SYSTEM_USER") == []

    def test_validate_reports_invalid_roles(self):
        """Test the validation report."""
        result = validate_roles_for_user_type(["MERCHANT_USER", "SUPER_ADMIN"], "MERCHANT_USER")
        assert result.is_valid is False
        assert result.invalid_roles == ["SUPER_ADMIN"]

    def test_validate_without_type_is_valid(self):
        """Test nothing can be judged without a user type."""
        result = validate_roles_for_user_type(["SUPER_ADMIN"], None)
        assert result.is_valid is True
        assert result.invalid_roles == []
