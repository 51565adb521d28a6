# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the identity boundary."""

from payconsole.rbac.subject import Subject


class TestSubject:
    """Tests for Subject.from_raw."""

    def test_roles_are_resolved_once(self):
        """Test display names become codes at the boundary."""
        subject = Subject.from_raw("u1", ["Finance Administrator", "AUDITOR"], "SYSTEM_USER")
        assert subject.roles == ("FINANCE_ADMIN", "AUDITOR")
        assert subject.raw_roles == ("Finance Administrator", "AUDITOR")

    def test_blank_values(self):
        """Test empty roles and user type are dropped."""
        subject = Subject.from_raw("u1", ["", "MERCHANT_USER"], "")
        assert subject.roles == ("MERCHANT_USER",)
        assert subject.user_type is None

    def test_unknown_roles_are_kept(self):
        """Test unknown roles survive as unknown codes."""
        assert Subject.from_raw("u1", ["Wizard"]).roles == ("Wizard",)
