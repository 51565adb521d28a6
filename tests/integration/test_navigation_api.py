# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for the navigation endpoint."""


class TestMenuEndpoint:
    """Tests for GET /api/v1/navigation/menu."""

    def test_requires_authentication(self, client):
        """Test that endpoint requires authentication."""
        response = client.get("/api/v1/navigation/menu")
        assert response.status_code == 401

    def test_super_admin(self, client, admin_headers):
        """Test the full admin tree."""
        response = client.get("/api/v1/navigation/menu", headers=admin_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["portal"] == "admin"
        assert len(data["items"]) == 7
        users = next(item for item in data["items"] if item["url"] == "/admin/users")
        assert [sub["url"] for sub in users["sub_items"]] == ["/admin/users", "/admin/roles"]

    def test_merchant(self, client, merchant_headers):
        """Test merchant staff get the merchant portal."""
        response = client.get("/api/v1/navigation/menu", headers=merchant_headers)
        data = response.json()
        assert data["portal"] == "merchant"
        assert [item["title"] for item in data["items"]] == [
            "Dashboard",
            "Transactions",
            "Disbursements",
            "Settings",
        ]

    def test_no_roles(self, client, make_headers):
        """Test a subject without roles sees only the dashboard."""
        response = client.get("/api/v1/navigation/menu", headers=make_headers([], "SYSTEM_USER"))
        assert response.status_code == 200
        assert [item["title"] for item in response.json()["items"]] == ["Dashboard"]

    def test_display_names_and_codes_are_equivalent(self, client, make_headers):
        """Test roles given by display name resolve like codes."""
        by_name = client.get(
            "/api/v1/navigation/menu",
            headers=make_headers(["Compliance Administrator"], "SYSTEM_USER"),
        ).json()
        by_code = client.get(
            "/api/v1/navigation/menu",
            headers=make_headers(["COMPLIANCE_ADMIN"], "SYSTEM_USER"),
        ).json()
        assert by_name == by_code
