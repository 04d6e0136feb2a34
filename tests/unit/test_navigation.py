"""Unit tests for role-based sidebar navigation"""

import pytest
from nbfc_console.domain.models import NavigationItem
from nbfc_console.domain.navigation import visible_modules
from nbfc_console.domain.permissions import Role


def _menu(role):
    return [(item.id, item.title) for item in visible_modules(role)]


@pytest.mark.parametrize(
    "role, expected",
    [
        (
            "admin",
            [
                ("dashboard", "Dashboard"),
                ("loans", "Loan Management"),
                ("risk", "Risk & Underwriting"),
                ("collections", "Collections"),
                ("kyc", "KYC & Compliance"),
                ("reporting", "Financial Reports"),
                ("users", "User Management"),
            ],
        ),
        (
            "credit_officer",
            [
                ("dashboard", "Dashboard"),
                ("loans", "Loan Management"),
                ("risk", "Risk & Underwriting"),
                ("kyc", "KYC & Compliance"),
            ],
        ),
        (
            "risk_manager",
            [
                ("dashboard", "Dashboard"),
                ("risk", "Risk & Underwriting"),
                ("loans", "Loan Management"),
                ("reporting", "Risk Reports"),
            ],
        ),
        (
            "collections_officer",
            [
                ("dashboard", "Dashboard"),
                ("collections", "Collections"),
                ("loans", "Loan Management"),
                ("reporting", "Collections Reports"),
            ],
        ),
        (
            "compliance_officer",
            [
                ("dashboard", "Dashboard"),
                ("kyc", "KYC & Compliance"),
                ("reporting", "Compliance Reports"),
            ],
        ),
    ],
)
def test_role_menus(role, expected):
    assert _menu(role) == expected
    assert _menu(Role(role)) == expected


def test_every_role_has_a_menu():
    for role in Role:
        assert visible_modules(role)[0].id == "dashboard"


@pytest.mark.parametrize("role", ["intern", "ADMIN", "", None])
def test_unknown_role_gets_no_menu(role):
    assert visible_modules(role) == []


def test_injected_menus_replace_default():
    menus = {Role.CREDIT_OFFICER: (NavigationItem(id="kyc", title="KYC"),)}

    assert [item.id for item in visible_modules("credit_officer", menus)] == ["kyc"]
    assert visible_modules("admin", menus) == []
