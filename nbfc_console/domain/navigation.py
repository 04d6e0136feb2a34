"""Dashboard sidebar menus per role"""

from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple, Union
from nbfc_console.domain.models import NavigationItem
from nbfc_console.domain.permissions import Role, parse_role

RoleMenus = Mapping[Role, Tuple[NavigationItem, ...]]

DASHBOARD = NavigationItem(id="dashboard", title="Dashboard")
LOANS = NavigationItem(id="loans", title="Loan Management")
RISK = NavigationItem(id="risk", title="Risk & Underwriting")
COLLECTIONS = NavigationItem(id="collections", title="Collections")
KYC = NavigationItem(id="kyc", title="KYC & Compliance")
USERS = NavigationItem(id="users", title="User Management")

# Titles of the reporting entry differ by role
ROLE_MENUS: RoleMenus = MappingProxyType(
    {
        Role.ADMIN: (
            DASHBOARD,
            LOANS,
            RISK,
            COLLECTIONS,
            KYC,
            NavigationItem(id="reporting", title="Financial Reports"),
            USERS,
        ),
        Role.CREDIT_OFFICER: (DASHBOARD, LOANS, RISK, KYC),
        Role.RISK_MANAGER: (
            DASHBOARD,
            RISK,
            LOANS,
            NavigationItem(id="reporting", title="Risk Reports"),
        ),
        Role.COLLECTIONS_OFFICER: (
            DASHBOARD,
            COLLECTIONS,
            LOANS,
            NavigationItem(id="reporting", title="Collections Reports"),
        ),
        Role.COMPLIANCE_OFFICER: (
            DASHBOARD,
            KYC,
            NavigationItem(id="reporting", title="Compliance Reports"),
        ),
    }
)


def visible_modules(role: Union[Role, str, None], menus: Optional[RoleMenus] = None) -> List[NavigationItem]:
    """Sidebar entries for a role, in menu order. Unknown roles get no menu."""
    parsed = parse_role(role)
    if parsed is None:
        return []
    return list((ROLE_MENUS if menus is None else menus).get(parsed, ()))
