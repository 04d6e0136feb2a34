"""Role-based access control - role to permission resolution for view gates"""

import json
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, NewType, Optional, Tuple, Union

from nbfc_console.domain.exceptions import InvalidRolePermissionTableError

Permission = NewType("Permission", str)

ALL = Permission("all")  # wildcard: every permission, including ones not yet named

KNOWN_PERMISSIONS: FrozenSet[str] = frozenset(
    {
        "loans",
        "risk",
        "kyc",
        "collections",
        "reporting",
        "underwriting",
        "disbursement",
        "analytics",
        "fraud",
        "compliance",
        "repayment",
        "audit",
        "users",
        ALL,
    }
)


class Role(str, Enum):
    ADMIN = "admin"
    CREDIT_OFFICER = "credit_officer"
    RISK_MANAGER = "risk_manager"
    COLLECTIONS_OFFICER = "collections_officer"
    COMPLIANCE_OFFICER = "compliance_officer"


RolePermissionTable = Mapping[Role, Tuple[Permission, ...]]

DEFAULT_ROLE_PERMISSIONS = {
    "admin": ["all"],
    "credit_officer": ["loans", "underwriting", "kyc", "disbursement"],
    "risk_manager": ["risk", "underwriting", "loans", "analytics", "fraud"],
    "collections_officer": ["collections", "disbursement", "repayment"],
    "compliance_officer": ["kyc", "compliance", "reporting", "audit"],
}


def parse_role(value: Union[Role, str, None]) -> Optional[Role]:
    """Return the Role for a tag, or None when it is not a known role"""
    if isinstance(value, Role):
        return value
    try:
        return Role(value)
    except ValueError:
        return None


def validate_permission(value: object, vocabulary: FrozenSet[str] = KNOWN_PERMISSIONS) -> Permission:
    """Check a permission tag against the known vocabulary"""
    if not isinstance(value, str) or not value:
        raise InvalidRolePermissionTableError(f"Permission must be a non-empty string, got {value!r}")
    if value not in vocabulary:
        raise InvalidRolePermissionTableError(f"Unknown permission: {value!r}")
    return Permission(value)


def build_role_permission_table(
    raw: Mapping[str, Iterable[str]],
    vocabulary: FrozenSet[str] = KNOWN_PERMISSIONS,
) -> RolePermissionTable:
    """
    Validate raw configuration into an immutable role -> permissions table.

    Rules:
    - Every key must be a known role
    - Every role maps to a non-empty set (order kept, duplicates dropped)
    - admin must be configured and hold the "all" wildcard
    - Other roles may be omitted; they fail closed

    Raises:
        InvalidRolePermissionTableError: On any violation
    """
    table = {}
    for key, permissions in raw.items():
        role = parse_role(key)
        if role is None:
            raise InvalidRolePermissionTableError(f"Unknown role: {key!r}")
        if not isinstance(permissions, (list, tuple, set, frozenset)):
            raise InvalidRolePermissionTableError(f"Permissions for {role.value} must be a list")

        ordered = tuple(dict.fromkeys(validate_permission(p, vocabulary) for p in permissions))
        if not ordered:
            raise InvalidRolePermissionTableError(f"Role {role.value} has no permissions")
        table[role] = ordered

    if Role.ADMIN not in table:
        raise InvalidRolePermissionTableError("admin must be configured")
    if ALL not in table[Role.ADMIN]:
        raise InvalidRolePermissionTableError("admin must include the 'all' permission")

    return MappingProxyType(table)


def load_role_permission_table(path: Union[str, Path]) -> RolePermissionTable:
    """Read a JSON object {role: [permission, ...]} and validate it"""
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise InvalidRolePermissionTableError(f"Cannot read role permissions from {path}: {e}") from e

    if not isinstance(raw, dict):
        raise InvalidRolePermissionTableError("Role permissions file must contain a JSON object")

    return build_role_permission_table(raw)


class PermissionResolver:
    """Answers whether a role may access a capability area"""

    def __init__(self, table: Optional[RolePermissionTable] = None):
        self.table = table if table is not None else build_role_permission_table(DEFAULT_ROLE_PERMISSIONS)

    def ordered_permissions(self, role: Union[Role, str, None]) -> Tuple[Permission, ...]:
        parsed = parse_role(role)
        if parsed is None:
            return ()
        return self.table.get(parsed, ())

    def permissions_for(self, role: Union[Role, str, None]) -> FrozenSet[Permission]:
        """Configured permissions for a role; empty for unknown roles (fail closed)"""
        return frozenset(self.ordered_permissions(role))

    def has_permission(self, role: Union[Role, str, None], requested: Optional[str]) -> bool:
        """
        True if the role holds the requested tag or the "all" wildcard.

        Matching is exact and case-sensitive. Never raises: unknown roles
        and non-string requests are simply denied.
        """
        if not isinstance(requested, str):
            return False
        granted = self.permissions_for(role)
        return ALL in granted or requested in granted
