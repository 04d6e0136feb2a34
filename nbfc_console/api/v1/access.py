"""Role, permission and navigation lookups for the dashboard shell"""

from typing import Optional
from fastapi import APIRouter, Depends, Query

from nbfc_console.api.v1.schemas import (
    AccessCheckResponse,
    NavigationItemSchema,
    NavigationResponse,
    RolePermissions,
    RolesResponse,
)
from nbfc_console.api.dependencies import get_current_role, get_permission_resolver
from nbfc_console.domain.navigation import visible_modules
from nbfc_console.domain.permissions import PermissionResolver
from nbfc_console.infrastructure.observability.metrics import record_permission_check

router = APIRouter()


@router.get("/roles", response_model=RolesResponse)
def list_roles(resolver: PermissionResolver = Depends(get_permission_resolver)):
    """Every configured role with its permissions in configured order"""
    return RolesResponse(
        roles=[
            RolePermissions(role=role.value, permissions=list(permissions))
            for role, permissions in resolver.table.items()
        ]
    )


@router.get("/roles/{role}/permissions", response_model=RolePermissions)
def get_role_permissions(role: str, resolver: PermissionResolver = Depends(get_permission_resolver)):
    """Unknown roles answer with an empty list rather than 404"""
    return RolePermissions(role=role, permissions=list(resolver.ordered_permissions(role)))


@router.get("/access/check", response_model=AccessCheckResponse)
def check_access(
    role: str = Query(..., description="Role tag"),
    permission: str = Query(..., description="Requested permission tag"),
    resolver: PermissionResolver = Depends(get_permission_resolver),
):
    granted = resolver.has_permission(role, permission)
    record_permission_check(granted)
    return AccessCheckResponse(role=role, permission=permission, granted=granted)


@router.get("/navigation", response_model=NavigationResponse)
def get_navigation(role: Optional[str] = Depends(get_current_role)):
    """Sidebar modules for the caller's role"""
    modules = [
        NavigationItemSchema(id=item.id, title=item.title)
        for item in visible_modules(role)
    ]
    return NavigationResponse(role=role, modules=modules)
