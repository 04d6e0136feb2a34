"""Dependency injection for FastAPI endpoints"""

from functools import lru_cache
from typing import Callable, Optional
from fastapi import Depends, HTTPException, Request

from nbfc_console.config import settings
from nbfc_console.domain.disbursements import DisbursementSimulator
from nbfc_console.domain.permissions import PermissionResolver, load_role_permission_table
from nbfc_console.infrastructure.observability.logging import log_access_denied
from nbfc_console.infrastructure.observability.metrics import record_permission_check


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


@lru_cache(maxsize=1)
def get_permission_resolver() -> PermissionResolver:
    """Resolver over the configured table, loaded once per process"""
    if settings.role_permissions_path:
        return PermissionResolver(load_role_permission_table(settings.role_permissions_path))
    return PermissionResolver()


def get_current_role(request: Request) -> Optional[str]:
    """Caller's role as asserted by the upstream session layer"""
    return request.headers.get(settings.role_header)


def get_disbursement_simulator() -> DisbursementSimulator:
    return DisbursementSimulator(
        success_rate=settings.disbursement_success_rate,
        max_retries=settings.disbursement_max_retries,
    )


def require_permission(permission: str) -> Callable[..., Optional[str]]:
    """Build a view gate that answers 403 unless the caller's role holds `permission`"""

    def gate(
        request: Request,
        role: Optional[str] = Depends(get_current_role),
        resolver: PermissionResolver = Depends(get_permission_resolver),
    ) -> Optional[str]:
        granted = resolver.has_permission(role, permission)
        record_permission_check(granted)
        if not granted:
            log_access_denied(get_request_id(request), role or "anonymous", permission, request.url.path)
            raise HTTPException(status_code=403, detail="Access denied")
        return role

    return gate
