"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidRolePermissionTableError(DomainException):
    """Role/permission configuration failed validation at load time"""

    pass


class DisbursementNotFoundError(DomainException):
    """No disbursement exists with the requested ID"""

    pass


class DisbursementStateError(DomainException):
    """Disbursement cannot make the requested transition from its current state"""

    pass
