"""
Access control errors.
"""
import enum


class DenialReason(str, enum.Enum):
    """Why a validation check refused access."""
    INSUFFICIENT_ROLE = "insufficient_role"
    DIFFERENT_ORGANIZATION = "different_organization"
    NOT_TASK_CREATOR = "not_task_creator"
    OWNER_REQUIRED = "owner_required"
    INSUFFICIENT_PERMISSIONS = "insufficient_permissions"


class AccessDeniedError(PermissionError):
    """
    Raised by the validation helpers when a policy check fails.

    The message is part of the API contract and is returned verbatim
    to clients; branch on ``reason`` rather than on the text.
    """

    def __init__(self, reason: DenialReason, message: str):
        super().__init__(message)
        self.reason = reason
        self.message = message

    def __repr__(self) -> str:
        return f"<AccessDeniedError(reason={self.reason.value}, message={self.message!r})>"


class UnknownOperationError(ValueError):
    """Raised when a task operation name is not read, update or delete."""
