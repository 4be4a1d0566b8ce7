"""Domain error codes for the eventdesk client."""

from dataclasses import dataclass
from enum import Enum

AUTH_FAILURE_STATUSES = frozenset({401, 403})


class ErrorCode(Enum):
    """Domain error codes."""

    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    API_REJECTION = "API_REJECTION"
    AUTH_REQUIRED = "AUTH_REQUIRED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str
    status: int | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    @property
    def is_auth_failure(self) -> bool:
        return False


class TransportError(DomainError):
    """Raised when a request to the remote API could not be completed."""

    def __init__(self, message: str = "Unable to reach the event service") -> None:
        super().__init__(code=ErrorCode.TRANSPORT_ERROR, message=message)


class ApiRejection(DomainError):
    """The remote API answered with an error."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(code=ErrorCode.API_REJECTION, message=message, status=status)

    @property
    def is_auth_failure(self) -> bool:
        return self.status in AUTH_FAILURE_STATUSES


class AuthRequired(DomainError):
    """Raised when a resource operation runs without an authenticated session."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.AUTH_REQUIRED,
            message="Authentication required",
        )
