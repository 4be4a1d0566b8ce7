from eventdesk.domain.errors import (
    ApiRejection,
    AuthRequired,
    DomainError,
    ErrorCode,
    TransportError,
)
from eventdesk.domain.models import (
    CREATE,
    Create,
    Edit,
    EditIntent,
    EventRecord,
    Notification,
    NotificationKind,
    ReadModel,
    Session,
)
from eventdesk.domain.result import Err, Ok, Result
from eventdesk.domain.value_objects import BearerToken, EventId

__all__ = [
    "EventRecord",
    "Session",
    "Create",
    "Edit",
    "EditIntent",
    "CREATE",
    "Notification",
    "NotificationKind",
    "ReadModel",
    "EventId",
    "BearerToken",
    "Ok",
    "Err",
    "Result",
    "DomainError",
    "ErrorCode",
    "TransportError",
    "ApiRejection",
    "AuthRequired",
]
