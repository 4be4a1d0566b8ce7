"""Domain models representing client-side state.

These are pure domain objects. Records only ever come from the remote
store's responses; nothing here mutates them locally.
"""

from dataclasses import dataclass, field
from enum import Enum

from eventdesk.domain.value_objects import BearerToken, EventId

NOTIFICATION_DURATION_MS = 3000


@dataclass(frozen=True)
class EventRecord:
    """Domain representation of an Event as returned by the remote store."""

    id: EventId
    name: str
    description: str


@dataclass(frozen=True)
class Session:
    """Authentication state of a client.

    ``epoch`` advances on every transition so responses issued under an
    earlier session can be recognised and dropped.
    """

    token: BearerToken | None = None
    epoch: int = 0

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def authenticate(self, token: BearerToken) -> "Session":
        return Session(token=token, epoch=self.epoch + 1)

    def end(self) -> "Session":
        return Session(token=None, epoch=self.epoch + 1)


@dataclass(frozen=True)
class Create:
    """Next submit creates a new event."""


@dataclass(frozen=True)
class Edit:
    """Next submit updates ``record``."""

    record: EventRecord


EditIntent = Create | Edit

CREATE = Create()


class NotificationKind(Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class Notification:
    """Transient user feedback."""

    title: str
    kind: NotificationKind
    message: str = ""
    duration_ms: int = NOTIFICATION_DURATION_MS
    closable: bool = True


@dataclass(frozen=True)
class ReadModel:
    """Snapshot of client state handed to the presentation layer."""

    is_authenticated: bool
    events: tuple[EventRecord, ...] = ()
    edit_target: EventRecord | None = None
    modal_visible: bool = False
    form: dict[str, str] = field(default_factory=lambda: {"name": "", "description": ""})

    @property
    def modal_title(self) -> str:
        return "Edit Event" if self.edit_target else "Create Event"

    @property
    def submit_label(self) -> str:
        return "Update" if self.edit_target else "Create"
