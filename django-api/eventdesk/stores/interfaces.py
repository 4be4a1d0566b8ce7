"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Gateway calls report
failures as ``Err`` results instead of raising.
"""

from abc import ABC, abstractmethod

from eventdesk.domain import BearerToken, EventId, EventRecord, Result


class CredentialStore(ABC):
    """Durable storage for a single bearer token."""

    @abstractmethod
    def save(self, token: BearerToken) -> None:
        """Persist ``token``, replacing any previous one."""
        ...

    @abstractmethod
    def load(self) -> BearerToken | None:
        """Return the persisted token, or None if there is none."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Forget the persisted token. Clearing an empty store is a no-op."""
        ...


class EventGateway(ABC):
    """Interface for the remote authentication and event API."""

    @abstractmethod
    def register(self, username: str, email: str, password: str) -> Result[BearerToken]:
        """Create an account and return its token."""
        ...

    @abstractmethod
    def login(self, identifier: str, password: str) -> Result[BearerToken]:
        """Authenticate by username or email and return a token."""
        ...

    @abstractmethod
    def list_events(self, token: BearerToken) -> Result[list[EventRecord]]:
        """Return all events in server order."""
        ...

    @abstractmethod
    def create_event(
        self, token: BearerToken, name: str, description: str
    ) -> Result[EventRecord]:
        """Create an event and return the stored representation."""
        ...

    @abstractmethod
    def update_event(
        self, token: BearerToken, event_id: EventId, name: str, description: str
    ) -> Result[EventRecord]:
        """Update an event and return the stored representation."""
        ...

    @abstractmethod
    def delete_event(self, token: BearerToken, event_id: EventId) -> Result[None]:
        """Delete an event. Success is decided by the response status."""
        ...
