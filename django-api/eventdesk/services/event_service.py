"""Event service - keeps the local collection in step with the remote store.

Services:
- Depend only on interfaces (stores)
- Call the gateway outside the state lock, apply results inside it
- Drop results whose session epoch is no longer current
- Report every outcome through the Notifier
"""

import logging
from collections.abc import Callable

from eventdesk.domain import (
    AuthRequired,
    DomainError,
    EventId,
    EventRecord,
    Session,
)
from eventdesk.services.edit_target import EditTargetSelector
from eventdesk.services.notifications import Notifier
from eventdesk.services.state import ClientState
from eventdesk.stores.interfaces import EventGateway

logger = logging.getLogger("eventdesk.events")


def _unique(records: list[EventRecord]) -> list[EventRecord]:
    seen: set[EventId] = set()
    unique = []
    for record in records:
        if record.id in seen:
            logger.warning("Dropping duplicate event %s from listing", record.id)
            continue
        seen.add(record.id)
        unique.append(record)
    return unique


class EventService:
    """Service for the resource collection of one client."""

    def __init__(
        self,
        state: ClientState,
        gateway: EventGateway,
        notifier: Notifier,
        selector: EditTargetSelector,
        on_auth_failure: Callable[[], None] | None = None,
    ) -> None:
        self._state = state
        self._gateway = gateway
        self._notifier = notifier
        self._selector = selector
        self._on_auth_failure = on_auth_failure

    def find(self, event_id: EventId) -> EventRecord | None:
        """Return the record with ``event_id`` from the local collection."""
        with self._state.lock:
            return next((e for e in self._state.events if e.id == event_id), None)

    def refresh(self) -> bool:
        """Replace the collection with the server's listing.

        Raises:
            AuthRequired: If no session is authenticated.
        """
        session = self._require_session()
        result = self._gateway.list_events(session.token)
        with self._state.lock:
            if not self._is_current(session, "refresh"):
                return False
            if not result.ok:
                self._fail(result.error, "Could not load events")
                return False
            self._state.events = _unique(result.value)
        return True

    def create(self, name: str, description: str) -> bool:
        """Create an event remotely and append the stored record.

        Raises:
            AuthRequired: If no session is authenticated.
        """
        session = self._require_session()
        result = self._gateway.create_event(session.token, name, description)
        with self._state.lock:
            if not self._is_current(session, "create"):
                return False
            if not result.ok:
                self._fail(result.error, "Event creation failed")
                return False
            record = result.value
            if self._replace(record):
                logger.info("Created event %s was already listed", record.id)
            else:
                self._state.events.append(record)
            self._selector.clear()
        self._notifier.success("Event created")
        return True

    def update(self, event_id: EventId, name: str, description: str) -> bool:
        """Update an event remotely and replace it in place.

        Raises:
            AuthRequired: If no session is authenticated.
        """
        session = self._require_session()
        result = self._gateway.update_event(session.token, event_id, name, description)
        with self._state.lock:
            if not self._is_current(session, "update"):
                return False
            if not result.ok:
                self._fail(result.error, "Event update failed")
                return False
            if not self._replace(result.value):
                logger.info("Updated event %s is no longer listed", result.value.id)
            self._selector.clear()
        self._notifier.success("Event updated")
        return True

    def delete(self, event_id: EventId) -> bool:
        """Delete an event remotely; remove it locally only once confirmed.

        Raises:
            AuthRequired: If no session is authenticated.
        """
        session = self._require_session()
        result = self._gateway.delete_event(session.token, event_id)
        with self._state.lock:
            if not self._is_current(session, "delete"):
                return False
            if not result.ok:
                self._fail(result.error, "Event deletion failed")
                return False
            self._state.events = [e for e in self._state.events if e.id != event_id]
        self._notifier.success("Event deleted")
        return True

    def clear(self) -> None:
        with self._state.lock:
            self._state.events = []

    def _require_session(self) -> Session:
        with self._state.lock:
            session = self._state.session
        if not session.is_authenticated:
            raise AuthRequired()
        return session

    def _is_current(self, session: Session, operation: str) -> bool:
        if self._state.session.epoch != session.epoch:
            logger.debug("Discarding stale %s response from epoch %s", operation, session.epoch)
            return False
        return True

    def _replace(self, record: EventRecord) -> bool:
        events = self._state.events
        for index, existing in enumerate(events):
            if existing.id == record.id:
                events[index] = record
                return True
        return False

    def _fail(self, error: DomainError, title: str) -> None:
        self._notifier.error(title, error.message)
        if error.is_auth_failure and self._on_auth_failure is not None:
            self._on_auth_failure()
