"""Client façade wiring the controllers of one browser together."""

import logging
import threading

from eventdesk.domain import Create, Edit, EditIntent, EventId, Notification, ReadModel
from eventdesk.services.edit_target import EditTargetSelector
from eventdesk.services.event_service import EventService
from eventdesk.services.notifications import Notifier
from eventdesk.services.session_service import SessionService
from eventdesk.services.state import ClientState
from eventdesk.stores.interfaces import CredentialStore, EventGateway

logger = logging.getLogger("eventdesk.client")


class EventDeskClient:
    """Owns the state of one client and exposes every user intent."""

    def __init__(
        self,
        gateway: EventGateway,
        credentials: CredentialStore,
        notifier: Notifier | None = None,
    ) -> None:
        self.state = ClientState()
        # Held by the registry for the whole of one browser request.
        self.request_lock = threading.Lock()
        self.notifier = notifier or Notifier()
        self.selector = EditTargetSelector(self.state)
        self.events = EventService(
            self.state,
            gateway,
            self.notifier,
            self.selector,
            on_auth_failure=lambda: self.session.expire(),
        )
        self.session = SessionService(
            self.state, gateway, credentials, self.notifier, self.events, self.selector
        )

    def bind(self, credentials: CredentialStore) -> None:
        """Point the session at the credential store of the current request."""
        self.session.credentials = credentials

    def start(self) -> None:
        self.session.start()

    def sync(self) -> bool:
        return self.session.sync()

    def register(self, username: str, email: str, password: str) -> bool:
        return self.session.register(username, email, password)

    def login(self, identifier: str, password: str) -> bool:
        return self.session.login(identifier, password)

    def logout(self) -> None:
        self.session.logout()

    def refresh(self) -> bool:
        return self.events.refresh()

    def delete(self, event_id: EventId) -> bool:
        return self.events.delete(event_id)

    def select_for_create(self) -> None:
        self.selector.select_for_create()

    def select_for_edit(self, event_id: EventId) -> bool:
        """Open the modal on a listed event. Returns False if it is not listed."""
        record = self.events.find(event_id)
        if record is None:
            return False
        self.selector.select_for_edit(record)
        return True

    def dismiss(self) -> None:
        self.selector.clear()

    def submit(self, intent: EditIntent, name: str, description: str) -> bool:
        if isinstance(intent, Edit):
            return self.events.update(intent.record.id, name, description)
        if isinstance(intent, Create):
            return self.events.create(name, description)
        raise TypeError(f"Unknown edit intent: {intent!r}")

    def submit_form(self, name: str, description: str) -> bool:
        """Submit the modal form against the current edit target."""
        with self.state.lock:
            intent = self.state.intent
        logger.debug("Submitting %s", type(intent).__name__)
        return self.submit(intent, name, description)

    def read_model(self) -> ReadModel:
        return self.state.read_model()

    def drain_notifications(self) -> list[Notification]:
        return self.notifier.drain()
