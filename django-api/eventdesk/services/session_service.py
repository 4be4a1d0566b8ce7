"""Session service - drives the Anonymous/Authenticated state machine."""

import logging

from eventdesk.domain import BearerToken, Result
from eventdesk.services.edit_target import EditTargetSelector
from eventdesk.services.event_service import EventService
from eventdesk.services.notifications import Notifier
from eventdesk.services.state import ClientState
from eventdesk.stores.interfaces import CredentialStore, EventGateway

logger = logging.getLogger("eventdesk.session")


class SessionService:
    """Service for login, registration and logout of one client."""

    def __init__(
        self,
        state: ClientState,
        gateway: EventGateway,
        credentials: CredentialStore,
        notifier: Notifier,
        events: EventService,
        selector: EditTargetSelector,
    ) -> None:
        self._state = state
        self._gateway = gateway
        self.credentials = credentials
        self._notifier = notifier
        self._events = events
        self._selector = selector

    @property
    def is_authenticated(self) -> bool:
        return self._state.session.is_authenticated

    def start(self) -> None:
        """Restore a persisted session and load its events."""
        if not self.sync():
            logger.debug("No stored credentials, starting anonymous")

    def sync(self) -> bool:
        """Follow the Credential Store when it no longer matches the session.

        Another process serving the same browser may have logged in or out.
        A different stored token authenticates this client and reloads its
        events; a missing one ends the session without a notification.
        Returns True if the session changed.
        """
        token = self.credentials.load()
        with self._state.lock:
            if token == self._state.session.token:
                return False
            if token is None:
                self._state.session = self._state.session.end()
            else:
                self._state.session = self._state.session.authenticate(token)
            self._events.clear()
            self._selector.clear()
        if token is None:
            logger.info("Stored session was ended elsewhere")
            return True
        logger.info("Restored stored session")
        self._events.refresh()
        return True

    def register(self, username: str, email: str, password: str) -> bool:
        result = self._gateway.register(username, email, password)
        return self._complete(result, "Registration successful", "Registration failed")

    def login(self, identifier: str, password: str) -> bool:
        result = self._gateway.login(identifier, password)
        return self._complete(result, "Login successful", "Login failed")

    def logout(self) -> None:
        """End the session locally. Safe to call when already anonymous."""
        self._end()
        logger.info("Logged out")
        self._notifier.info("Logged out")

    def expire(self) -> None:
        """End a session whose token the remote API rejected."""
        if self.is_authenticated:
            logger.warning("Stored token was rejected, ending session")
            self._end()

    def _complete(self, result: Result[BearerToken], success: str, failure: str) -> bool:
        if not result.ok:
            self._notifier.error(failure, result.error.message)
            return False
        self.credentials.save(result.value)
        with self._state.lock:
            self._state.session = self._state.session.authenticate(result.value)
            self._state.events = []
        logger.info(success)
        self._notifier.success(success)
        self._events.refresh()
        return True

    def _end(self) -> None:
        self.credentials.clear()
        with self._state.lock:
            if self._state.session.is_authenticated:
                self._state.session = self._state.session.end()
            self._events.clear()
            self._selector.clear()
