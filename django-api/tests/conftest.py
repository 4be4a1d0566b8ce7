"""Pytest configuration and shared fixtures."""

from collections.abc import Callable

import pytest
from django.contrib.sessions.backends.file import SessionStore
from rest_framework.test import APIClient

from eventdesk.domain import (
    ApiRejection,
    BearerToken,
    DomainError,
    Err,
    EventId,
    EventRecord,
    Ok,
)
from eventdesk.handlers.wiring import ClientRegistry, set_registry
from eventdesk.services.client import EventDeskClient
from eventdesk.stores.interfaces import EventGateway
from eventdesk.stores.session_store import DjangoSessionCredentialStore


class FakeGateway(EventGateway):
    """In-memory remote API.

    ``failures`` maps an operation name to the error its next call returns.
    ``during`` maps an operation name to a callback run while the call is
    in flight. ``next_id`` is the id given to the next created event.
    """

    def __init__(self) -> None:
        self.users: dict[str, tuple[str, str]] = {}
        self.events: dict[str, EventRecord] = {}
        self.calls: list[tuple[str, str | None]] = []
        self.failures: dict[str, DomainError] = {}
        self.during: dict[str, Callable[[], None]] = {}
        self.next_id = 1
        self._issued = 0

    def seed(self, name: str, description: str) -> EventRecord:
        record = EventRecord(id=EventId.from_raw(self.next_id), name=name, description=description)
        self.next_id += 1
        self.events[record.id.value] = record
        return record

    def count(self, operation: str) -> int:
        return sum(1 for name, _ in self.calls if name == operation)

    def register(self, username, email, password):
        if failed := self._enter("register", None):
            return failed
        if username in self.users:
            return Err(ApiRejection("Email or Username are already taken", status=400))
        self.users[username] = (email, password)
        return Ok(self._issue(username))

    def login(self, identifier, password):
        if failed := self._enter("login", None):
            return failed
        for username, (email, stored) in self.users.items():
            if identifier in (username, email) and password == stored:
                return Ok(self._issue(username))
        return Err(ApiRejection("Invalid identifier or password", status=400))

    def list_events(self, token):
        if failed := self._enter("list_events", token):
            return failed
        return Ok(list(self.events.values()))

    def create_event(self, token, name, description):
        if failed := self._enter("create_event", token):
            return failed
        return Ok(self.seed(name, description))

    def update_event(self, token, event_id, name, description):
        if failed := self._enter("update_event", token):
            return failed
        if event_id.value not in self.events:
            return Err(ApiRejection("Not Found", status=404))
        record = EventRecord(id=event_id, name=name, description=description)
        self.events[event_id.value] = record
        return Ok(record)

    def delete_event(self, token, event_id):
        if failed := self._enter("delete_event", token):
            return failed
        if self.events.pop(event_id.value, None) is None:
            return Err(ApiRejection("Not Found", status=404))
        return Ok(None)

    def _enter(self, operation: str, token: BearerToken | None) -> Err | None:
        self.calls.append((operation, token.value if token else None))
        callback = self.during.pop(operation, None)
        if callback is not None:
            callback()
        error = self.failures.pop(operation, None)
        return Err(error) if error is not None else None

    def _issue(self, username: str) -> BearerToken:
        self._issued += 1
        return BearerToken(value=f"{username}-token-{self._issued}")


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def session_store():
    store = SessionStore()
    yield store
    if store.session_key:
        store.delete()


@pytest.fixture
def credentials(session_store) -> DjangoSessionCredentialStore:
    return DjangoSessionCredentialStore(session_store)


@pytest.fixture
def desk(gateway, credentials) -> EventDeskClient:
    return EventDeskClient(gateway, credentials)


@pytest.fixture
def logged_in(desk, gateway) -> EventDeskClient:
    gateway.users["alice"] = ("alice@example.com", "secret")
    assert desk.login("alice", "secret")
    desk.drain_notifications()
    return desk


@pytest.fixture
def registry(gateway):
    registry = ClientRegistry(gateway_factory=lambda: gateway)
    set_registry(registry)
    yield registry
    set_registry(None)


@pytest.fixture
def api_client(registry) -> APIClient:
    return APIClient()
