"""Per-browser client registry.

Each browser session maps to one in-process EventDeskClient. The token
itself lives in the Django session, so a restarted process rebuilds the
client from it and reloads the events. Requests from one browser are
served one at a time, and each re-reads the stored token before use.
"""

import threading
from collections import OrderedDict
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from django.conf import settings
from django.http import HttpRequest

from eventdesk.services.client import EventDeskClient
from eventdesk.stores.http_gateway import HttpEventGateway
from eventdesk.stores.interfaces import EventGateway
from eventdesk.stores.session_store import DjangoSessionCredentialStore


def build_gateway() -> EventGateway:
    return HttpEventGateway(
        base_url=settings.EVENTDESK_API_URL,
        timeout=settings.EVENTDESK_HTTP_TIMEOUT,
    )


class ClientRegistry:
    """Thread-safe LRU of clients keyed by session key."""

    def __init__(
        self,
        gateway_factory: Callable[[], EventGateway] = build_gateway,
        max_clients: int | None = None,
    ) -> None:
        self._gateway_factory = gateway_factory
        self._max_clients = max_clients
        self._clients: OrderedDict[str, EventDeskClient] = OrderedDict()
        self._lock = threading.Lock()

    @contextmanager
    def checkout(self, request: HttpRequest) -> Iterator[EventDeskClient]:
        """Hold the browser's client for the duration of one request."""
        if request.session.session_key is None:
            request.session.save()
        key = request.session.session_key
        credentials = DjangoSessionCredentialStore(request.session)

        with self._lock:
            client = self._clients.get(key)
            created = client is None
            if created:
                client = EventDeskClient(self._gateway_factory(), credentials)
                self._clients[key] = client
                self._evict()
            else:
                self._clients.move_to_end(key)

        with client.request_lock:
            client.bind(credentials)
            if created:
                client.start()
            else:
                client.sync()
            yield client

    def clear(self) -> None:
        with self._lock:
            self._clients.clear()

    def _evict(self) -> None:
        limit = self._max_clients or settings.EVENTDESK_MAX_CLIENTS
        while len(self._clients) > limit:
            self._clients.popitem(last=False)


_REGISTRY_LOCK = threading.Lock()
_REGISTRY: ClientRegistry | None = None


def get_registry() -> ClientRegistry:
    """Lazy singleton registry for the running process."""
    global _REGISTRY
    with _REGISTRY_LOCK:
        if _REGISTRY is None:
            _REGISTRY = ClientRegistry()
        return _REGISTRY


def set_registry(registry: ClientRegistry | None) -> None:
    global _REGISTRY
    with _REGISTRY_LOCK:
        _REGISTRY = registry
