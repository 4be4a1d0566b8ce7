"""Django session implementation of the CredentialStore."""

from django.contrib.sessions.backends.base import SessionBase

from eventdesk.domain import BearerToken
from eventdesk.stores.interfaces import CredentialStore

TOKEN_SESSION_KEY = "token"


class DjangoSessionCredentialStore(CredentialStore):
    """Keeps the token in the browser's Django session.

    Every write is saved immediately, ahead of the response.
    """

    def __init__(self, session: SessionBase) -> None:
        self._session = session

    def save(self, token: BearerToken) -> None:
        self._session[TOKEN_SESSION_KEY] = token.value
        self._session.save()

    def load(self) -> BearerToken | None:
        value = self._session.get(TOKEN_SESSION_KEY)
        if not value:
            return None
        return BearerToken(value=value)

    def clear(self) -> None:
        self._session.pop(TOKEN_SESSION_KEY, None)
        self._session.modified = True
        self._session.save()
