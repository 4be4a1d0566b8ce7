"""Tests for the HTTP gateway.

The requests session is mocked; no network access is needed.
Run with: pytest tests/test_gateway.py -v
"""

import json
from unittest import mock

import pytest
import requests

from eventdesk.domain import (
    ApiRejection,
    BearerToken,
    ErrorCode,
    EventId,
    EventRecord,
    TransportError,
)
from eventdesk.services.client import EventDeskClient
from eventdesk.stores.http_gateway import MALFORMED_RESPONSE, HttpEventGateway

BASE_URL = "http://cms.test/api"
TOKEN = BearerToken("t1")


def make_response(status: int = 200, body=None, raw: bytes | None = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    if raw is not None:
        response._content = raw
    elif body is not None:
        response._content = json.dumps(body).encode()
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = b""
    return response


def strapi_event(event_id, name, description):
    return {"id": event_id, "attributes": {"name": name, "description": description}}


@pytest.fixture
def http():
    return mock.Mock(spec=requests.Session)


@pytest.fixture
def gateway(http) -> HttpEventGateway:
    return HttpEventGateway(BASE_URL + "/", http=http)


def sent(http, index: int = -1):
    args, kwargs = http.request.call_args_list[index]
    return args[0], args[1], kwargs


class TestAuthentication:
    """Tests for register and login."""

    def test_register_posts_credentials(self, gateway, http):
        """Register posts username, email and password without a token."""
        http.request.return_value = make_response(200, {"jwt": "t1", "user": {"id": 1}})

        result = gateway.register("bob", "bob@example.com", "pw")

        assert result.ok and result.value == TOKEN
        method, url, kwargs = sent(http)
        assert (method, url) == ("POST", f"{BASE_URL}/auth/local/register")
        assert kwargs["json"] == {"username": "bob", "email": "bob@example.com", "password": "pw"}
        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert "Authorization" not in kwargs["headers"]

    def test_login_sends_identifier(self, gateway, http):
        """Login posts identifier and password."""
        http.request.return_value = make_response(200, {"jwt": "t1", "user": {"id": 1}})

        gateway.login("alice", "secret")

        method, url, kwargs = sent(http)
        assert (method, url) == ("POST", f"{BASE_URL}/auth/local")
        assert kwargs["json"] == {"identifier": "alice", "password": "secret"}

    def test_login_rejection_carries_api_message(self, gateway, http):
        """Given a 400, returns the API's error message."""
        http.request.return_value = make_response(
            400,
            {"data": None, "error": {"status": 400, "name": "ValidationError",
                                     "message": "Invalid identifier or password"}},
        )

        result = gateway.login("alice", "wrong")

        assert not result.ok
        assert isinstance(result.error, ApiRejection)
        assert result.error.message == "Invalid identifier or password"
        assert result.error.status == 400

    def test_error_body_with_success_status(self, gateway, http):
        """Given an error object in a 200 body, returns a rejection."""
        http.request.return_value = make_response(200, {"error": {"message": "Email is already taken"}})

        result = gateway.register("bob", "bob@example.com", "pw")

        assert result.error.code is ErrorCode.API_REJECTION
        assert result.error.message == "Email is already taken"

    def test_missing_jwt_is_malformed(self, gateway, http):
        """Given a body without jwt, returns a malformed-response error."""
        http.request.return_value = make_response(200, {"user": {"id": 1}})

        result = gateway.login("alice", "secret")

        assert isinstance(result.error, TransportError)
        assert result.error.message == MALFORMED_RESPONSE

    def test_network_failure(self, gateway, http):
        """Given a connection error, returns a transport error."""
        http.request.side_effect = requests.ConnectionError("refused")

        result = gateway.login("alice", "secret")

        assert isinstance(result.error, TransportError)
        assert result.error.message == "Unable to reach the event service"


class TestEvents:
    """Tests for the event endpoints."""

    def test_list_events_sends_bearer_token(self, gateway, http):
        """Listing sends the bearer token and maps the records."""
        http.request.return_value = make_response(
            200, {"data": [strapi_event(1, "Conf", "desc"), strapi_event(2, "Meetup", None)]}
        )

        result = gateway.list_events(TOKEN)

        assert result.value == [
            EventRecord(id=EventId("1"), name="Conf", description="desc"),
            EventRecord(id=EventId("2"), name="Meetup", description=""),
        ]
        method, url, kwargs = sent(http)
        assert (method, url) == ("GET", f"{BASE_URL}/events")
        assert kwargs["headers"]["Authorization"] == "Bearer t1"
        assert kwargs["json"] is None

    def test_list_events_non_json_is_malformed(self, gateway, http):
        """Given a non-JSON body, returns a malformed-response error."""
        http.request.return_value = make_response(200, raw=b"<html>oops</html>")

        result = gateway.list_events(TOKEN)

        assert result.error.message == MALFORMED_RESPONSE

    def test_list_events_missing_attributes_is_malformed(self, gateway, http):
        """Given a record without attributes, returns a transport error."""
        http.request.return_value = make_response(200, {"data": [{"id": 1}]})

        assert isinstance(gateway.list_events(TOKEN).error, TransportError)

    def test_create_event_wraps_payload(self, gateway, http):
        """Create wraps fields in a data object."""
        http.request.return_value = make_response(200, {"data": strapi_event(5, "A", "B")})

        result = gateway.create_event(TOKEN, "A", "B")

        assert result.value == EventRecord(id=EventId("5"), name="A", description="B")
        method, url, kwargs = sent(http)
        assert (method, url) == ("POST", f"{BASE_URL}/events")
        assert kwargs["json"] == {"data": {"name": "A", "description": "B"}}

    def test_update_event_targets_id(self, gateway, http):
        """Update puts to the event's URL."""
        http.request.return_value = make_response(200, {"data": strapi_event(5, "C", "D")})

        result = gateway.update_event(TOKEN, EventId("5"), "C", "D")

        assert result.value.name == "C"
        method, url, _ = sent(http)
        assert (method, url) == ("PUT", f"{BASE_URL}/events/5")

    def test_delete_event_ignores_body(self, gateway, http):
        """Given a 204, delete succeeds without reading a body."""
        http.request.return_value = make_response(204)

        result = gateway.delete_event(TOKEN, EventId("5"))

        assert result.ok and result.value is None
        method, url, kwargs = sent(http)
        assert (method, url) == ("DELETE", f"{BASE_URL}/events/5")
        assert kwargs["headers"] == {"Authorization": "Bearer t1"}

    def test_delete_event_failure_status(self, gateway, http):
        """Given a 404, delete returns the rejection."""
        http.request.return_value = make_response(404, {"error": {"message": "Not Found"}})

        result = gateway.delete_event(TOKEN, EventId("5"))

        assert result.error.message == "Not Found"
        assert result.error.status == 404

    def test_rejection_without_body(self, gateway, http):
        """Given a 500 without body, reports the status."""
        http.request.return_value = make_response(500)

        result = gateway.list_events(TOKEN)

        assert result.error.message == "Request failed with status 500"

    def test_timeout_is_passed_through(self, http):
        """A configured timeout reaches the transport."""
        http.request.return_value = make_response(204)
        HttpEventGateway(BASE_URL, http=http, timeout=2.5).delete_event(TOKEN, EventId("1"))

        assert sent(http)[2]["timeout"] == 2.5

    def test_default_timeout_is_transport_default(self, gateway, http):
        """Without configuration, no timeout is set."""
        http.request.return_value = make_response(204)

        gateway.delete_event(TOKEN, EventId("1"))

        assert sent(http)[2]["timeout"] is None


class TestLoginScenario:
    """Login followed by the automatic listing over HTTP."""

    def test_login_then_list_uses_issued_token(self, gateway, http, credentials):
        """After login, the listing carries the issued token."""
        http.request.side_effect = [
            make_response(200, {"jwt": "t1", "user": {"id": 1}}),
            make_response(200, {"data": [strapi_event(1, "Conf", "desc")]}),
        ]
        desk = EventDeskClient(gateway, credentials)

        assert desk.login("alice", "secret")

        assert desk.state.session.token == TOKEN
        method, url, kwargs = sent(http, 1)
        assert (method, url) == ("GET", f"{BASE_URL}/events")
        assert kwargs["headers"]["Authorization"] == "Bearer t1"
        assert [e.name for e in desk.read_model().events] == ["Conf"]
