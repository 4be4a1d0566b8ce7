"""HTTP implementation of the EventGateway against a Strapi-style API.

Every call issues exactly one request and maps the outcome to a Result:

- transport failures and malformed bodies become TransportError
- error statuses and ``{"error": {...}}`` bodies become ApiRejection
"""

import logging
from typing import Any

import requests

from eventdesk.domain import (
    ApiRejection,
    BearerToken,
    Err,
    EventId,
    EventRecord,
    Ok,
    Result,
    TransportError,
)
from eventdesk.stores.interfaces import EventGateway

logger = logging.getLogger("eventdesk.gateway")

MALFORMED_RESPONSE = "Malformed response from the event service"


class MalformedResponse(ValueError):
    """A successful response did not have the expected shape."""


def _parse_event(item: Any) -> EventRecord:
    if not isinstance(item, dict) or item.get("id") is None:
        raise MalformedResponse("event without id")
    attributes = item.get("attributes")
    if not isinstance(attributes, dict) or not isinstance(attributes.get("name"), str):
        raise MalformedResponse("event without attributes")
    return EventRecord(
        id=EventId.from_raw(item["id"]),
        name=attributes["name"],
        description=attributes.get("description") or "",
    )


def _error_message(body: Any) -> str | None:
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return None


class HttpEventGateway(EventGateway):
    """Talks to ``{base_url}/auth/...`` and ``{base_url}/events``."""

    def __init__(
        self,
        base_url: str,
        http: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._http = http or requests.Session()
        self._timeout = timeout

    def register(self, username: str, email: str, password: str) -> Result[BearerToken]:
        return self._authenticate(
            "/auth/local/register",
            {"username": username, "email": email, "password": password},
        )

    def login(self, identifier: str, password: str) -> Result[BearerToken]:
        return self._authenticate(
            "/auth/local", {"identifier": identifier, "password": password}
        )

    def list_events(self, token: BearerToken) -> Result[list[EventRecord]]:
        result = self._request("GET", "/events", token=token)
        if not result.ok:
            return result
        try:
            data = result.value.get("data")
            if not isinstance(data, list):
                raise MalformedResponse("data is not a list")
            return Ok([_parse_event(item) for item in data])
        except ValueError as exc:
            return self._malformed("GET", "/events", exc)

    def create_event(
        self, token: BearerToken, name: str, description: str
    ) -> Result[EventRecord]:
        return self._write_event("POST", "/events", token, name, description)

    def update_event(
        self, token: BearerToken, event_id: EventId, name: str, description: str
    ) -> Result[EventRecord]:
        return self._write_event(
            "PUT", f"/events/{event_id}", token, name, description
        )

    def delete_event(self, token: BearerToken, event_id: EventId) -> Result[None]:
        result = self._request("DELETE", f"/events/{event_id}", token=token, decode=False)
        if not result.ok:
            return result
        return Ok(None)

    def _authenticate(self, path: str, payload: dict[str, str]) -> Result[BearerToken]:
        result = self._request("POST", path, payload=payload)
        if not result.ok:
            return result
        jwt = result.value.get("jwt")
        if not isinstance(jwt, str) or not jwt:
            return self._malformed("POST", path, MalformedResponse("missing jwt"))
        return Ok(BearerToken(value=jwt))

    def _write_event(
        self, method: str, path: str, token: BearerToken, name: str, description: str
    ) -> Result[EventRecord]:
        payload = {"data": {"name": name, "description": description}}
        result = self._request(method, path, token=token, payload=payload)
        if not result.ok:
            return result
        try:
            return Ok(_parse_event(result.value.get("data")))
        except ValueError as exc:
            return self._malformed(method, path, exc)

    def _request(
        self,
        method: str,
        path: str,
        token: BearerToken | None = None,
        payload: dict[str, Any] | None = None,
        decode: bool = True,
    ) -> Result[dict[str, Any]]:
        headers = {}
        if payload is not None:
            headers["Content-Type"] = "application/json"
        if token is not None:
            headers["Authorization"] = token.header

        try:
            response = self._http.request(
                method,
                f"{self._base_url}{path}",
                json=payload,
                headers=headers,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, path, exc)
            return Err(TransportError())

        body = self._decode(response)

        if not response.ok:
            message = _error_message(body) or f"Request failed with status {response.status_code}"
            logger.warning("%s %s rejected (%s): %s", method, path, response.status_code, message)
            return Err(ApiRejection(message, status=response.status_code))

        if not decode:
            return Ok({})

        message = _error_message(body)
        if message:
            logger.warning("%s %s returned an error body: %s", method, path, message)
            return Err(ApiRejection(message, status=response.status_code))
        if not isinstance(body, dict):
            return self._malformed(method, path, MalformedResponse("body is not an object"))
        return Ok(body)

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _malformed(method: str, path: str, exc: Exception) -> Err:
        logger.error("%s %s returned a malformed body: %s", method, path, exc)
        return Err(TransportError(MALFORMED_RESPONSE))
