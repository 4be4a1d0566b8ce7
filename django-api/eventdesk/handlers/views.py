"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call the client façade for every intent
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details

Every response carries the client's read model and the notifications
posted since the previous response. The client is checked out from the
registry until the response body is built.
"""

from django.utils.decorators import method_decorator
from django.views.decorators.csrf import ensure_csrf_cookie
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from eventdesk.domain import AuthRequired, DomainError, EventId
from eventdesk.handlers.serializers import (
    EventFormSerializer,
    LoginSerializer,
    NotificationSerializer,
    ReadModelSerializer,
    RegisterSerializer,
)
from eventdesk.handlers.wiring import get_registry
from eventdesk.services.client import EventDeskClient


def _payload(client: EventDeskClient, ok: bool = True) -> dict:
    return {
        "ok": ok,
        "state": ReadModelSerializer(client.read_model()).data,
        "notifications": NotificationSerializer(client.drain_notifications(), many=True).data,
    }


def _error_response(error: DomainError, http_status: int) -> Response:
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=http_status,
    )


def _parse_event_id(raw: str) -> EventId | None:
    try:
        return EventId.from_raw(raw)
    except ValueError:
        return None


class ClientView(APIView):
    """Base view resolving the client bound to the browser session."""

    def checkout(self, request: Request):
        return get_registry().checkout(request)

    def handle_exception(self, exc):
        if isinstance(exc, AuthRequired):
            return _error_response(exc, status.HTTP_401_UNAUTHORIZED)
        return super().handle_exception(exc)


@method_decorator(ensure_csrf_cookie, name="get")
class StateView(ClientView):
    """Handler for GET /api/state"""

    def get(self, request: Request) -> Response:
        with self.checkout(request) as client:
            return Response(_payload(client))


class RegisterView(ClientView):
    """Handler for POST /api/auth/register"""

    def post(self, request: Request) -> Response:
        form = RegisterSerializer(data=request.data)
        form.is_valid(raise_exception=True)
        with self.checkout(request) as client:
            ok = client.register(**form.validated_data)
            return Response(_payload(client, ok))


class LoginView(ClientView):
    """Handler for POST /api/auth/login"""

    def post(self, request: Request) -> Response:
        form = LoginSerializer(data=request.data)
        form.is_valid(raise_exception=True)
        with self.checkout(request) as client:
            ok = client.login(**form.validated_data)
            return Response(_payload(client, ok))


class LogoutView(ClientView):
    """Handler for POST /api/auth/logout"""

    def post(self, request: Request) -> Response:
        with self.checkout(request) as client:
            client.logout()
            return Response(_payload(client))


class EventRefreshView(ClientView):
    """Handler for POST /api/events/refresh"""

    def post(self, request: Request) -> Response:
        with self.checkout(request) as client:
            ok = client.refresh()
            return Response(_payload(client, ok))


class EventDetailView(ClientView):
    """Handler for DELETE /api/events/{event_id}"""

    def delete(self, request: Request, event_id: str) -> Response:
        parsed = _parse_event_id(event_id)
        if parsed is None:
            return Response(
                {"error": {"code": "INVALID_EVENT_ID", "message": "Invalid event ID"}},
                status=status.HTTP_400_BAD_REQUEST,
            )
        with self.checkout(request) as client:
            ok = client.delete(parsed)
            return Response(_payload(client, ok))


class EditorCreateView(ClientView):
    """Handler for POST /api/editor/create"""

    def post(self, request: Request) -> Response:
        with self.checkout(request) as client:
            client.select_for_create()
            return Response(_payload(client))


class EditorEditView(ClientView):
    """Handler for POST /api/editor/edit/{event_id}"""

    def post(self, request: Request, event_id: str) -> Response:
        parsed = _parse_event_id(event_id)
        with self.checkout(request) as client:
            if parsed is None or not client.select_for_edit(parsed):
                return Response(
                    {"error": {"code": "EVENT_NOT_FOUND", "message": "Event not found"}},
                    status=status.HTTP_404_NOT_FOUND,
                )
            return Response(_payload(client))


class EditorClearView(ClientView):
    """Handler for POST /api/editor/clear"""

    def post(self, request: Request) -> Response:
        with self.checkout(request) as client:
            client.dismiss()
            return Response(_payload(client))


class EditorSubmitView(ClientView):
    """Handler for POST /api/editor/submit"""

    def post(self, request: Request) -> Response:
        form = EventFormSerializer(data=request.data)
        form.is_valid(raise_exception=True)
        with self.checkout(request) as client:
            ok = client.submit_form(**form.validated_data)
            return Response(_payload(client, ok))
