from eventdesk.handlers.views import (
    EditorClearView,
    EditorCreateView,
    EditorEditView,
    EditorSubmitView,
    EventDetailView,
    EventRefreshView,
    LoginView,
    LogoutView,
    RegisterView,
    StateView,
)

__all__ = [
    "StateView",
    "RegisterView",
    "LoginView",
    "LogoutView",
    "EventRefreshView",
    "EventDetailView",
    "EditorCreateView",
    "EditorEditView",
    "EditorClearView",
    "EditorSubmitView",
]
