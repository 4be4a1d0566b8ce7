from django.urls import path

from eventdesk.handlers import (
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

urlpatterns = [
    path("state", StateView.as_view(), name="state"),
    path("auth/register", RegisterView.as_view(), name="register"),
    path("auth/login", LoginView.as_view(), name="login"),
    path("auth/logout", LogoutView.as_view(), name="logout"),
    path("events/refresh", EventRefreshView.as_view(), name="event-refresh"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("editor/create", EditorCreateView.as_view(), name="editor-create"),
    path("editor/edit/<str:event_id>", EditorEditView.as_view(), name="editor-edit"),
    path("editor/clear", EditorClearView.as_view(), name="editor-clear"),
    path("editor/submit", EditorSubmitView.as_view(), name="editor-submit"),
]
