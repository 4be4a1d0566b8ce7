from django.apps import AppConfig


class EventDeskConfig(AppConfig):
    name = "eventdesk"
    verbose_name = "Event Desk"

    def ready(self):
        from eventdesk import signals  # noqa: F401
