"""Notification channel between controllers and the presentation layer."""

import threading

from eventdesk.domain import Notification, NotificationKind
from eventdesk.signals import notification_posted


class Notifier:
    """Queues notifications for one client and broadcasts them as signals."""

    def __init__(self) -> None:
        self._pending: list[Notification] = []
        self._lock = threading.Lock()

    def post(self, notification: Notification) -> None:
        with self._lock:
            self._pending.append(notification)
        notification_posted.send(sender=self.__class__, notification=notification)

    def success(self, title: str, message: str = "") -> None:
        self.post(Notification(title=title, kind=NotificationKind.SUCCESS, message=message))

    def error(self, title: str, message: str = "") -> None:
        self.post(Notification(title=title, kind=NotificationKind.ERROR, message=message))

    def info(self, title: str, message: str = "") -> None:
        self.post(Notification(title=title, kind=NotificationKind.INFO, message=message))

    def drain(self) -> list[Notification]:
        """Return queued notifications in posting order and forget them."""
        with self._lock:
            pending, self._pending = self._pending, []
        return pending
