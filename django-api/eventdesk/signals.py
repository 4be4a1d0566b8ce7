"""Django signals carrying user notifications.

Controllers post a Notification through ``notification_posted``; the
receiver below records it in the log. Presentation code drains the
per-client queue kept by the Notifier.
"""

import logging

from django.dispatch import Signal, receiver

from eventdesk.domain import Notification, NotificationKind

logger = logging.getLogger("eventdesk.notifications")

notification_posted = Signal()


@receiver(notification_posted)
def log_notification(sender, notification: Notification, **kwargs):
    """Mirror every notification into the application log."""
    level = logging.WARNING if notification.kind is NotificationKind.ERROR else logging.INFO
    if notification.message:
        logger.log(level, "%s: %s", notification.title, notification.message)
    else:
        logger.log(level, notification.title)
