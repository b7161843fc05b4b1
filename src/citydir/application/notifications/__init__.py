"""Application notifications – push token registration."""
from citydir.application.notifications.registrar import NotificationRegistrar

__all__ = ["NotificationRegistrar"]
