"""Business logic services."""

from bankapp.services.account_service import AccountService
from bankapp.services.notification_service import NotificationGateway

__all__ = ["AccountService", "NotificationGateway"]
