"""
Notification gateway: named channels for customer messages.

The account service only knows the gateway: it asks for a channel
by name, or for the default one, and calls send(). Actual delivery
(SMTP, an SMS provider) is outside this application, so the
channels shipped here write the message to the log.
"""

import logging
from abc import ABC, abstractmethod
from functools import lru_cache

from bankapp.config import get_settings

logger = logging.getLogger(__name__)


class NotificationChannel(ABC):
    """A way of reaching an account holder."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name stored as an account's notification preference."""

    @abstractmethod
    def send(self, from_label: str, to_label: str, subject: str, body: str) -> bool:
        """Deliver a message. Returns True if it was accepted."""


class EmailChannel(NotificationChannel):

    @property
    def name(self) -> str:
        return "email"

    def send(self, from_label: str, to_label: str, subject: str, body: str) -> bool:
        logger.info(
            "EMAIL from=%s to=%s subject=%r body=%r",
            from_label, to_label, subject, body,
        )
        return True


class SmsChannel(NotificationChannel):

    @property
    def name(self) -> str:
        return "sms"

    def send(self, from_label: str, to_label: str, subject: str, body: str) -> bool:
        # SMS has no subject line
        logger.info("SMS from=%s to=%s text=%r", from_label, to_label, body)
        return True


class NotificationGateway:
    """
    Registry of notification channels with one default.

    Raises ValueError at construction if the default channel is
    not registered, so get_default_channel() never fails.
    """

    def __init__(self, channels: list[NotificationChannel], default_channel: str):
        self._channels = {channel.name: channel for channel in channels}
        if default_channel not in self._channels:
            raise ValueError(
                f"Default notification channel '{default_channel}' is not registered"
            )
        self._default = default_channel

    def get_default_channel(self) -> NotificationChannel:
        return self._channels[self._default]

    def get_channel_by_name(self, name: str) -> NotificationChannel | None:
        return self._channels.get(name)


@lru_cache()
def get_notification_gateway() -> NotificationGateway:
    """Gateway with every built-in channel, default taken from settings."""
    settings = get_settings()
    return NotificationGateway(
        channels=[EmailChannel(), SmsChannel()],
        default_channel=settings.DEFAULT_NOTIFICATION_CHANNEL,
    )
