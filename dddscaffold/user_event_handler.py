"""Handling and publishing of user domain events."""

from __future__ import annotations

import logging

from .user_events import (
    DomainEvent,
    UserActivatedEvent,
    UserDeactivatedEvent,
    UserEmailChangedEvent,
    UserLockedEvent,
    UserLoggedInEvent,
    UserPasswordChangedEvent,
    UserProfileUpdatedEvent,
    UserRegisteredEvent,
    UserUnlockedEvent,
)

_log = logging.getLogger(__name__)

# Fields reported for each event type the handler knows about.
_REPORTED_FIELDS: dict[type, tuple[str, ...]] = {
    UserRegisteredEvent: ("user_id", "username", "email"),
    UserActivatedEvent: ("user_id",),
    UserDeactivatedEvent: ("user_id", "reason"),
    UserLoggedInEvent: ("user_id", "ip_address"),
    UserPasswordChangedEvent: ("user_id",),
    UserEmailChangedEvent: ("user_id", "new_email"),
    UserLockedEvent: ("user_id", "reason"),
    UserUnlockedEvent: ("user_id",),
    UserProfileUpdatedEvent: ("user_id",),
}


def _event_name(event: object) -> str:
    return getattr(event, "event_name", type(event).__name__)


class UserEventHandler:
    """Reacts to user domain events; unknown events are ignored."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger if logger is not None else _log

    def handle(self, event: DomainEvent) -> None:
        for cls in type(event).__mro__:
            reported = _REPORTED_FIELDS.get(cls)
            if reported is not None:
                details = "".join(f" {name}={getattr(event, name)}" for name in reported)
                self._logger.info("Handling %s event%s", _event_name(event), details)
                return
        self._logger.debug("Unknown event type type=%s", _event_name(event))


class InMemoryEventPublisher:
    """Publishes domain events by writing them to the log."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger if logger is not None else _log

    def publish(self, event: DomainEvent) -> None:
        self._logger.info("Domain event published event=%s %r", _event_name(event), event)