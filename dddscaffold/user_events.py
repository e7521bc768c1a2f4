"""Domain events raised by the user aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar

from .user_values import UserID


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(kw_only=True)
class DomainEvent(ABC):
    """Base of every domain event."""

    event_name: ClassVar[str]
    aggregate_type: ClassVar[str]
    security_event: ClassVar[bool] = False

    event_version: int = 1
    occurred_at: datetime = field(default_factory=_now)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.set_metadata("event_type", "domain_event")
        self.set_metadata("aggregate_type", self.aggregate_type)
        if self.security_event:
            self.set_metadata("security_event", True)

    @property
    @abstractmethod
    def aggregate_id(self) -> Any:
        """Identity of the aggregate that raised the event."""

    def set_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = value


@dataclass(kw_only=True)
class _UserEvent(DomainEvent):
    aggregate_type: ClassVar[str] = "user"

    user_id: UserID

    @property
    def aggregate_id(self) -> UserID:
        return self.user_id


@dataclass(kw_only=True)
class UserRegisteredEvent(_UserEvent):
    event_name: ClassVar[str] = "UserRegistered"

    username: str
    email: str
    registered_at: datetime = field(default_factory=_now)


@dataclass(kw_only=True)
class UserActivatedEvent(_UserEvent):
    event_name: ClassVar[str] = "UserActivated"

    activated_at: datetime = field(default_factory=_now)


@dataclass(kw_only=True)
class UserDeactivatedEvent(_UserEvent):
    event_name: ClassVar[str] = "UserDeactivated"

    reason: str
    deactivated_at: datetime = field(default_factory=_now)


@dataclass(kw_only=True)
class UserLoggedInEvent(_UserEvent):
    event_name: ClassVar[str] = "UserLoggedIn"
    security_event: ClassVar[bool] = True

    ip_address: str
    user_agent: str
    login_at: datetime = field(default_factory=_now)


@dataclass(kw_only=True)
class UserPasswordChangedEvent(_UserEvent):
    event_name: ClassVar[str] = "UserPasswordChanged"
    security_event: ClassVar[bool] = True

    ip_address: str
    changed_at: datetime = field(default_factory=_now)


@dataclass(kw_only=True)
class UserEmailChangedEvent(_UserEvent):
    event_name: ClassVar[str] = "UserEmailChanged"

    old_email: str
    new_email: str
    changed_at: datetime = field(default_factory=_now)


@dataclass(kw_only=True)
class UserLockedEvent(_UserEvent):
    event_name: ClassVar[str] = "UserLocked"
    security_event: ClassVar[bool] = True

    reason: str
    locked_until: datetime
    locked_at: datetime = field(default_factory=_now)


@dataclass(kw_only=True)
class UserUnlockedEvent(_UserEvent):
    event_name: ClassVar[str] = "UserUnlocked"

    unlocked_at: datetime = field(default_factory=_now)


@dataclass(kw_only=True)
class UserProfileUpdatedEvent(_UserEvent):
    event_name: ClassVar[str] = "UserProfileUpdated"

    updated_fields: list[str] = field(default_factory=list)
    updated_at: datetime = field(default_factory=_now)


@dataclass(kw_only=True)
class UserFailedLoginAttemptEvent(_UserEvent):
    event_name: ClassVar[str] = "UserFailedLoginAttempt"
    security_event: ClassVar[bool] = True

    ip_address: str
    user_agent: str
    reason: str
    attempt_at: datetime = field(default_factory=_now)