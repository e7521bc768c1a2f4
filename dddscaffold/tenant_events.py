"""Domain events raised by the tenant aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar

from .tenant_values import TenantID, TenantRole
from .user_events import DomainEvent
from .user_values import UserID


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _role_name(role: str | TenantRole) -> str:
    return str(role)


@dataclass(kw_only=True)
class _TenantEvent(DomainEvent):
    aggregate_type: ClassVar[str] = "tenant"

    tenant_id: TenantID

    @property
    def aggregate_id(self) -> TenantID:
        return self.tenant_id


@dataclass(kw_only=True)
class TenantCreatedEvent(_TenantEvent):
    event_name: ClassVar[str] = "TenantCreated"

    code: str
    name: str
    owner_id: UserID
    created_at: datetime = field(default_factory=_now)


@dataclass(kw_only=True)
class TenantActivatedEvent(_TenantEvent):
    event_name: ClassVar[str] = "TenantActivated"

    activated_at: datetime = field(default_factory=_now)


@dataclass(kw_only=True)
class TenantDeactivatedEvent(_TenantEvent):
    event_name: ClassVar[str] = "TenantDeactivated"

    reason: str
    deactivated_at: datetime = field(default_factory=_now)


@dataclass(kw_only=True)
class TenantSuspendedEvent(_TenantEvent):
    event_name: ClassVar[str] = "TenantSuspended"

    reason: str
    suspended_at: datetime = field(default_factory=_now)


@dataclass(kw_only=True)
class TenantNameChangedEvent(_TenantEvent):
    event_name: ClassVar[str] = "TenantNameChanged"

    old_name: str
    new_name: str
    changed_at: datetime = field(default_factory=_now)


@dataclass(kw_only=True)
class TenantConfigChangedEvent(_TenantEvent):
    event_name: ClassVar[str] = "TenantConfigChanged"

    config_key: str
    config_value: Any
    changed_at: datetime = field(default_factory=_now)


@dataclass(kw_only=True)
class TenantMemberAddedEvent(_TenantEvent):
    event_name: ClassVar[str] = "TenantMemberAdded"

    user_id: UserID
    role: str
    added_by: UserID
    added_at: datetime = field(default_factory=_now)

    def __post_init__(self) -> None:
        self.role = _role_name(self.role)
        super().__post_init__()


@dataclass(kw_only=True)
class TenantMemberRemovedEvent(_TenantEvent):
    event_name: ClassVar[str] = "TenantMemberRemoved"

    user_id: UserID
    removed_by: UserID
    removed_at: datetime = field(default_factory=_now)


@dataclass(kw_only=True)
class TenantMemberRoleChangedEvent(_TenantEvent):
    event_name: ClassVar[str] = "TenantMemberRoleChanged"

    user_id: UserID
    old_role: str
    new_role: str
    changed_by: UserID
    changed_at: datetime = field(default_factory=_now)

    def __post_init__(self) -> None:
        self.old_role = _role_name(self.old_role)
        self.new_role = _role_name(self.new_role)
        super().__post_init__()