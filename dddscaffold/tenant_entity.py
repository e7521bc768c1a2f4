"""The tenant aggregate root."""

from __future__ import annotations

from datetime import datetime, timezone

from .tenant_events import (
    TenantActivatedEvent,
    TenantConfigChangedEvent,
    TenantCreatedEvent,
    TenantDeactivatedEvent,
    TenantNameChangedEvent,
    TenantSuspendedEvent,
)
from .tenant_values import (
    TenantCode,
    TenantConfig,
    TenantID,
    TenantStatus,
    default_tenant_config,
)
from .user_events import DomainEvent
from .user_values import BusinessError, UserID

DEFAULT_MAX_MEMBERS = 100


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Tenant:
    """A tenant: an organisation that owns members and settings."""

    def __init__(
        self,
        tenant_id: TenantID,
        code: TenantCode,
        name: str,
        owner_id: UserID,
        *,
        description: str = "",
        status: TenantStatus = TenantStatus.ACTIVE,
        config: TenantConfig | None = None,
        max_members: int = DEFAULT_MAX_MEMBERS,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        version: int = 0,
    ) -> None:
        now = _now()
        self._id = tenant_id
        self._code = code
        self._name = name
        self._owner_id = owner_id
        self._description = description
        self._status = status
        self._config = config if config is not None else default_tenant_config()
        self._max_members = max_members
        self._created_at = created_at or now
        self._updated_at = updated_at or now
        self._version = version
        self._events: list[DomainEvent] = []

    def __repr__(self) -> str:
        return f"Tenant(id={self._id!s}, code={self._code.value!r}, status={self._status!s})"

    @property
    def id(self) -> TenantID:
        return self._id

    @property
    def code(self) -> TenantCode:
        return self._code

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def status(self) -> TenantStatus:
        return self._status

    @property
    def config(self) -> TenantConfig:
        return self._config

    @property
    def owner_id(self) -> UserID:
        return self._owner_id

    @property
    def max_members(self) -> int:
        return self._max_members

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def version(self) -> int:
        return self._version

    def apply_event(self, event: DomainEvent) -> None:
        """Record an event to be published once the tenant is saved."""
        self._events.append(event)

    def increment_version(self) -> None:
        self._version += 1

    def uncommitted_events(self) -> list[DomainEvent]:
        return list(self._events)

    def clear_uncommitted_events(self) -> None:
        self._events.clear()

    def _touch(self) -> None:
        self._updated_at = _now()
        self.increment_version()

    def rename(self, name: str) -> None:
        old_name = self._name
        self._name = name
        self._touch()
        self.apply_event(TenantNameChangedEvent(tenant_id=self._id, old_name=old_name, new_name=name))

    def describe(self, description: str) -> None:
        self._description = description
        self._touch()

    def update_max_members(self, max_members: int) -> None:
        if max_members <= 0:
            raise BusinessError("INVALID_MAX_MEMBERS", "max members must be greater than 0")
        self._max_members = max_members
        self._touch()
        self.apply_event(
            TenantConfigChangedEvent(
                tenant_id=self._id, config_key="max_members", config_value=max_members
            )
        )

    def activate(self) -> None:
        if self._status is TenantStatus.ACTIVE:
            raise BusinessError("TENANT_ALREADY_ACTIVE", "tenant is already active")
        self._status = TenantStatus.ACTIVE
        self._touch()
        self.apply_event(TenantActivatedEvent(tenant_id=self._id))

    def deactivate(self, reason: str) -> None:
        if self._status is TenantStatus.INACTIVE:
            raise BusinessError("TENANT_ALREADY_INACTIVE", "tenant is already inactive")
        self._status = TenantStatus.INACTIVE
        self._touch()
        self.apply_event(TenantDeactivatedEvent(tenant_id=self._id, reason=reason))

    def suspend(self, reason: str) -> None:
        if self._status is TenantStatus.SUSPENDED:
            raise BusinessError("TENANT_ALREADY_SUSPENDED", "tenant is already suspended")
        self._status = TenantStatus.SUSPENDED
        self._touch()
        self.apply_event(TenantSuspendedEvent(tenant_id=self._id, reason=reason))

    def update_config(self, config: TenantConfig) -> None:
        self._config = config
        self._touch()
        self.apply_event(
            TenantConfigChangedEvent(tenant_id=self._id, config_key="config", config_value=config)
        )

    def transfer_to(self, new_owner_id: UserID) -> None:
        """Make another user the owner of this tenant."""
        self._owner_id = new_owner_id
        self._touch()

    def is_active(self) -> bool:
        return self._status is TenantStatus.ACTIVE

    def can_add_member(self, current_member_count: int) -> bool:
        if not self.is_active():
            return False
        return current_member_count < self._max_members


def new_tenant(code: str, name: str, owner_id: UserID) -> Tenant:
    """Create an active tenant with default settings and record its creation."""
    tenant_code = TenantCode(code)
    tenant = Tenant(TenantID(1), tenant_code, name, owner_id)
    tenant.apply_event(
        TenantCreatedEvent(tenant_id=tenant.id, code=code, name=name, owner_id=owner_id)
    )
    return tenant