"""Value objects of the tenant domain."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum

from .user_values import UserID, ValidationError

_CODE_PATTERN = re.compile(r"[A-Z0-9_-]+")

CODE_MIN_LENGTH = 3
CODE_MAX_LENGTH = 20


@dataclass(frozen=True)
class TenantID:
    """Identity of a tenant."""

    value: int

    def __str__(self) -> str:
        return f"tenant-{self.value}"

    def __int__(self) -> int:
        return self.value

    def equals(self, other: object) -> bool:
        return isinstance(other, TenantID) and other.value == self.value


@dataclass(frozen=True)
class TenantCode:
    """A validated tenant code, trimmed and upper-cased."""

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value.strip().upper())
        self.validate()

    def __str__(self) -> str:
        return self.value

    def validate(self) -> None:
        if not self.value:
            raise ValidationError("code", "tenant code cannot be empty")
        length = len(self.value.encode("utf-8"))
        if length < CODE_MIN_LENGTH:
            raise ValidationError("code", "tenant code must be at least 3 characters long")
        if length > CODE_MAX_LENGTH:
            raise ValidationError("code", "tenant code cannot exceed 20 characters")
        if not _CODE_PATTERN.fullmatch(self.value):
            raise ValidationError(
                "code",
                "tenant code can only contain uppercase letters, numbers, underscores and hyphens",
            )

    def equals(self, other: TenantCode | None) -> bool:
        if other is None:
            return False
        return self.value == other.value


class TenantStatus(IntEnum):
    ACTIVE = 0
    INACTIVE = 1
    SUSPENDED = 2

    def __str__(self) -> str:
        return self.name.lower()


class TenantRole(IntEnum):
    OWNER = 0
    ADMIN = 1
    MEMBER = 2
    GUEST = 3

    def __str__(self) -> str:
        return self.name.lower()


@dataclass
class TenantConfig:
    """Limits and settings of one tenant."""

    max_storage_gb: int = 10
    max_projects: int = 10
    allowed_features: list[str] = field(default_factory=lambda: ["basic", "api_access"])
    custom_settings: dict[str, str] = field(default_factory=dict)
    require_mfa: bool = False
    session_timeout_min: int = 30


def default_tenant_config() -> TenantConfig:
    """Return a fresh configuration with the default limits."""
    return TenantConfig()


@dataclass
class TenantMember:
    """Membership of one user in one tenant."""

    user_id: UserID
    tenant_id: TenantID
    role: TenantRole
    joined_at: str