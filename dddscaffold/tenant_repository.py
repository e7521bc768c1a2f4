"""Repository and read-model contracts of the tenant domain, with their DTOs."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from enum import IntEnum
from typing import Any, Protocol, runtime_checkable

from .pagination import PaginatedResult, Pagination
from .tenant_values import TenantConfig, TenantID, TenantMember, TenantStatus
from .user_values import UserID

_NIL = {"omitempty": "nil"}
_ZERO = {"omitempty": "zero"}


def _json_value(value: Any) -> Any:
    if isinstance(value, (TenantID, UserID)):
        return value.value
    if isinstance(value, IntEnum):
        return int(value)
    if isinstance(value, TenantConfig):
        return asdict(value)
    if isinstance(value, list):
        return [_json_value(v) for v in value]
    if isinstance(value, dict):
        return {k: _json_value(v) for k, v in value.items()}
    return value


class _JsonDTO:
    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form, leaving out empty optional fields."""
        result: dict[str, Any] = {}
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            omit = f.metadata.get("omitempty")
            if omit == "nil" and value is None:
                continue
            if omit == "zero" and not value:
                continue
            result[f.name] = _json_value(value)
        return result


@dataclass
class TenantSearchCriteria(_JsonDTO):
    keyword: str = field(default="", metadata=_ZERO)
    status: TenantStatus | None = field(default=None, metadata=_NIL)
    owner_id: UserID | None = field(default=None, metadata=_NIL)
    code_prefix: str = field(default="", metadata=_ZERO)


@runtime_checkable
class TenantRepository(Protocol):
    """Persistence of tenant aggregates and their memberships.

    Lookups of a single tenant or member raise AggregateNotFoundError when
    nothing matches.
    """

    def save(self, tenant: Any) -> None:
        """Store a tenant."""

    def find_by_id(self, tenant_id: TenantID) -> Any:
        """Return the tenant with this id."""

    def delete(self, tenant_id: TenantID) -> None:
        """Remove a tenant."""

    def exists(self, tenant_id: TenantID) -> bool:
        """Tell whether a tenant with this id exists."""

    def find_by_code(self, code: str) -> Any:
        """Return the tenant with this code."""

    def find_by_owner_id(self, owner_id: UserID) -> list[Any]:
        """Return the tenants owned by this user."""

    def find_by_status(self, status: TenantStatus) -> list[Any]:
        """Return all tenants in this status."""

    def find_all(self, pagination: Pagination) -> PaginatedResult[Any]:
        """Return one page of all tenants."""

    def find_by_criteria(
        self, criteria: TenantSearchCriteria, pagination: Pagination
    ) -> PaginatedResult[Any]:
        """Return one page of the tenants matching the criteria."""

    def count(self) -> int:
        """Return the number of tenants."""

    def count_by_status(self, status: TenantStatus) -> int:
        """Return the number of tenants in this status."""

    def add_member(self, tenant_id: TenantID, member: TenantMember) -> None:
        """Add a member to a tenant."""

    def remove_member(self, tenant_id: TenantID, user_id: UserID) -> None:
        """Remove a member from a tenant."""

    def find_members(self, tenant_id: TenantID) -> list[TenantMember]:
        """Return every member of a tenant."""

    def find_member_by_user_id(self, tenant_id: TenantID, user_id: UserID) -> TenantMember:
        """Return the membership of one user in a tenant."""

    def save_with_version(self, tenant: Any, expected_version: int) -> None:
        """Store a tenant if its stored version is the expected one."""


@dataclass
class TenantProfileDTO(_JsonDTO):
    tenant_id: TenantID
    code: str
    name: str
    description: str = ""
    status: TenantStatus = TenantStatus.ACTIVE
    owner_id: UserID | None = None
    max_members: int = 0
    config: TenantConfig | None = None
    created_at: str = ""
    updated_at: str = ""
    member_count: int = 0


@dataclass
class TenantListItemDTO(_JsonDTO):
    tenant_id: TenantID
    code: str
    name: str
    status: TenantStatus = TenantStatus.ACTIVE
    owner_id: UserID | None = None
    member_count: int = 0
    created_at: str = ""


@dataclass
class TenantListCriteria(_JsonDTO):
    status: TenantStatus | None = field(default=None, metadata=_NIL)
    keyword: str = field(default="", metadata=_ZERO)
    owner_id: UserID | None = field(default=None, metadata=_NIL)
    sort_by: str = field(default="", metadata=_ZERO)
    sort_desc: bool = field(default=False, metadata=_ZERO)


@dataclass
class TenantStatisticsDTO(_JsonDTO):
    total_tenants: int = 0
    active_tenants: int = 0
    inactive_tenants: int = 0
    suspended_tenants: int = 0
    total_members: int = 0
    avg_members_per_tenant: float = 0.0


@dataclass
class TenantMemberDTO(_JsonDTO):
    user_id: UserID
    tenant_id: TenantID
    username: str
    email: str
    role: str
    joined_at: str = ""


@runtime_checkable
class TenantReadModel(Protocol):
    """Query side of the tenant domain."""

    def get_tenant_profile(self, tenant_id: TenantID) -> TenantProfileDTO:
        """Return the profile of one tenant."""

    def list_tenants(
        self, criteria: TenantListCriteria, pagination: Pagination
    ) -> PaginatedResult[TenantListItemDTO]:
        """Return one page of tenants matching the criteria."""

    def search_tenants(
        self, keyword: str, pagination: Pagination
    ) -> PaginatedResult[TenantListItemDTO]:
        """Return one page of tenants matching the keyword."""

    def get_tenant_statistics(self) -> TenantStatisticsDTO:
        """Return counts over all tenants."""

    def get_tenant_members(self, tenant_id: TenantID) -> list[TenantMemberDTO]:
        """Return the members of one tenant."""