"""Repository and read-model contracts of the user domain, with their DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import IntEnum
from typing import Any, Protocol, runtime_checkable

from .pagination import PaginatedResult, Pagination
from .user_values import UserGender, UserID, UserStatus

_NIL = {"omitempty": "nil"}
_ZERO = {"omitempty": "zero"}


def _json_value(value: Any) -> Any:
    if isinstance(value, UserID):
        return value.value
    if isinstance(value, IntEnum):
        return int(value)
    if isinstance(value, list):
        return [_json_value(v) for v in value]
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


@runtime_checkable
class UserRepository(Protocol):
    """Persistence of user aggregates."""

    def save(self, user: Any) -> None:
        """Store a user."""

    def find_by_id(self, user_id: UserID) -> Any:
        """Return the user with this id or raise AggregateNotFoundError."""

    def delete(self, user_id: UserID) -> None:
        """Remove a user."""

    def exists(self, user_id: UserID) -> bool:
        """Tell whether a user with this id exists."""

    def find_by_username(self, username: str) -> Any:
        """Return the user with this user name."""

    def find_by_email(self, email: str) -> Any:
        """Return the user with this e-mail address."""

    def find_by_status(self, status: UserStatus) -> list[Any]:
        """Return all users in this status."""

    def find_all(self, pagination: Pagination) -> PaginatedResult[Any]:
        """Return one page of all users."""

    def find_by_criteria(
        self, criteria: UserSearchCriteria, pagination: Pagination
    ) -> PaginatedResult[Any]:
        """Return one page of the users matching the criteria."""

    def count(self) -> int:
        """Return the number of users."""

    def count_by_status(self, status: UserStatus) -> int:
        """Return the number of users in this status."""

    def save_batch(self, users: list[Any]) -> None:
        """Store several users."""

    def delete_batch(self, user_ids: list[UserID]) -> None:
        """Remove several users."""

    def save_with_version(self, user: Any, expected_version: int) -> None:
        """Store a user if its stored version is the expected one."""


@dataclass
class UserSearchCriteria(_JsonDTO):
    keyword: str = field(default="", metadata=_ZERO)
    status: UserStatus | None = field(default=None, metadata=_NIL)
    gender: UserGender | None = field(default=None, metadata=_NIL)
    created_from: str | None = field(default=None, metadata=_NIL)
    created_to: str | None = field(default=None, metadata=_NIL)
    last_login_from: str | None = field(default=None, metadata=_NIL)
    last_login_to: str | None = field(default=None, metadata=_NIL)


@dataclass
class UserProfileDTO(_JsonDTO):
    user_id: UserID
    username: str
    email: str
    display_name: str = ""
    first_name: str = ""
    last_name: str = ""
    gender: UserGender = UserGender.UNKNOWN
    phone_number: str = ""
    avatar_url: str = ""
    status: UserStatus = UserStatus.PENDING
    created_at: str = ""
    updated_at: str = ""
    last_login_at: str | None = field(default=None, metadata=_NIL)
    login_count: int = 0


@dataclass
class UserListItemDTO(_JsonDTO):
    user_id: UserID
    username: str
    email: str
    display_name: str = ""
    status: UserStatus = UserStatus.PENDING
    created_at: str = ""
    last_login_at: str | None = field(default=None, metadata=_NIL)


@dataclass
class UserListCriteria(_JsonDTO):
    status: UserStatus | None = field(default=None, metadata=_NIL)
    keyword: str = field(default="", metadata=_ZERO)
    sort_by: str = field(default="", metadata=_ZERO)
    sort_desc: bool = field(default=False, metadata=_ZERO)


@dataclass
class UserStatisticsDTO(_JsonDTO):
    total_users: int = 0
    active_users: int = 0
    inactive_users: int = 0
    pending_users: int = 0
    locked_users: int = 0
    today_logins: int = 0
    this_week_logins: int = 0
    this_month_logins: int = 0
    average_session_duration: int = 0  # seconds


@runtime_checkable
class UserReadModel(Protocol):
    """Query side of the user domain."""

    def get_user_profile(self, user_id: UserID) -> UserProfileDTO:
        """Return the profile of one user."""

    def list_users(
        self, criteria: UserListCriteria, pagination: Pagination
    ) -> PaginatedResult[UserListItemDTO]:
        """Return one page of users matching the criteria."""

    def search_users(self, keyword: str, pagination: Pagination) -> PaginatedResult[UserListItemDTO]:
        """Return one page of users matching the keyword."""

    def get_user_statistics(self) -> UserStatisticsDTO:
        """Return counts over all users."""