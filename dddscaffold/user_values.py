"""Value objects and errors of the user domain."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum

_USERNAME_PATTERN = re.compile(r"[a-zA-Z0-9_-]+")
_EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50


class ValidationError(ValueError):
    """A value object rejected its input."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class BusinessError(Exception):
    """A business rule was violated."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message


class AggregateNotFoundError(LookupError):
    """The requested aggregate does not exist."""

    def __init__(self, message: str = "aggregate not found") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class UserID:
    """Identity of a user."""

    value: int

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value

    def equals(self, other: object) -> bool:
        return isinstance(other, UserID) and other.value == self.value


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


@dataclass(frozen=True)
class UserName:
    """A validated user name, surrounding whitespace removed."""

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value.strip())
        self.validate()

    def __str__(self) -> str:
        return self.value

    def validate(self) -> None:
        if not self.value:
            raise ValidationError("username", "username cannot be empty")
        if _byte_length(self.value) < USERNAME_MIN_LENGTH:
            raise ValidationError("username", "username must be at least 3 characters long")
        if _byte_length(self.value) > USERNAME_MAX_LENGTH:
            raise ValidationError("username", "username cannot exceed 50 characters")
        if not _USERNAME_PATTERN.fullmatch(self.value):
            raise ValidationError(
                "username",
                "username can only contain letters, numbers, underscores and hyphens",
            )

    def equals(self, other: UserName | None) -> bool:
        if other is None:
            return False
        return self.value.casefold() == other.value.casefold()


@dataclass(frozen=True)
class Email:
    """A validated, lower-cased e-mail address."""

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value.lower().strip())
        self.validate()

    def __str__(self) -> str:
        return self.value

    def validate(self) -> None:
        if not self.value:
            raise ValidationError("email", "email cannot be empty")
        if not _EMAIL_PATTERN.fullmatch(self.value):
            raise ValidationError("email", "invalid email format")

    def equals(self, other: Email | None) -> bool:
        if other is None:
            return False
        return self.value.casefold() == other.value.casefold()


@dataclass(frozen=True)
class HashedPassword:
    """A stored password hash."""

    value: str = field(repr=False)

    def matches(self, plain_password: str) -> bool:
        return self.value == plain_password


class UserStatus(IntEnum):
    PENDING = 0
    ACTIVE = 1
    INACTIVE = 2
    LOCKED = 3

    def __str__(self) -> str:
        return self.name.lower()


class UserGender(IntEnum):
    UNKNOWN = 0
    MALE = 1
    FEMALE = 2
    OTHER = 3

    def __str__(self) -> str:
        return self.name.lower()