"""Typed results returned by the user use cases.

A use case never raises for business conditions (bad email, unknown id, empty
table) or for store failures. It returns a ``UserOutcome`` holding either the
value or a ``UserError`` tagged with an ``ErrorKind``; the API layer turns the
kind into a status code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, List, TypeVar

from services.users.domain.user import User

T = TypeVar("T")


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    EMPTY_COLLECTION = "empty_collection"
    STORE = "store"


@dataclass(frozen=True)
class UserError:
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class UserOutcome(Generic[T]):
    value: T | None = None
    error: UserError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "UserOutcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "UserOutcome[T]":
        return cls(error=UserError(kind=kind, message=message))


@dataclass(frozen=True)
class UserListing:
    users: List[User] = field(default_factory=list)
    total: int = 0


@dataclass(frozen=True)
class UserMutation:
    user_id: str
    message: str
