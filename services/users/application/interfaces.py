"""Interfaces for the users service."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from services.users.domain.user import User


class IdProvider(Protocol):
    def generate(self) -> str: ...


class ErrorReporter(Protocol):
    def report(self, message: str, exc: Exception) -> None: ...


class UserRepository(Protocol):
    """Repository for user persistence."""

    @abstractmethod
    def list_all(self) -> list["User"]:
        """Return every stored user."""
        ...

    @abstractmethod
    def get_by_id(self, user_id: str) -> "User" | None:
        """Get user by ID."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Count stored users."""
        ...

    @abstractmethod
    def create(self, user: "User") -> "User":
        """Insert a new user."""
        ...

    @abstractmethod
    def update(self, user: "User") -> int:
        """Overwrite a user's fields, returning the number of rows touched."""
        ...

    @abstractmethod
    def delete(self, user_id: str) -> int:
        """Delete a user, returning the number of rows touched."""
        ...
