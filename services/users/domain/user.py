"""User domain model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """User entity."""

    id: str
    name: str | None = None
    phone: str | None = None
    email: str | None = None
    age: int | float | None = None
    weight: int | float | None = None
