from dataclasses import dataclass


@dataclass(frozen=True)
class CreateUserCommand:
    name: str | None = None
    phone: str | None = None
    email: str | None = None
    age: int | float | None = None
    weight: int | float | None = None


@dataclass(frozen=True)
class UpdateUserCommand:
    user_id: str
    name: str | None = None
    phone: str | None = None
    email: str | None = None
    age: int | float | None = None
    weight: int | float | None = None
