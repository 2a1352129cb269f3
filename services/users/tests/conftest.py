import pytest
from sqlalchemy.exc import OperationalError

from services.users.config import UsersConfig
from services.users.domain.user import User
from services.users.infrastructure.errors import StoreError


class InMemoryUserRepository:
    def __init__(self, users: list[User] | None = None) -> None:
        self.users: dict[str, User] = {user.id: user for user in users or []}

    def list_all(self) -> list[User]:
        return list(self.users.values())

    def get_by_id(self, user_id: str) -> User | None:
        return self.users.get(user_id)

    def count(self) -> int:
        return len(self.users)

    def create(self, user: User) -> User:
        self.users[user.id] = user
        return user

    def update(self, user: User) -> int:
        if user.id not in self.users:
            return 0
        self.users[user.id] = user
        return 1

    def delete(self, user_id: str) -> int:
        return 1 if self.users.pop(user_id, None) is not None else 0


class FailingUserRepository(InMemoryUserRepository):
    """Raises StoreError from the operations named in ``failing``."""

    def __init__(self, failing: set[str], users: list[User] | None = None) -> None:
        super().__init__(users)
        self._failing = failing

    def _maybe_fail(self, operation: str) -> None:
        if operation in self._failing:
            raise StoreError(
                operation, OperationalError("SELECT 1", {}, Exception("db down"))
            )

    def list_all(self) -> list[User]:
        self._maybe_fail("list_all")
        return super().list_all()

    def get_by_id(self, user_id: str) -> User | None:
        self._maybe_fail("get_by_id")
        return super().get_by_id(user_id)

    def count(self) -> int:
        self._maybe_fail("count")
        return super().count()

    def create(self, user: User) -> User:
        self._maybe_fail("create")
        return super().create(user)

    def update(self, user: User) -> int:
        self._maybe_fail("update")
        return super().update(user)

    def delete(self, user_id: str) -> int:
        self._maybe_fail("delete")
        return super().delete(user_id)


class RecordingErrorReporter:
    def __init__(self) -> None:
        self.reports: list[tuple[str, Exception]] = []

    def report(self, message: str, exc: Exception) -> None:
        self.reports.append((message, exc))


class SequenceIdProvider:
    def __init__(self, ids: list[str]) -> None:
        self._ids = list(ids)

    def generate(self) -> str:
        return self._ids.pop(0)


@pytest.fixture
def sqlite_config(tmp_path):
    return UsersConfig(sqlite_path=str(tmp_path / "db" / "users.sqlite"))


@pytest.fixture
def reporter():
    return RecordingErrorReporter()


@pytest.fixture
def ana():
    return User(
        id="0a1b2c3d",
        name="Ana",
        phone="555-0101",
        email="ana@mail.com",
        age=31,
        weight=62.5,
    )
