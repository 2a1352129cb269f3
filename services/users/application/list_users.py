"""List users use case."""

from __future__ import annotations

from services.users.application.interfaces import ErrorReporter, UserRepository
from services.users.application.outcomes import ErrorKind, UserListing, UserOutcome
from services.users.infrastructure.errors import StoreError


class ListUsersUseCase:
    """Fetch every user together with the total count."""

    def __init__(
        self,
        repository: UserRepository,
        error_reporter: ErrorReporter,
    ) -> None:
        self._repository = repository
        self._error_reporter = error_reporter

    def execute(self) -> UserOutcome[UserListing]:
        try:
            users = self._repository.list_all()
            total = self._repository.count()
        except StoreError as exc:
            message = "Error when trying to access Users in the database."
            self._error_reporter.report(message, exc)
            return UserOutcome.failure(ErrorKind.STORE, message)

        if total == 0:
            return UserOutcome.failure(
                ErrorKind.EMPTY_COLLECTION, "There are no users in the database."
            )
        return UserOutcome.success(UserListing(users=users, total=total))
