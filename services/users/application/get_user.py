from __future__ import annotations

from services.users.application.interfaces import ErrorReporter, UserRepository
from services.users.application.outcomes import ErrorKind, UserOutcome
from services.users.domain.user import User
from services.users.infrastructure.errors import StoreError


class GetUserUseCase:
    def __init__(
        self,
        repository: UserRepository,
        error_reporter: ErrorReporter,
    ) -> None:
        self._repository = repository
        self._error_reporter = error_reporter

    def execute(self, user_id: str) -> UserOutcome[User]:
        try:
            user = self._repository.get_by_id(user_id)
        except StoreError as exc:
            message = f"Error when trying to access User with ID {user_id} in the database."
            self._error_reporter.report(message, exc)
            return UserOutcome.failure(ErrorKind.STORE, message)

        if user is None:
            return UserOutcome.failure(
                ErrorKind.NOT_FOUND, f"User with ID {user_id} not found in the database."
            )
        return UserOutcome.success(user)
