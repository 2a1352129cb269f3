from __future__ import annotations

from services.users.application.interfaces import ErrorReporter, UserRepository
from services.users.application.outcomes import ErrorKind, UserMutation, UserOutcome
from services.users.infrastructure.errors import StoreError


class DeleteUserUseCase:
    def __init__(
        self,
        repository: UserRepository,
        error_reporter: ErrorReporter,
    ) -> None:
        self._repository = repository
        self._error_reporter = error_reporter

    def execute(self, user_id: str) -> UserOutcome[UserMutation]:
        not_found = f"User with ID {user_id} was not found to be deleted."

        try:
            existing = self._repository.get_by_id(user_id)
        except StoreError as exc:
            message = f"Error when trying to access User with ID {user_id} in the database."
            self._error_reporter.report(message, exc)
            return UserOutcome.failure(ErrorKind.STORE, message)

        if existing is None:
            return UserOutcome.failure(ErrorKind.NOT_FOUND, not_found)

        try:
            affected = self._repository.delete(user_id)
        except StoreError as exc:
            message = f"Could not delete User with ID {user_id}."
            self._error_reporter.report(message, exc)
            return UserOutcome.failure(ErrorKind.STORE, message)

        if affected == 0:
            return UserOutcome.failure(ErrorKind.NOT_FOUND, not_found)
        return UserOutcome.success(
            UserMutation(user_id=user_id, message=f"User with ID {user_id} deleted.")
        )
