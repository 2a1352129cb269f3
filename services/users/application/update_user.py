"""Update user use case."""

from __future__ import annotations

from services.users.application.dto import UpdateUserCommand
from services.users.application.interfaces import ErrorReporter, UserRepository
from services.users.application.outcomes import ErrorKind, UserMutation, UserOutcome
from services.users.domain.user import User
from services.users.infrastructure.errors import StoreError


class UpdateUserUseCase:
    """Overwrite all mutable fields of an existing user."""

    def __init__(
        self,
        repository: UserRepository,
        error_reporter: ErrorReporter,
    ) -> None:
        self._repository = repository
        self._error_reporter = error_reporter

    def execute(self, command: UpdateUserCommand) -> UserOutcome[UserMutation]:
        user_id = command.user_id
        not_found = f"User with ID {user_id} not found to be changed."

        try:
            existing = self._repository.get_by_id(user_id)
        except StoreError as exc:
            message = f"Error when trying to access User with ID {user_id} in the database."
            self._error_reporter.report(message, exc)
            return UserOutcome.failure(ErrorKind.STORE, message)

        if existing is None:
            return UserOutcome.failure(ErrorKind.NOT_FOUND, not_found)

        # Email is not re-validated; absent fields are cleared.
        updated = User(
            id=user_id,
            name=command.name,
            phone=command.phone,
            email=command.email,
            age=command.age,
            weight=command.weight,
        )
        try:
            affected = self._repository.update(updated)
        except StoreError as exc:
            message = f"Could not update User with ID {user_id}."
            self._error_reporter.report(message, exc)
            return UserOutcome.failure(ErrorKind.STORE, message)

        if affected == 0:
            return UserOutcome.failure(ErrorKind.NOT_FOUND, not_found)
        return UserOutcome.success(
            UserMutation(user_id=user_id, message=f"User with ID {user_id} was updated.")
        )
