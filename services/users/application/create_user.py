"""Create user use case."""

from __future__ import annotations

from email_validator import EmailNotValidError, validate_email

from services.users.application.dto import CreateUserCommand
from services.users.application.interfaces import (
    ErrorReporter,
    IdProvider,
    UserRepository,
)
from services.users.application.outcomes import ErrorKind, UserMutation, UserOutcome
from services.users.domain.user import User
from services.users.infrastructure.errors import StoreError


def is_valid_email(email: object) -> bool:
    """Syntax check only; the address is stored exactly as submitted."""
    if not isinstance(email, str) or email != email.strip():
        return False
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


class CreateUserUseCase:
    """Use case for creating a user with a freshly generated id."""

    def __init__(
        self,
        repository: UserRepository,
        id_provider: IdProvider,
        error_reporter: ErrorReporter,
    ) -> None:
        self._repository = repository
        self._id_provider = id_provider
        self._error_reporter = error_reporter

    def execute(self, command: CreateUserCommand) -> UserOutcome[UserMutation]:
        """
        Validate the email and insert a new user.

        Args:
            command: Submitted user fields

        Returns:
            Outcome holding the new id, or a VALIDATION / STORE error
        """
        if not is_valid_email(command.email):
            return UserOutcome.failure(
                ErrorKind.VALIDATION,
                f"The email {command.email} is not in a valid format.",
            )

        # Collisions are not checked; a duplicate id surfaces as a store error.
        user_id = self._id_provider.generate()
        user = User(
            id=user_id,
            name=command.name,
            phone=command.phone,
            email=command.email,
            age=command.age,
            weight=command.weight,
        )
        try:
            self._repository.create(user)
        except StoreError as exc:
            message = "Error when trying to insert new User in the database."
            self._error_reporter.report(message, exc)
            return UserOutcome.failure(ErrorKind.STORE, message)

        return UserOutcome.success(
            UserMutation(user_id=user_id, message=f"User with ID {user_id} was created.")
        )
