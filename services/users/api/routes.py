from __future__ import annotations

from typing import List

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from services.users.application.create_user import CreateUserUseCase
from services.users.application.delete_user import DeleteUserUseCase
from services.users.application.dto import CreateUserCommand, UpdateUserCommand
from services.users.application.get_user import GetUserUseCase
from services.users.application.list_users import ListUsersUseCase
from services.users.application.outcomes import ErrorKind, UserError
from services.users.application.update_user import UpdateUserUseCase
from services.users.domain.user import User

TOTAL_COUNT_HEADER = "X-Total-Count"

_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.EMPTY_COLLECTION: status.HTTP_404_NOT_FOUND,
    ErrorKind.STORE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class UserPayload(BaseModel):
    name: str | None = None
    phone: str | None = None
    email: str | None = None
    age: int | float | None = None
    weight: int | float | None = None


class UserResponse(BaseModel):
    id: str
    name: str | None
    phone: str | None
    email: str | None
    age: int | float | None
    weight: int | float | None

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            phone=user.phone,
            email=user.email,
            age=user.age,
            weight=user.weight,
        )


class MessageResponse(BaseModel):
    message: str


class CreatedUserResponse(MessageResponse):
    id: str


def _error_response(
    error: UserError, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=_STATUS_BY_KIND[error.kind],
        content=MessageResponse(message=error.message).model_dump(),
        headers=headers,
    )


def create_router(
    list_users_use_case: ListUsersUseCase,
    get_user_use_case: GetUserUseCase,
    create_user_use_case: CreateUserUseCase,
    update_user_use_case: UpdateUserUseCase,
    delete_user_use_case: DeleteUserUseCase,
) -> APIRouter:
    router = APIRouter()
    users_router = APIRouter(prefix="/users", tags=["users"])

    @users_router.get("", response_model=List[UserResponse])
    async def list_users_endpoint():
        outcome = list_users_use_case.execute()
        if not outcome.ok:
            headers = None
            if outcome.error.kind is ErrorKind.EMPTY_COLLECTION:
                headers = {TOTAL_COUNT_HEADER: "0"}
            return _error_response(outcome.error, headers)

        listing = outcome.value
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=[
                UserResponse.from_domain(user).model_dump() for user in listing.users
            ],
            headers={TOTAL_COUNT_HEADER: str(listing.total)},
        )

    @users_router.get("/{user_id}", response_model=UserResponse)
    async def get_user_endpoint(user_id: str):
        outcome = get_user_use_case.execute(user_id)
        if not outcome.ok:
            return _error_response(outcome.error)
        return UserResponse.from_domain(outcome.value)

    @users_router.post(
        "", response_model=CreatedUserResponse, status_code=status.HTTP_201_CREATED
    )
    async def create_user_endpoint(payload: UserPayload):
        command = CreateUserCommand(
            name=payload.name,
            phone=payload.phone,
            email=payload.email,
            age=payload.age,
            weight=payload.weight,
        )
        outcome = create_user_use_case.execute(command)
        if not outcome.ok:
            return _error_response(outcome.error)
        return CreatedUserResponse(
            id=outcome.value.user_id, message=outcome.value.message
        )

    @users_router.api_route(
        "/{user_id}", methods=["PUT", "PATCH"], response_model=MessageResponse
    )
    async def update_user_endpoint(user_id: str, payload: UserPayload):
        """Full overwrite for both PUT and PATCH; omitted fields are cleared."""
        command = UpdateUserCommand(
            user_id=user_id,
            name=payload.name,
            phone=payload.phone,
            email=payload.email,
            age=payload.age,
            weight=payload.weight,
        )
        outcome = update_user_use_case.execute(command)
        if not outcome.ok:
            return _error_response(outcome.error)
        return MessageResponse(message=outcome.value.message)

    @users_router.delete("/{user_id}", response_model=MessageResponse)
    async def delete_user_endpoint(user_id: str):
        outcome = delete_user_use_case.execute(user_id)
        if not outcome.ok:
            return _error_response(outcome.error)
        return MessageResponse(message=outcome.value.message)

    router.include_router(users_router)

    return router
