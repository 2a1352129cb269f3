from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from services.users.api.routes import TOTAL_COUNT_HEADER, create_router
from services.users.application.create_user import CreateUserUseCase
from services.users.application.delete_user import DeleteUserUseCase
from services.users.application.get_user import GetUserUseCase
from services.users.application.interfaces import ErrorReporter, UserRepository
from services.users.application.list_users import ListUsersUseCase
from services.users.application.update_user import UpdateUserUseCase
from services.users.config import UsersConfig, load_config
from services.users.infrastructure.db import create_session_factory
from services.users.infrastructure.errors import LoggingErrorReporter
from services.users.infrastructure.ids import HexTokenIdProvider
from services.users.infrastructure.users import SqlUserRepository


def build_app(
    config: UsersConfig | None = None,
    *,
    user_repository: UserRepository | None = None,
    error_reporter: ErrorReporter | None = None,
) -> FastAPI:
    cfg = config or load_config()
    app = FastAPI(title="Users API")

    # Permissive CORS: any origin may call the API.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[TOTAL_COUNT_HEADER],
    )

    @app.get("/ping")
    async def ping():
        return {"message": "pong"}

    if user_repository is None:
        user_repository = SqlUserRepository(
            session_factory=create_session_factory(cfg)
        )
    reporter = error_reporter or LoggingErrorReporter()
    user_id_provider = HexTokenIdProvider(num_bytes=4)

    app.include_router(
        create_router(
            ListUsersUseCase(repository=user_repository, error_reporter=reporter),
            GetUserUseCase(repository=user_repository, error_reporter=reporter),
            CreateUserUseCase(
                repository=user_repository,
                id_provider=user_id_provider,
                error_reporter=reporter,
            ),
            UpdateUserUseCase(repository=user_repository, error_reporter=reporter),
            DeleteUserUseCase(repository=user_repository, error_reporter=reporter),
        ),
        prefix=cfg.api_prefix,
    )

    return app
