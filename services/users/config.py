from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote_plus

from dotenv import load_dotenv

ENVIRONMENTS = ("development", "staging", "production")

_SERVICE_DIR = Path(__file__).resolve().parent
_DEFAULT_SQLITE_PATH = _SERVICE_DIR / "database" / "db.sqlite"


def _load_repo_env() -> None:
    """Load the nearest .env starting from this file upward."""
    current = Path(__file__).resolve()
    for candidate in [current.parent, *current.parents]:
        env_file = candidate / ".env"
        if env_file.exists():
            load_dotenv(env_file)
            return


def _require_env(name: str) -> str:
    value = os.getenv(name)
    if value is None or value == "":
        raise ValueError(f"Environment variable {name} is required")
    return value


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Environment variable {name} must be an integer") from exc


@dataclass(frozen=True)
class UsersConfig:
    environment: str = "development"
    api_host: str = "127.0.0.1"
    api_port: int = 3333
    api_prefix: str = "/api"
    sqlite_path: str = str(_DEFAULT_SQLITE_PATH)
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = ""
    db_user: str = ""
    db_password: str = ""
    db_pool_min: int = 2
    db_pool_max: int = 10
    log_level: str = "INFO"

    @property
    def uses_sqlite(self) -> bool:
        return self.environment == "development"

    @property
    def database_dsn(self) -> str:
        if self.uses_sqlite:
            return f"sqlite:///{self.sqlite_path}"
        user = quote_plus(self.db_user)
        password = quote_plus(self.db_password)
        return (
            f"postgresql://{user}:{password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def sqlalchemy_dsn(self) -> str:
        dsn = self.database_dsn
        if dsn.startswith("postgresql://"):
            return dsn.replace("postgresql://", "postgresql+psycopg://", 1)
        return dsn


def load_config() -> UsersConfig:
    _load_repo_env()

    environment = os.getenv("USERS_ENV", "development").strip().lower()
    if environment not in ENVIRONMENTS:
        raise ValueError(
            f"USERS_ENV must be one of {', '.join(ENVIRONMENTS)}, got {environment!r}"
        )

    common = dict(
        environment=environment,
        api_host=os.getenv("API_HOST", "127.0.0.1"),
        api_port=_env_int("API_PORT", 3333),
        api_prefix=os.getenv("API_PREFIX", "/api"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )

    if environment == "development":
        return UsersConfig(
            **common,
            sqlite_path=os.getenv("USERS_SQLITE_PATH", str(_DEFAULT_SQLITE_PATH)),
        )

    return UsersConfig(
        **common,
        db_host=os.getenv("DB_HOST", "localhost"),
        db_port=_env_int("DB_PORT", 5432),
        db_name=_require_env("DB_NAME"),
        db_user=_require_env("DB_USER"),
        db_password=_require_env("DB_PASS"),
    )
