from __future__ import annotations

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from services.users.config import UsersConfig


def _engine_options(config: UsersConfig):
    if config.uses_sqlite:
        return {
            "connect_args": {"check_same_thread": False},
        }
    return {
        "pool_pre_ping": True,
        "pool_size": config.db_pool_min,
        "max_overflow": config.db_pool_max - config.db_pool_min,
    }


class Base(DeclarativeBase):
    pass


def create_session_factory(config: UsersConfig):
    if config.uses_sqlite:
        Path(config.sqlite_path).parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(config.sqlalchemy_dsn, **_engine_options(config))
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
