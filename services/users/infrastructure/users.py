"""User repository implementation using SQLAlchemy."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Column, Float, String, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.types import TypeDecorator

from services.users.application.interfaces import UserRepository
from services.users.domain.user import User
from services.users.infrastructure.db import Base
from services.users.infrastructure.errors import StoreError


class JsonNumber(TypeDecorator):
    """Float column that reads whole numbers back as ``int``.

    JSON has a single number type, so ``27`` and ``27.0`` are the same value;
    returning ints keeps whole numbers serialized as ``27``.
    """

    impl = Float
    cache_ok = True

    def process_result_value(self, value, dialect):
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


class UserRecord(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    age = Column(JsonNumber, nullable=True)
    weight = Column(JsonNumber, nullable=True)


def _to_domain(record: UserRecord) -> User:
    return User(
        id=record.id,
        name=record.name,
        phone=record.phone,
        email=record.email,
        age=record.age,
        weight=record.weight,
    )


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        raise StoreError(operation, exc) from exc


class SqlUserRepository(UserRepository):
    """SQLAlchemy implementation of UserRepository."""

    def __init__(self, session_factory) -> None:
        self._session_factory = session_factory

    def list_all(self) -> list[User]:
        with _store_errors("list users"), self._session_factory() as db:
            records = db.query(UserRecord).all()
            return [_to_domain(record) for record in records]

    def get_by_id(self, user_id: str) -> User | None:
        with _store_errors("get user"), self._session_factory() as db:
            record = db.get(UserRecord, user_id)
            if record is None:
                return None
            return _to_domain(record)

    def count(self) -> int:
        with _store_errors("count users"), self._session_factory() as db:
            return db.query(func.count(UserRecord.id)).scalar() or 0

    def create(self, user: User) -> User:
        record = UserRecord(
            id=user.id,
            name=user.name,
            phone=user.phone,
            email=user.email,
            age=user.age,
            weight=user.weight,
        )
        with _store_errors("insert user"), self._session_factory() as db:
            db.add(record)
            db.commit()
        return user

    def update(self, user: User) -> int:
        """Overwrite every mutable field of the user. Returns affected rows."""
        with _store_errors("update user"), self._session_factory() as db:
            affected = (
                db.query(UserRecord)
                .filter(UserRecord.id == user.id)
                .update(
                    {
                        UserRecord.name: user.name,
                        UserRecord.phone: user.phone,
                        UserRecord.email: user.email,
                        UserRecord.age: user.age,
                        UserRecord.weight: user.weight,
                    },
                    synchronize_session=False,
                )
            )
            db.commit()
            return affected

    def delete(self, user_id: str) -> int:
        """Delete the user by id. Returns affected rows."""
        with _store_errors("delete user"), self._session_factory() as db:
            affected = (
                db.query(UserRecord)
                .filter(UserRecord.id == user_id)
                .delete(synchronize_session=False)
            )
            db.commit()
            return affected
