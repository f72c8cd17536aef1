"""
Storage access for the ``users`` table.

``UserRepository`` wraps a SQLModel ``Session`` and exposes the five CRUD
primitives the service builds on. Absent rows are reported as ``None`` /
``False``; every SQLAlchemy failure is rolled back and re-raised as
``StorageError``.
"""

import logging
from datetime import timedelta
from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from users_api.errors import StorageError
from users_api.models.user import User, utc_now

logger = logging.getLogger(__name__)

# Columns a client is allowed to write
WRITABLE_FIELDS = ("name", "email", "age")

UserFields = Union[BaseModel, Mapping[str, Any]]


def _writable(fields: UserFields, partial: bool) -> dict:
    if isinstance(fields, BaseModel):
        data = fields.model_dump(exclude_unset=partial)
    else:
        data = dict(fields)
    return {key: value for key, value in data.items() if key in WRITABLE_FIELDS}


class UserRepository:
    def __init__(self, session: Session):
        self.session = session

    def find_all(self) -> List[User]:
        try:
            return list(self.session.exec(select(User).order_by(User.id)).all())
        except SQLAlchemyError as e:
            raise StorageError("find_all", str(e)) from e

    def find_by_id(self, user_id: int) -> Optional[User]:
        try:
            return self.session.get(User, user_id)
        except SQLAlchemyError as e:
            raise StorageError("find_by_id", str(e)) from e

    def create(self, fields: UserFields) -> User:
        now = utc_now()
        user = User(**_writable(fields, partial=False), created_at=now, updated_at=now)
        try:
            self.session.add(user)
            self.session.commit()
            self.session.refresh(user)
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StorageError("create", str(e)) from e
        logger.debug("Created user %s", user.id)
        return user

    def update(self, user_id: int, fields: UserFields) -> Optional[User]:
        """
        Apply the given fields to an existing row.

        Only keys present in ``fields`` are written. ``updated_at`` always
        moves forward, even for an empty update.
        """
        try:
            user = self.session.get(User, user_id)
            if not user:
                return None

            for field, value in _writable(fields, partial=True).items():
                setattr(user, field, value)

            now = utc_now()
            if user.updated_at is not None and now <= user.updated_at:
                now = user.updated_at + timedelta(microseconds=1)
            user.updated_at = now

            self.session.add(user)
            self.session.commit()
            self.session.refresh(user)
            return user
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StorageError("update", str(e)) from e

    def delete(self, user_id: int) -> bool:
        try:
            user = self.session.get(User, user_id)
            if not user:
                return False
            self.session.delete(user)
            self.session.commit()
            return True
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StorageError("delete", str(e)) from e
