# File: accounts_api/services/user_repository.py

"""
Persistence for user records.

The registration service only needs two calls: look a user up by email and
save a new one. ``SqlAlchemyUserRepository`` backs them with the ``users``
table, whose unique index on ``email`` rejects duplicates that slip past the
lookup when two registrations race.
"""

import logging
from typing import Optional, Protocol

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from accounts_api.core.exceptions import DuplicateUser
from accounts_api.models.user import User
from accounts_api.schemas.user import UserRecord

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    def find_one(self, email: str) -> Optional[UserRecord]:
        ...

    def save(self, record: UserRecord) -> UserRecord:
        ...


def _to_record(row: User) -> UserRecord:
    return UserRecord(
        id=row.id,
        name=row.name,
        email=row.email,
        password_hash=row.password_hash,
    )


class SqlAlchemyUserRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_one(self, email: str) -> Optional[UserRecord]:
        row = self.db.execute(
            select(User).where(User.email == email)
        ).scalar_one_or_none()
        return _to_record(row) if row is not None else None

    def save(self, record: UserRecord) -> UserRecord:
        """
        Insert ``record`` and commit.

        Raises DuplicateUser when the unique index on email rejects the row.
        Other database errors are rolled back and re-raised.
        """
        row = User(
            name=record.name,
            email=record.email,
            password_hash=record.password_hash,
        )
        self.db.add(row)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.info("Unique index rejected a second account for %s", record.email)
            raise DuplicateUser() from exc
        except SQLAlchemyError:
            self.db.rollback()
            raise

        self.db.refresh(row)
        return _to_record(row)
