# File: accounts_api/api/deps.py

from collections.abc import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from accounts_api.core.config import settings
from accounts_api.core.security import BcryptHasher
from accounts_api.db.session import SessionLocal
from accounts_api.services.registration_service import RegistrationService
from accounts_api.services.user_repository import SqlAlchemyUserRepository


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_registration_service(db: Session = Depends(get_db)) -> RegistrationService:
    """
    Build a RegistrationService bound to the request's session.
    """
    return RegistrationService(
        SqlAlchemyUserRepository(db),
        BcryptHasher(),
        work_factor=settings.bcrypt_rounds,
    )
