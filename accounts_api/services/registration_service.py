# File: accounts_api/services/registration_service.py

"""
Account registration.

``RegistrationService.register`` is the only way a user row gets created:
  - validate and normalise the submitted fields
  - reject the request if the email is already taken
  - hash the password with bcrypt
  - save the record (last step, so earlier failures leave nothing behind)

Emails are compared case-insensitively: they are trimmed and lower-cased
before the lookup and before they are stored.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from accounts_api.core.exceptions import (
    DuplicateUser,
    InternalFault,
    RegistrationError,
    ValidationFault,
)
from accounts_api.core.security import MAX_PASSWORD_BYTES, MIN_WORK_FACTOR, PasswordHasher
from accounts_api.schemas.user import UserRecord
from accounts_api.services.user_repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserDraft:
    name: Optional[str]
    email: str
    password: str

    def __repr__(self) -> str:
        return f"UserDraft(name={self.name!r}, email={self.email!r}, password='***')"


@dataclass(frozen=True)
class RegistrationOutcome:
    msg: str
    email: str


def normalize_email(email: str) -> str:
    return email.strip().lower()


def validate_registration(
    name: Optional[str],
    email: Optional[str],
    password: Optional[str],
) -> UserDraft:
    """
    Check the required fields and return them normalised.

    Raises ValidationFault for a missing email or password, or a password
    bcrypt cannot take whole.
    """
    if email is None or not email.strip():
        raise ValidationFault("email is required")
    if not password:
        raise ValidationFault("password is required")
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationFault(f"password must be at most {MAX_PASSWORD_BYTES} bytes")

    clean_name = name.strip() if name is not None else None
    return UserDraft(
        name=clean_name or None,
        email=normalize_email(email),
        password=password,
    )


class RegistrationService:
    def __init__(
        self,
        repository: UserRepository,
        hasher: PasswordHasher,
        *,
        work_factor: int,
    ):
        if work_factor < MIN_WORK_FACTOR:
            raise ValueError(f"work_factor must be at least {MIN_WORK_FACTOR}")
        self.repository = repository
        self.hasher = hasher
        self.work_factor = work_factor

    def register(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> RegistrationOutcome:
        draft = validate_registration(name, email, password)

        try:
            if self.repository.find_one(draft.email) is not None:
                logger.info("Registration rejected, %s already exists", draft.email)
                raise DuplicateUser()

            password_hash = self.hasher.hash(draft.password, self.work_factor)
            saved = self.repository.save(
                UserRecord(
                    name=draft.name,
                    email=draft.email,
                    password_hash=password_hash,
                )
            )
        except RegistrationError:
            raise
        except Exception as exc:
            logger.exception("Registration failed for %s", draft.email)
            raise InternalFault() from exc

        logger.info("Registered user %s (id=%s)", saved.email, saved.id)
        return RegistrationOutcome(msg="New user registered", email=saved.email)
