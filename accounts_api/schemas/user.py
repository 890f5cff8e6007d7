# File: accounts_api/schemas/user.py

from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, EmailStr


@dataclass(frozen=True)
class UserRecord:
    """
    A stored account as the registration service sees it.

    ``id`` is None until the record has been persisted.
    """

    email: str
    password_hash: str = field(repr=False)
    name: Optional[str] = None
    id: Optional[int] = None


class UserCreate(BaseModel):
    name: Optional[str] = None
    email: EmailStr
    password: str


class RegistrationMessage(BaseModel):
    msg: str
