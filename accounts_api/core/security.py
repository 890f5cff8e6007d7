# File: accounts_api/core/security.py

"""
Password hashing for the accounts API.

bcrypt salts every hash on its own and stores the salt and cost inside the
hash text, so verification only needs the plaintext and the stored string.

Session / token issuance is not handled here; the login route is still a
placeholder.
"""

from typing import Protocol

import bcrypt

# Lowest bcrypt cost the service will accept for stored credentials.
MIN_WORK_FACTOR = 10
DEFAULT_WORK_FACTOR = 12

# bcrypt only consumes the first 72 bytes of the secret.
MAX_PASSWORD_BYTES = 72


class PasswordHasher(Protocol):
    def hash(self, plaintext: str, work_factor: int) -> str:
        ...

    def compare(self, plaintext: str, hash_text: str) -> bool:
        ...


class BcryptHasher:
    """
    bcrypt implementation of ``PasswordHasher``.
    """

    def hash(self, plaintext: str, work_factor: int) -> str:
        salt = bcrypt.gensalt(rounds=work_factor)
        return bcrypt.hashpw(plaintext.encode("utf-8"), salt).decode("utf-8")

    def compare(self, plaintext: str, hash_text: str) -> bool:
        """Constant-time check against a stored bcrypt hash."""
        try:
            return bcrypt.checkpw(plaintext.encode("utf-8"), hash_text.encode("utf-8"))
        except (ValueError, TypeError):
            return False
