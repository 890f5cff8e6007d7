# File: accounts_api/core/exceptions.py

"""
Registration error types.

Each carries the message that is safe to send back to the client.
"""


class RegistrationError(Exception):
    """Base class for registration failures."""

    default_message = "registration failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class DuplicateUser(RegistrationError):
    """The email is already registered."""

    default_message = "User already exist"


class ValidationFault(RegistrationError):
    """A required field is missing or unusable."""

    default_message = "Invalid registration data"


class InternalFault(RegistrationError):
    """Hashing or persistence failed. The message never carries internals."""

    default_message = "server error"
