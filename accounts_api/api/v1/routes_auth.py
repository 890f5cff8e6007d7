# File: accounts_api/api/v1/routes_auth.py

"""
Auth API routes.

Registration is implemented; login is still a placeholder until a session /
token strategy is chosen.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from accounts_api.api.deps import get_registration_service
from accounts_api.core.exceptions import (
    DuplicateUser,
    InternalFault,
    RegistrationError,
    ValidationFault,
)
from accounts_api.schemas.user import RegistrationMessage, UserCreate
from accounts_api.services.registration_service import RegistrationService

router = APIRouter()

_ERROR_STATUS = {
    DuplicateUser: status.HTTP_409_CONFLICT,
    ValidationFault: 422,
    InternalFault: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@router.post("/login", summary="User login (placeholder)")
def login():
    """
    Placeholder login endpoint.

    Currently just raises 501 to avoid implying a working auth system.
    """
    raise HTTPException(
        status_code=status.HTTP_501_NOT_IMPLEMENTED,
        detail="Authentication not implemented yet.",
    )


@router.post(
    "/register",
    response_model=RegistrationMessage,
    status_code=status.HTTP_201_CREATED,
    summary="User registration",
    responses={
        409: {"model": RegistrationMessage, "description": "Email already registered"},
        500: {"model": RegistrationMessage, "description": "Server error"},
    },
)
def register(
    payload: UserCreate,
    service: RegistrationService = Depends(get_registration_service),
):
    """
    Create an account for ``payload.email``.

    The response only acknowledges the account; it never echoes the
    password or its hash.
    """
    try:
        outcome = service.register(payload.name, payload.email, payload.password)
    except RegistrationError as exc:
        return JSONResponse(
            status_code=_ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST),
            content={"msg": exc.message},
        )

    return RegistrationMessage(msg=outcome.msg)
