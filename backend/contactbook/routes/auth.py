"""
Contact Book Backend — Credential Route Handlers
==================================================

What:  POST /signup and POST /signin.
Who:   Called by the frontend sign-up and sign-in forms.

Sign-in returns a plain acknowledgement; the form redirects on 200.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from contactbook.database import get_db_session
from contactbook.schemas.account import SignInRequest, SignUpRequest
from contactbook.schemas.common import ErrorResponse, MessageResponse
from contactbook.services.auth_service import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


@router.post(
    "/signup",
    status_code=201,
    response_model=MessageResponse,
    responses={
        201: {"description": "Account created", "model": MessageResponse},
        400: {"description": "Missing field, bad email or weak password", "model": ErrorResponse},
        500: {"description": "Account could not be stored", "model": ErrorResponse},
    },
    summary="Register a new account",
)
async def sign_up(
    payload: SignUpRequest,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    """
    Register an account.

    The password must be at least 8 characters with an uppercase letter,
    a lowercase letter, a digit and a special character. It is stored as a
    bcrypt hash.
    """
    return await auth_service.sign_up(db=db, payload=payload)


@router.post(
    "/signin",
    response_model=MessageResponse,
    responses={
        200: {"description": "Credentials match", "model": MessageResponse},
        400: {"description": "Missing field or bad email", "model": ErrorResponse},
        401: {"description": "Wrong password", "model": ErrorResponse},
        404: {"description": "No account with this email", "model": ErrorResponse},
        500: {"description": "Lookup failed", "model": ErrorResponse},
    },
    summary="Verify account credentials",
)
async def sign_in(
    payload: SignInRequest,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await auth_service.sign_in(db=db, payload=payload)
