"""
Contact Book Backend — Auth Service (Sign-Up / Sign-In)
=========================================================

What:  Registers accounts and verifies credentials.
Why:   Keeps validation, hashing and persistence out of the route handlers.
How:   Each operation validates input, runs bcrypt in a worker thread and
       issues exactly one SQL statement.
Who:   Called by the /signup and /signin route handlers.

Sign-In Flow:
    ┌──────────┐    ┌──────────────┐    ┌──────────────┐    ┌──────────┐
    │ Validate │───▶│ SELECT by    │───▶│ bcrypt check │───▶│  200 OK  │
    │  input   │    │ email        │    │ (threadpool) │    │          │
    └──────────┘    └──────────────┘    └──────────────┘    └──────────┘
         │ 400            │ 404                 │ 401

    Sign-in only answers "do these credentials match?". No session or token
    is issued; the caller decides what to do with a successful answer.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from contactbook.exceptions import (
    AuthenticationError,
    ContactBookError,
    DatabaseError,
    NotFoundError,
)
from contactbook.models.account import Account
from contactbook.schemas.account import SignInRequest, SignUpRequest
from contactbook.schemas.common import MessageResponse
from contactbook.security import hash_password, verify_password
from contactbook.services.validation import (
    require_fields,
    validate_email,
    validate_password_strength,
)

logger = logging.getLogger(__name__)


class AuthService:
    """
    Business logic for account registration and credential verification.

    Error Handling Strategy:
        Validation problems raise ValidationError before any I/O. Failures
        inside the database call (including a duplicate email hitting the
        unique constraint) are logged in full and re-raised as a generic
        DatabaseError.
    """

    async def sign_up(self, db: AsyncSession, payload: SignUpRequest) -> MessageResponse:
        """
        Validate, hash and store a new account.

        Raises:
            ValidationError: Missing field, bad email, or weak password (→ 400)
            DatabaseError: Insert failed, e.g. email already registered (→ 500)
        """
        require_fields(name=payload.name, email=payload.email, password=payload.password)
        validate_email(payload.email)
        validate_password_strength(payload.password)

        hashed = await run_in_threadpool(hash_password, payload.password)

        try:
            db.add(Account(name=payload.name, email=payload.email, password=hashed))
            await db.flush()
        except Exception as e:
            logger.error("Signup error for %s: %s", payload.email, str(e), exc_info=True)
            raise DatabaseError(
                message="Error registering user",
                context={"original_error": type(e).__name__},
            )

        logger.info("Registered account %s", payload.email)
        return MessageResponse(message="User registered successfully!")

    async def sign_in(self, db: AsyncSession, payload: SignInRequest) -> MessageResponse:
        """
        Check an email/password pair against the stored hash.

        Raises:
            ValidationError: Missing field or bad email (→ 400)
            NotFoundError: No account with this email (→ 404)
            AuthenticationError: Password does not match (→ 401)
            DatabaseError: Lookup failed (→ 500)
        """
        require_fields(email=payload.email, password=payload.password)
        validate_email(payload.email)

        try:
            result = await db.execute(select(Account).where(Account.email == payload.email))
            account = result.scalars().first()

            if account is None:
                raise NotFoundError(resource="user")

            matches = await run_in_threadpool(verify_password, payload.password, account.password)
        except ContactBookError:
            raise
        except Exception as e:
            logger.error("Signin error for %s: %s", payload.email, str(e), exc_info=True)
            raise DatabaseError(
                message="Error signing in",
                context={"original_error": type(e).__name__},
            )

        if not matches:
            logger.info("Rejected sign-in for %s: password mismatch", payload.email)
            raise AuthenticationError()

        logger.info("Sign-in succeeded for %s", payload.email)
        return MessageResponse(message="Sign in successful!")


# ── Singleton Instance ────────────────────────────────────────────────────
auth_service = AuthService()
