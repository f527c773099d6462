"""
Contact Book Backend — Credential Request Schemas
===================================================

What:  Request bodies for POST /signup and POST /signin.
Why:   Fields are optional at the schema level on purpose: presence, email
       format and password strength are checked by AuthService so a failure
       comes back as a 400 with a specific message instead of FastAPI's
       generic 422 field report.
"""

from typing import Optional

from pydantic import BaseModel, Field


class SignUpRequest(BaseModel):
    name: Optional[str] = Field(default=None, description="Display name")
    email: Optional[str] = Field(default=None, description="Unique sign-in email")
    password: Optional[str] = Field(
        default=None,
        description=(
            "At least 8 characters with an uppercase letter, a lowercase letter, "
            "a digit and a special character"
        ),
    )


class SignInRequest(BaseModel):
    email: Optional[str] = Field(default=None, description="Registered email")
    password: Optional[str] = Field(default=None, description="Account password")
