"""
Contact Book Backend — Input Validation Helpers
=================================================

What:  Credential format rules shared by sign-up and sign-in.
Why:   Reject bad input before it costs a bcrypt round or a database query.

Rules:
    Email:    local@domain.tld with no whitespace, exactly one "@" separating
              non-empty parts, at least one "." in the domain part.
    Password: at least 8 characters, with an uppercase letter, a lowercase
              letter, a digit, and a symbol (any non-word character or "_").
"""

import re
from typing import List, Optional

from contactbook.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

PASSWORD_MIN_LENGTH = 8

PASSWORD_RULE_MESSAGE = (
    "Password must be at least 8 characters long, include an uppercase letter, "
    "a lowercase letter, a digit, and a special character"
)

# (description, pattern): ASCII classes, so "é" is not a lowercase letter
# and "٣" is not a digit
_PASSWORD_RULES = [
    ("an uppercase letter", re.compile(r"[A-Z]")),
    ("a lowercase letter", re.compile(r"[a-z]")),
    ("a digit", re.compile(r"[0-9]")),
    ("a special character", re.compile(r"[\W_]", re.ASCII)),
]


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def password_violations(password: str) -> List[str]:
    """
    Lists every password rule `password` breaks; empty when it is strong.

    >>> password_violations("abcdefgh")
    ['an uppercase letter', 'a digit', 'a special character']
    """
    violations = []
    if len(password) < PASSWORD_MIN_LENGTH:
        violations.append(f"at least {PASSWORD_MIN_LENGTH} characters")
    for description, pattern in _PASSWORD_RULES:
        if not pattern.search(password):
            violations.append(description)
    return violations


def is_strong_password(password: str) -> bool:
    return not password_violations(password)


def require_fields(**fields: Optional[str]) -> None:
    """Raises ValidationError unless every keyword argument is a non-empty string."""
    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise ValidationError(
            message="All fields are required",
            context={"missing": missing},
        )


def validate_email(email: str) -> None:
    if not is_valid_email(email):
        raise ValidationError(message="Invalid email format", field="email")


def validate_password_strength(password: str) -> None:
    violations = password_violations(password)
    if violations:
        raise ValidationError(
            message=PASSWORD_RULE_MESSAGE,
            field="password",
            context={"violations": violations},
        )
