"""
Contact Book Backend — Custom Exception Hierarchy
===================================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Each failure class maps to its own HTTP status code and is reported
       distinctly: bad input, missing entity, wrong password, store failure.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    ContactBookError (base)
    ├── ValidationError       → 400 Bad Request (client can fix)
    ├── AuthenticationError   → 401 Unauthorized
    ├── NotFoundError         → 404 Not Found
    └── DatabaseError         → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class ContactBookError(Exception):
    """
    Base exception for all Contact Book application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned for server errors)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ContactBookError):
    """
    Raised when client input fails validation.

    When:    Missing required fields, malformed email, weak password,
             unknown or empty update fields.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Invalid email format",
            "details": {"field": "email"}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class AuthenticationError(ContactBookError):
    """
    Raised when a supplied password does not match the stored hash.

    HTTP:    401 Unauthorized
    Kept separate from NotFoundError so an unknown email and a wrong
    password are reported with different status codes.
    """

    def __init__(
        self,
        message: str = "Invalid credentials",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(ContactBookError):
    """
    Raised when a requested resource does not exist.

    When:    Sign-in for an unknown email; GET/PUT/DELETE /contacts/{id}
             for an id that matches no row.
    HTTP:    404 Not Found

    SQLAlchemy returns None (or an empty RETURNING set) for missing rows;
    the service layer converts that into this exception.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(ContactBookError):
    """
    Raised when database operations fail unexpectedly.

    When:    Connection lost, constraint violation (e.g. duplicate email),
             query failure.
    HTTP:    500 Internal Server Error

    Security Note:
        The message is always generic. The original exception type and
        text go into `context`, which is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
