"""
Contact Book Backend — Contact Request/Response Schemas
=========================================================

What:  Pydantic models for the /contacts endpoints.
Why:   The wire format uses the camelCase names of the stored columns
       (companyName, createdAt, ...) while Python code uses snake_case.
How:   Every field declares its camelCase alias; populate_by_name lets the
       service construct models with snake_case keyword arguments, and
       FastAPI serializes responses by alias.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ContactCreate(BaseModel):
    """
    What:  Body of POST /contacts.

    No validation beyond "is a string or missing": contacts are stored as
    submitted, empty strings included.
    """
    company_name: Optional[str] = Field(default=None, alias="companyName")
    company_email: Optional[str] = Field(default=None, alias="companyEmail")
    company_phone: Optional[str] = Field(default=None, alias="companyPhone")
    company_address: Optional[str] = Field(default=None, alias="companyAddress")

    model_config = {"populate_by_name": True}


class ContactResponse(BaseModel):
    """
    What:  A full contact row as returned by every /contacts endpoint.

    Example:
        {
            "contact_id": 7,
            "companyName": "Acme",
            "companyEmail": "a@acme.com",
            "companyPhone": "123",
            "companyAddress": "1 Main St",
            "createdAt": "2026-10-19T12:00:00Z",
            "updatedAt": "2026-10-19T12:00:00Z"
        }
    """
    contact_id: int = Field(description="Server-generated identifier")
    company_name: Optional[str] = Field(default=None, alias="companyName")
    company_email: Optional[str] = Field(default=None, alias="companyEmail")
    company_phone: Optional[str] = Field(default=None, alias="companyPhone")
    company_address: Optional[str] = Field(default=None, alias="companyAddress")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    model_config = {"populate_by_name": True}


class ContactDeleteResponse(BaseModel):
    """Confirmation body of DELETE /contacts/{id}: the removed row is echoed back."""
    message: str = Field(default="Contact deleted successfully")
    deleted_contact: ContactResponse = Field(alias="deletedContact")

    model_config = {"populate_by_name": True}
