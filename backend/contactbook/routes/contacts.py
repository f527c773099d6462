"""
Contact Book Backend — Contact Route Handlers
==============================================

What:  CRUD endpoints for company contacts.
Who:   Called by the frontend contact list and edit views.

Identifiers:
    {contact_id} is an integer path parameter. A non-integer value fails
    request validation (→ 400) before any query runs. An integer the
    contact_id column cannot hold is answered with 404, also without a query.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from contactbook.database import get_db_session
from contactbook.schemas.common import ErrorResponse
from contactbook.schemas.contact import (
    ContactCreate,
    ContactDeleteResponse,
    ContactResponse,
)
from contactbook.services.contact_service import contact_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contacts", tags=["Contacts"])


@router.get(
    "",
    response_model=List[ContactResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all contacts",
)
async def list_contacts(
    db: AsyncSession = Depends(get_db_session),
) -> List[ContactResponse]:
    """Returns every contact. Order is whatever the database yields."""
    return await contact_service.list_contacts(db=db)


@router.post(
    "",
    status_code=201,
    response_model=ContactResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Create a contact",
)
async def create_contact(
    payload: ContactCreate,
    db: AsyncSession = Depends(get_db_session),
) -> ContactResponse:
    return await contact_service.create_contact(db=db, payload=payload)


@router.get(
    "/{contact_id}",
    response_model=ContactResponse,
    responses={
        404: {"description": "Contact not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a contact by ID",
)
async def get_contact(
    contact_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> ContactResponse:
    return await contact_service.get_contact(db=db, contact_id=contact_id)


@router.put(
    "/{contact_id}",
    response_model=ContactResponse,
    responses={
        400: {"description": "Empty update or non-updatable field", "model": ErrorResponse},
        404: {"description": "Contact not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Partially update a contact",
    description=(
        "Send any subset of companyName, companyEmail, companyPhone and "
        "companyAddress. Other keys are rejected."
    ),
)
async def update_contact(
    contact_id: int,
    fields: Dict[str, Any] = Body(..., examples=[{"companyPhone": "999"}]),
    db: AsyncSession = Depends(get_db_session),
) -> ContactResponse:
    return await contact_service.update_contact(db=db, contact_id=contact_id, fields=fields)


@router.delete(
    "/{contact_id}",
    response_model=ContactDeleteResponse,
    responses={
        404: {"description": "Contact not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a contact",
)
async def delete_contact(
    contact_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> ContactDeleteResponse:
    """Hard delete. The removed row is returned under `deletedContact`."""
    return await contact_service.delete_contact(db=db, contact_id=contact_id)
