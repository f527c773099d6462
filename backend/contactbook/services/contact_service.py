"""
Contact Book Backend — Contact Service (CRUD)
===============================================

What:  List, create, fetch, partially update and delete contacts.
Why:   Encapsulates all contact persistence independent of HTTP concerns.
How:   Each method issues exactly one SQL statement; UPDATE and DELETE use
       RETURNING so "did a row match?" and "what does it look like now?"
       are answered by the same statement.
Who:   Called by the /contacts route handlers.

Partial Update Safety:
    Callers name the fields they want to change. Those names are looked up
    in UPDATABLE_FIELDS, an explicit allow-list mapping wire names to model
    attributes; anything else is rejected with a ValidationError before a
    statement is built. Values are always bound parameters.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from contactbook.exceptions import (
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from contactbook.models.contact import Contact
from contactbook.schemas.contact import (
    ContactCreate,
    ContactDeleteResponse,
    ContactResponse,
)

logger = logging.getLogger(__name__)

# Wire name → Contact attribute. The only columns PUT may touch.
UPDATABLE_FIELDS: Dict[str, str] = {
    "companyName": "company_name",
    "companyEmail": "company_email",
    "companyPhone": "company_phone",
    "companyAddress": "company_address",
}

# contact_id is a 4-byte SERIAL on PostgreSQL; nothing outside this range can exist
MAX_CONTACT_ID = 2**31 - 1


def _require_storable_id(contact_id: int) -> None:
    """Ids the column cannot hold match no row; answer 404 without a query."""
    if not 1 <= contact_id <= MAX_CONTACT_ID:
        raise NotFoundError(resource="contact", resource_id=str(contact_id))


def _to_response(contact: Contact) -> ContactResponse:
    return ContactResponse(
        contact_id=contact.contact_id,
        company_name=contact.company_name,
        company_email=contact.company_email,
        company_phone=contact.company_phone,
        company_address=contact.company_address,
        created_at=contact.created_at,
        updated_at=contact.updated_at,
    )


class ContactService:
    """
    Business logic layer for contact operations.

    Error Handling Strategy:
        A missing row raises NotFoundError. Any other failure from the
        database is logged with its traceback and wrapped in DatabaseError
        carrying a generic, operation-specific message.
    """

    async def list_contacts(self, db: AsyncSession) -> List[ContactResponse]:
        """
        Return every contact in database-native order.

        No ORDER BY: callers must not rely on ordering.
        """
        try:
            result = await db.execute(select(Contact))
            contacts = result.scalars().all()
        except Exception as e:
            logger.error("Error fetching contacts: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Error fetching contacts",
                context={"original_error": type(e).__name__},
            )

        logger.debug("Fetched %d contacts", len(contacts))
        return [_to_response(contact) for contact in contacts]

    async def create_contact(self, db: AsyncSession, payload: ContactCreate) -> ContactResponse:
        """
        Insert one contact exactly as submitted and return the stored row.

        flush() sends the INSERT and loads the generated contact_id; the
        commit happens in get_db_session.
        """
        contact = Contact(
            company_name=payload.company_name,
            company_email=payload.company_email,
            company_phone=payload.company_phone,
            company_address=payload.company_address,
        )
        try:
            db.add(contact)
            await db.flush()
        except Exception as e:
            logger.error("Error inserting contact: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Error adding contact",
                context={"original_error": type(e).__name__},
            )

        logger.info("Inserted contact %s", contact.contact_id)
        return _to_response(contact)

    async def get_contact(self, db: AsyncSession, contact_id: int) -> ContactResponse:
        """
        Fetch a single contact by id.

        Raises:
            NotFoundError: No contact with this id (→ 404)
            DatabaseError: Query failed (→ 500)
        """
        _require_storable_id(contact_id)
        try:
            result = await db.execute(select(Contact).where(Contact.contact_id == contact_id))
            contact = result.scalar_one_or_none()
        except Exception as e:
            logger.error("Error fetching contact %s: %s", contact_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Server error",
                context={"contact_id": contact_id, "original_error": type(e).__name__},
            )

        if contact is None:
            raise NotFoundError(resource="contact", resource_id=str(contact_id))
        return _to_response(contact)

    async def update_contact(
        self,
        db: AsyncSession,
        contact_id: int,
        fields: Dict[str, Any],
    ) -> ContactResponse:
        """
        Apply a partial update to one contact.

        Steps:
            1. Reject an empty field map
            2. Reject names outside UPDATABLE_FIELDS
            3. Reject values that are not strings or null
            4. Ids outside 1..MAX_CONTACT_ID are not found without a query
            5. UPDATE ... SET <allow-listed columns>, updatedAt = now
               WHERE contact_id = :id RETURNING *

        Raises:
            ValidationError: Empty, unknown or badly typed fields (→ 400)
            NotFoundError: No contact with this id (→ 404)
            DatabaseError: Statement failed (→ 500)
        """
        values = self._build_update_values(fields)
        _require_storable_id(contact_id)
        values[Contact.updated_at] = datetime.now(timezone.utc)

        try:
            result = await db.execute(
                update(Contact)
                .where(Contact.contact_id == contact_id)
                .values(values)
                .returning(Contact)
            )
            contact = result.scalar_one_or_none()
        except Exception as e:
            logger.error("Error updating contact %s: %s", contact_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Server error",
                context={"contact_id": contact_id, "original_error": type(e).__name__},
            )

        if contact is None:
            raise NotFoundError(resource="contact", resource_id=str(contact_id))

        logger.info("Updated contact %s: %s", contact_id, ", ".join(sorted(fields)))
        return _to_response(contact)

    async def delete_contact(self, db: AsyncSession, contact_id: int) -> ContactDeleteResponse:
        """
        Permanently delete one contact and echo it back.

        Raises:
            NotFoundError: No contact with this id (→ 404)
            DatabaseError: Statement failed (→ 500)
        """
        _require_storable_id(contact_id)
        try:
            result = await db.execute(
                delete(Contact)
                .where(Contact.contact_id == contact_id)
                .returning(Contact)
            )
            contact = result.scalar_one_or_none()
        except Exception as e:
            logger.error("Error deleting contact %s: %s", contact_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Error deleting contact",
                context={"contact_id": contact_id, "original_error": type(e).__name__},
            )

        if contact is None:
            raise NotFoundError(resource="contact", resource_id=str(contact_id))

        logger.info("Deleted contact %s", contact_id)
        return ContactDeleteResponse(
            message="Contact deleted successfully",
            deleted_contact=_to_response(contact),
        )

    @staticmethod
    def _build_update_values(fields: Dict[str, Any]) -> Dict[Any, Any]:
        """Maps allow-listed wire names to Contact columns; raises on anything else."""
        if not fields:
            raise ValidationError(message="No fields provided for update")

        unknown = sorted(key for key in fields if key not in UPDATABLE_FIELDS)
        if unknown:
            raise ValidationError(
                message=f"Unknown or read-only fields: {', '.join(unknown)}",
                context={"rejected": unknown, "allowed": list(UPDATABLE_FIELDS)},
            )

        badly_typed = sorted(
            key for key, value in fields.items()
            if value is not None and not isinstance(value, str)
        )
        if badly_typed:
            raise ValidationError(
                message=f"Field values must be strings or null: {', '.join(badly_typed)}",
                context={"rejected": badly_typed},
            )

        return {
            getattr(Contact, UPDATABLE_FIELDS[key]): value
            for key, value in fields.items()
        }


# ── Singleton Instance ────────────────────────────────────────────────────
contact_service = ContactService()
