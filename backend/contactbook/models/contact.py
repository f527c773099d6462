"""
Contact Book Backend — Contact SQLAlchemy Model
=================================================

What:  ORM model for company contacts (the "ContactList" table).
Why:   Backs the /contacts CRUD endpoints.
Who:   Used by ContactService and by create_tables().

Table Design Rationale:
    - Table and column names ("ContactList", "companyName", ...) match the
      existing PostgreSQL schema; Python attributes use snake_case and map
      onto them explicitly.
    - All four company fields are free text and nullable: contacts are
      stored exactly as submitted.
    - contact_id is generated by the database (SERIAL on PostgreSQL).
    - Timestamps are UTC with time zone.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from contactbook.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Contact(Base):
    """
    A company contact record, globally visible (no ownership).

    Lifecycle:
        1. Created via POST /contacts
        2. Partially updated via PUT /contacts/{id} (updated_at refreshed)
        3. Removed via DELETE /contacts/{id} (hard delete)
    """

    __tablename__ = "ContactList"

    contact_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    company_name: Mapped[Optional[str]] = mapped_column("companyName", Text, nullable=True)
    company_email: Mapped[Optional[str]] = mapped_column("companyEmail", Text, nullable=True)
    company_phone: Mapped[Optional[str]] = mapped_column("companyPhone", Text, nullable=True)
    company_address: Mapped[Optional[str]] = mapped_column("companyAddress", Text, nullable=True)

    created_at: Mapped[Optional[datetime]] = mapped_column(
        "createdAt",
        DateTime(timezone=True),
        nullable=True,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    # Set explicitly by ContactService on every update
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=True,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<Contact(contact_id={self.contact_id}, company_name='{self.company_name}')>"
