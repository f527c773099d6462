"""
Contact Book Backend — Account SQLAlchemy Model
=================================================

What:  ORM model for registered users (the "SignUp/SignIn" table).
Why:   Sign-up inserts a row here; sign-in looks one up by email.
Who:   Used by AuthService and by create_tables().

Table Design:
    - The table name is kept from the existing PostgreSQL schema so the
      service can run against databases created before it.
    - email carries a UNIQUE constraint: sign-in looks accounts up by email,
      so two rows with one email would make the lookup ambiguous.
    - password holds a bcrypt hash (salt embedded), never the plaintext.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from contactbook.database import Base


class Account(Base):
    """
    A registered user's credential record.

    Lifecycle:
        Created on sign-up, read on sign-in. Never updated or deleted.
    """

    __tablename__ = "SignUp/SignIn"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(Text, nullable=False)

    email: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        unique=True,
        comment="Sign-in lookup key",
    )

    password: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="bcrypt hash of the password",
    )

    def __repr__(self) -> str:
        # No password hash in reprs; they end up in logs
        return f"<Account(id={self.id}, email='{self.email}')>"
