"""
Contact submission ORM model.

Stores every contact form submission for follow-up in the admin.

Dependencies: sqlalchemy, franchise_site.boundary.db.base
System role: Lead persistence
"""

import enum

from sqlalchemy import JSON, Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from franchise_site.boundary.db.base import Base, TimestampMixin, UUIDMixin, enum_values


class SubmissionStatus(str, enum.Enum):
    """Admin triage state of a submission."""

    NEW = "new"
    READ = "read"
    ARCHIVED = "archived"


class ContactSubmissionModel(Base, UUIDMixin, TimestampMixin):
    """
    Contact form submission.

    Attributes:
        name, email, phone, company, subject, message: Submitted values
        ip_address: Requester IP
        status: SubmissionStatus (default new)
        extra_fields: Additional labelled form fields ``[{"label", "value"}]``
    """

    __tablename__ = "contact_submissions"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    company: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    subject: Mapped[str | None] = mapped_column(String(512), nullable=True, default=None)
    message: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    ip_address: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    status: Mapped[SubmissionStatus] = mapped_column(
        Enum(SubmissionStatus, native_enum=False, values_callable=enum_values, length=16),
        nullable=False,
        default=SubmissionStatus.NEW,
    )
    extra_fields: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
