"""
User ORM model.

Admin users who log into the CMS API.

Dependencies: sqlalchemy, franchise_site.boundary.db.base
System role: Admin account persistence
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from franchise_site.boundary.db.base import Base, TimestampMixin, UUIDMixin


class UserModel(Base, UUIDMixin, TimestampMixin):
    """
    Admin user.

    Attributes:
        id: UUID primary key (auto-generated)
        email: Login email, stored lower-cased (unique)
        name: Display name
        password_hash: bcrypt hash of the password
        is_active: Inactive users cannot log in
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True, index=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
