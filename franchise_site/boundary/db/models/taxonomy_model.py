"""
Industry and tag ORM models.

Categorisation collections for franchises. Both carry badge colours used
on franchise cards.

Dependencies: sqlalchemy, franchise_site.boundary.db.base
System role: Franchise taxonomy persistence
"""

import enum

from sqlalchemy import Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from franchise_site.boundary.db.base import (
    AuditFieldsMixin,
    Base,
    TimestampMixin,
    UUIDMixin,
    enum_values,
)

DEFAULT_TEXT_COLOR = "#ffffff"


class IndustryIcon(str, enum.Enum):
    """Icon names available for industry badges."""

    BRIEFCASE = "Briefcase"
    DUMBBELL = "Dumbbell"
    COFFEE = "Coffee"
    UTENSILS_CROSSED = "UtensilsCrossed"
    HOME = "Home"
    WRENCH = "Wrench"
    HEART = "Heart"
    STETHOSCOPE = "Stethoscope"
    USERS = "Users"
    ACTIVITY = "Activity"
    SPARKLES = "Sparkles"
    HARD_HAT = "HardHat"
    BOOK_OPEN = "BookOpen"
    BABY = "Baby"
    PAW_PRINT = "PawPrint"
    CAR = "Car"
    SPARKLE = "Sparkle"
    DOLLAR_SIGN = "DollarSign"
    STORE = "Store"
    PACKAGE = "Package"
    PALETTE = "Palette"
    SMARTPHONE = "Smartphone"
    BUILDING2 = "Building2"
    PLANE = "Plane"
    MUSIC = "Music"


class TagType(str, enum.Enum):
    """
    Tag groupings.

    FEATURE: Product feature ("Financing Available")
    INVESTMENT: Investment level ("Low Cost")
    MODEL: Business model ("Home Based")
    LOCATION: Location type
    OTHER: Anything else
    """

    FEATURE = "feature"
    INVESTMENT = "investment"
    MODEL = "model"
    LOCATION = "location"
    OTHER = "other"


class IndustryModel(Base, UUIDMixin, TimestampMixin, AuditFieldsMixin):
    """
    Industry (franchise category).

    Attributes:
        name: Display name (unique)
        slug: URL-friendly name (unique, generated from name when blank)
        description: Optional description
        icon: IndustryIcon value
        color: Badge background colour (hex), None for the default grey
        text_color: Badge text colour (hex)
    """

    __tablename__ = "industries"

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    icon: Mapped[IndustryIcon] = mapped_column(
        Enum(IndustryIcon, native_enum=False, values_callable=enum_values, length=32),
        nullable=False,
        default=IndustryIcon.BRIEFCASE,
    )
    color: Mapped[str | None] = mapped_column(String(32), nullable=True, default=None)
    text_color: Mapped[str] = mapped_column(String(32), nullable=False, default=DEFAULT_TEXT_COLOR)


class TagModel(Base, UUIDMixin, TimestampMixin, AuditFieldsMixin):
    """
    Franchise feature tag.

    Attributes:
        name: Display name (unique)
        slug: URL-friendly name (unique, generated from name when blank)
        type: TagType grouping
        description: Optional description
        color: Badge background colour (hex)
        text_color: Badge text colour (hex)
    """

    __tablename__ = "tags"

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    type: Mapped[TagType] = mapped_column(
        Enum(TagType, native_enum=False, values_callable=enum_values, length=32),
        nullable=False,
        default=TagType.FEATURE,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    color: Mapped[str | None] = mapped_column(String(32), nullable=True, default=None)
    text_color: Mapped[str] = mapped_column(String(32), nullable=False, default=DEFAULT_TEXT_COLOR)
