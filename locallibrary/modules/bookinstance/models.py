"""SQLAlchemy models for book instance entities."""

from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ...infrastructure.database.models import TimestampMixin
from ...infrastructure.database.session import Base

if TYPE_CHECKING:
    from ..book.models import Book


class BookInstanceStatus(str, Enum):
    """Lending status of a single copy."""

    AVAILABLE = "Available"
    MAINTENANCE = "Maintenance"
    LOANED = "Loaned"
    RESERVED = "Reserved"


class BookInstance(Base, TimestampMixin):
    """One physical, lendable copy of a book."""

    __tablename__ = "book_instances"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    book_id: Mapped[int] = mapped_column(Integer, ForeignKey("books.id", ondelete="CASCADE"), index=True)
    imprint: Mapped[str] = mapped_column(Text)
    status: Mapped[str] = mapped_column(String(20), default=BookInstanceStatus.MAINTENANCE.value, index=True)
    due_back: Mapped[Optional[date]] = mapped_column(Date, default=None)

    book: Mapped["Book"] = relationship(back_populates="instances", init=False, repr=False)
