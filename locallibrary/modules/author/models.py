"""SQLAlchemy models for author entities."""

from datetime import date
from typing import Optional

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ...infrastructure.database.models import TimestampMixin
from ...infrastructure.database.session import Base


class Author(Base, TimestampMixin):
    """A person credited with one or more books."""

    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    first_name: Mapped[str] = mapped_column(String(100))
    family_name: Mapped[str] = mapped_column(String(100), index=True)
    date_of_birth: Mapped[Optional[date]] = mapped_column(Date, default=None)
    date_of_death: Mapped[Optional[date]] = mapped_column(Date, default=None)
