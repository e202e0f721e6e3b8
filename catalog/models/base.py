"""Declarative base shared by the catalog tables."""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    """Metadata holder for categories, sub-categories, products and variant rows."""


class TimestampMixin:
    """created_at / updated_at columns for the editable catalog records.

    Variant rows do not carry them: they are deleted and re-inserted on
    every save.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True,
    )
