"""Category model - catalog taxonomy root."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog.models.base import Base, TimestampMixin


class Category(Base, TimestampMixin):
    """Top-level catalog category (Screws, Hinges, Channels, ...).

    The category name is copied onto each product; taxonomy
    classification reads it from there.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), unique=True, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}')>"
