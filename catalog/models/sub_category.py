"""SubCategory model - catalog taxonomy level 2."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from catalog.models.category import Category


class SubCategory(Base, TimestampMixin):
    """Sub-category within a category (Drywall Screws, Soft-Close Hinges, ...)."""

    __tablename__ = "sub_categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)

    # Relationships
    category: Mapped["Category"] = relationship(
        "Category",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<SubCategory(id={self.id}, name='{self.name}')>"
