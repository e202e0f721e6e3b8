"""Product model - catalog leaf carrying the variant image maps."""

from typing import TYPE_CHECKING, Any, Optional

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from catalog.models.sub_category import SubCategory


class Product(Base, TimestampMixin):
    """Catalog product.

    `finish_images` and `type_images` are derived summaries of the
    per-variant images, rewritten on every variant save and used as the
    image fallback when a variant row carries no image of its own.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str] = mapped_column(String(220), unique=True, nullable=False, index=True)
    category: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    sub_category_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("sub_categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    material: Mapped[str | None] = mapped_column(Text, nullable=True)
    short_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    long_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    images: Mapped[list[str]] = mapped_column(JSONB, nullable=False, default=list)
    finish_images: Mapped[dict[str, str]] = mapped_column(JSONB, nullable=False, default=dict)
    type_images: Mapped[dict[str, str]] = mapped_column(JSONB, nullable=False, default=dict)
    specifications: Mapped[list[dict[str, Any]]] = mapped_column(
        JSONB, nullable=False, default=list
    )
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    sub_category: Mapped[Optional["SubCategory"]] = relationship(
        "SubCategory",
        lazy="selectin",
    )

    @property
    def sub_category_name(self) -> str:
        """Name of the linked sub-category, or empty string."""
        return self.sub_category.name if self.sub_category else ""

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, slug='{self.slug}')>"
