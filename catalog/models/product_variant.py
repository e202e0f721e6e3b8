"""ProductVariant model - one purchasable size/type/finish combination."""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog.models.base import Base


class ProductVariant(Base):
    """Flat variant row.

    `diameter` and `length` are free text to keep supplier formatting;
    `length` may hold a comma-joined list ("10,12,16"). The surrogate `id`
    exists for the ORM only; rows are always replaced as a whole set per
    product, never patched individually.
    """

    __tablename__ = "product_variants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    diameter: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    length: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    unit: Mapped[str] = mapped_column(String(10), nullable=False, default="mm")
    type: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    finish: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    image: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<ProductVariant(id={self.id}, product_id={self.product_id}, "
            f"diameter='{self.diameter}', length='{self.length}', finish='{self.finish}')>"
        )
