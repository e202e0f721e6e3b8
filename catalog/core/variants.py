"""Flat variant rows and the image lookup tables derived from them."""

from dataclasses import dataclass, field
from typing import Literal

Unit = Literal["mm", "inch"]

DEFAULT_UNIT: Unit = "mm"


@dataclass(frozen=True)
class VariantRow:
    """One concrete, orderable size/type/finish combination.

    `diameter` and `length` are free text. `length` may be a comma-joined
    list of lengths sharing the same row ("10,12,16").
    """

    diameter: str = ""
    length: str = ""
    unit: Unit = DEFAULT_UNIT
    type: str = ""
    finish: str = ""
    image: str | None = None
    product_id: int | None = None

    @property
    def identity(self) -> tuple[str, str, str, str, str]:
        """Natural key of the row within its product."""
        return (self.diameter, self.length, self.unit, self.type, self.finish)


@dataclass(frozen=True)
class ImageMaps:
    """Derived `name -> image URL` tables for finishes and types."""

    finish_images: dict[str, str] = field(default_factory=dict)
    type_images: dict[str, str] = field(default_factory=dict)


def finish_image_map(
    rows: list[VariantRow],
    stored: dict[str, str] | None = None,
) -> dict[str, str]:
    """Build the finish image lookup for a product.

    Entries of the stored product-level map win; finishes missing from
    it take the first non-empty image found on one of their rows.

    Args:
        rows: Variant rows of the product
        stored: Product-level finish image map, if any

    Returns:
        Mapping of finish name to image URL
    """
    images = {name: url for name, url in (stored or {}).items() if name and url}

    for row in rows:
        if row.finish and row.image and row.finish not in images:
            images[row.finish] = row.image

    return images
