"""Taxonomy classification - which variant discipline a product follows.

FITTING products (hinges, handles, channels, ...) are authored as size
groups each carrying its own finishes. FASTENER products (screws, bolts,
...) are authored as independent size, type and finish axes.
"""

from enum import Enum


class Taxonomy(str, Enum):
    """Variant discipline of a product."""

    FITTING = "FITTING"
    FASTENER = "FASTENER"


FITTING_KEYWORDS: tuple[str, ...] = (
    "fitting",
    "channel",
    "hinge",
    "handle",
    "lock",
    "hardware",
)


class TaxonomyMismatchError(ValueError):
    """Raised when an authoring state is handled under the wrong taxonomy."""

    def __init__(self, expected: Taxonomy, actual: Taxonomy) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Authoring state is {actual.value} but product taxonomy is {expected.value}"
        )


def classify(category_name: str | None, sub_category_name: str | None) -> Taxonomy:
    """Classify a product from its category and sub-category names.

    Case-insensitive substring match of FITTING_KEYWORDS against both
    names. Anything that matches nothing is a FASTENER.

    Args:
        category_name: Category name (may be empty or None)
        sub_category_name: Sub-category name (may be empty or None)

    Returns:
        Taxonomy.FITTING or Taxonomy.FASTENER
    """
    haystacks = ((category_name or "").lower(), (sub_category_name or "").lower())

    for keyword in FITTING_KEYWORDS:
        if any(keyword in text for text in haystacks):
            return Taxonomy.FITTING

    return Taxonomy.FASTENER
