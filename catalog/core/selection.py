"""Storefront selection cascade: diameter -> length -> finish.

Given every variant row of one product, computes the options a buyer can
pick at each stage and keeps the selection consistent as it changes.
All methods are pure; an empty product simply yields empty option lists.
"""

import re
from dataclasses import dataclass, replace

from catalog.core.variants import VariantRow, finish_image_map

_FIRST_NUMBER = re.compile(r"\d+(?:\.\d+)?")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _dedupe(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


def diameter_sort_key(value: str) -> tuple[int, float]:
    """Sort key for diameters: the first number in the text ("M4" -> 4).

    Values without any number sort after all numeric ones.
    """
    match = _FIRST_NUMBER.search(value)
    if match is None:
        return (1, 0.0)
    return (0, float(match.group()))


def length_sort_key(value: str) -> tuple[int, int]:
    """Sort key for lengths: integer parse of the leading digits.

    Values that do not start with an integer sort last.
    """
    match = _LEADING_INT.match(value)
    if match is None:
        return (1, 0)
    return (0, int(match.group(1)))


def explode_lengths(length: str) -> list[str]:
    """Split a stored length into its individual values ("10, 12" -> ["10", "12"])."""
    if "," in length:
        return [piece.strip() for piece in length.split(",") if piece.strip()]
    return [length] if length else []


@dataclass(frozen=True)
class Selection:
    """Buyer's current choice on the product configurator.

    Attributes:
        diameter: Selected diameter ("" when unset)
        length: Selected length ("" when unset)
        finish: Selected finish ("" when unset)
        image_override: Finish image shown ahead of the default gallery
        image_index: Position of the active image in the displayed gallery
    """

    diameter: str = ""
    length: str = ""
    finish: str = ""
    image_override: str | None = None
    image_index: int = 0


class SelectionCascade:
    """Option computation and selection transitions for one product."""

    def __init__(
        self,
        rows: list[VariantRow],
        finish_images: dict[str, str] | None = None,
        default_images: list[str] | tuple[str, ...] = (),
    ) -> None:
        """Initialize the cascade.

        Args:
            rows: All variant rows of the product
            finish_images: Product-level finish image map
            default_images: Default gallery, in display order
        """
        self._rows = tuple(rows)
        self._finish_images = finish_image_map(list(rows), finish_images)
        self._default_images = tuple(default_images)

        diameters = _dedupe([row.diameter for row in self._rows if row.diameter])
        self._diameters = sorted(diameters, key=diameter_sort_key)

    @property
    def finish_images(self) -> dict[str, str]:
        return dict(self._finish_images)

    @property
    def default_images(self) -> list[str]:
        return list(self._default_images)

    # =========================================================================
    # Options
    # =========================================================================

    def unique_diameters(self) -> list[str]:
        """Distinct non-empty diameters in ascending numeric order."""
        return list(self._diameters)

    def available_lengths(self, diameter: str) -> list[str]:
        """Distinct lengths offered for a diameter, comma lists exploded."""
        if not diameter:
            return []

        lengths: list[str] = []
        for row in self._rows:
            if row.diameter == diameter:
                lengths.extend(explode_lengths(row.length))

        return sorted(_dedupe(lengths), key=length_sort_key)

    def available_finishes(self, diameter: str, length: str) -> list[str]:
        """Distinct named finishes offered for a diameter/length pair.

        A comma-joined stored length matches when it contains the selected
        length as a substring.
        """
        finishes = [
            row.finish
            for row in self._rows
            if self._offers_length(row, diameter, length) and row.finish
        ]
        return _dedupe(finishes)

    def matching_rows(self, selection: Selection) -> list[VariantRow]:
        """Rows compatible with the selection.

        The selected length must be one of the row's exploded lengths.
        Rows with no finish still match while no finish is selected.
        """
        return [
            row
            for row in self._rows
            if self._has_length(row, selection.diameter, selection.length)
            and (not selection.finish or row.finish == selection.finish)
        ]

    def is_orderable(self, selection: Selection) -> bool:
        """Whether the selection pins down a concrete configuration."""
        if not selection.diameter:
            return False
        if self.available_lengths(selection.diameter) and not selection.length:
            return False
        if self.available_finishes(selection.diameter, selection.length) and not selection.finish:
            return False
        return bool(self.matching_rows(selection))

    @staticmethod
    def _offers_length(row: VariantRow, diameter: str, length: str) -> bool:
        # Substring match on the stored text: "12" is offered by "10,12,16"
        if row.diameter != diameter:
            return False
        return row.length == length or (bool(row.length) and length in row.length)

    @staticmethod
    def _has_length(row: VariantRow, diameter: str, length: str) -> bool:
        if row.diameter != diameter:
            return False
        if not row.length:
            return not length
        return length in explode_lengths(row.length)

    # =========================================================================
    # Transitions
    # =========================================================================

    def initial_selection(self) -> Selection:
        """Selection on first load: smallest diameter and its first length."""
        diameter = self._diameters[0] if self._diameters else ""
        return self._reconcile(Selection(diameter=diameter))

    def select_diameter(self, selection: Selection, diameter: str) -> Selection:
        """Change the diameter; the length is re-resolved in the same step."""
        return self._reconcile(replace(selection, diameter=diameter))

    def select_length(self, selection: Selection, length: str) -> Selection:
        """Change the length (falls back to the first available one)."""
        return self._reconcile(replace(selection, length=length))

    def select_finish(self, selection: Selection, finish: str) -> Selection:
        """Pick a finish and resolve the gallery image it brings.

        A finish with a mapped image puts that image first in the gallery
        and moves the gallery back to position 0; otherwise any previous
        override is dropped.
        """
        image = self._finish_images.get(finish)
        return replace(selection, finish=finish, image_override=image or None, image_index=0)

    def select_image(self, selection: Selection, index: int) -> Selection:
        """Move the gallery to `index`, clamped to the displayed images."""
        last = max(len(self.display_images(selection)) - 1, 0)
        return replace(selection, image_index=min(max(index, 0), last))

    def _reconcile(self, selection: Selection) -> Selection:
        lengths = self.available_lengths(selection.diameter)
        if selection.length not in lengths:
            selection = replace(selection, length=lengths[0] if lengths else "")

        if selection.finish and selection.finish not in self.available_finishes(
            selection.diameter, selection.length
        ):
            selection = replace(selection, finish="", image_override=None, image_index=0)

        return selection

    # =========================================================================
    # Gallery
    # =========================================================================

    def display_images(self, selection: Selection) -> list[str]:
        """Gallery in display order, finish override first when present."""
        if selection.image_override:
            return [selection.image_override, *self._default_images]
        return list(self._default_images)

    def current_image(self, selection: Selection) -> str | None:
        images = self.display_images(selection)
        if not images:
            return None
        return images[min(selection.image_index, len(images) - 1)]
