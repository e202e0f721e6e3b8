"""Read path: flat variant rows -> authoring state for the editor."""

from catalog.core.authoring import (
    AuthoringState,
    FastenerState,
    Finish,
    FittingFinish,
    FittingState,
    Size,
    TypeOption,
    VariantGroup,
    empty_state,
)
from catalog.core.taxonomy import Taxonomy
from catalog.core.variants import VariantRow

# Group label for rows that carry neither a diameter nor a length
STANDARD_SIZE_LABEL = "Standard"


def reconstruct(
    taxonomy: Taxonomy,
    rows: list[VariantRow],
    finish_images: dict[str, str] | None = None,
    type_images: dict[str, str] | None = None,
) -> AuthoringState:
    """Rebuild the taxonomy-specific authoring state from stored rows.

    Args:
        taxonomy: Taxonomy computed for the product being loaded
        rows: Stored variant rows of the product
        finish_images: Product-level finish image map (fallback source)
        type_images: Product-level type image map (fallback source)

    Returns:
        FastenerState or FittingState matching `taxonomy`
    """
    finish_images = finish_images or {}
    type_images = type_images or {}

    if taxonomy is Taxonomy.FITTING:
        return _reconstruct_fitting(rows, finish_images)
    if taxonomy is Taxonomy.FASTENER:
        return _reconstruct_fastener(rows, finish_images, type_images)

    raise ValueError(f"Unsupported taxonomy: {taxonomy!r}")


def _reconstruct_fastener(
    rows: list[VariantRow],
    finish_images: dict[str, str],
    type_images: dict[str, str],
) -> FastenerState:
    """Three independent de-duplication passes over the rows."""
    # Sizes keyed by (diameter, length); unit is not part of the key, so
    # rows that differ only by unit collapse and the first unit seen wins.
    sizes: dict[tuple[str, str], Size] = {}
    for row in rows:
        key = (row.diameter, row.length)
        if (row.diameter or row.length) and key not in sizes:
            sizes[key] = Size(diameter=row.diameter, length=row.length, unit=row.unit)

    finish_row_images: dict[str, str] = {}
    for row in rows:
        if not row.finish:
            continue
        finish_row_images.setdefault(row.finish, "")
        if row.image and not finish_row_images[row.finish]:
            finish_row_images[row.finish] = row.image
    finishes = tuple(
        Finish(name=name, image=image or finish_images.get(name, ""))
        for name, image in finish_row_images.items()
    )

    # Types from rows first, then image-map keys no row mentions anymore
    type_names: dict[str, None] = {}
    for row in rows:
        if row.type:
            type_names.setdefault(row.type, None)
    for name in type_images:
        if name:
            type_names.setdefault(name, None)
    types = tuple(
        TypeOption(name=name, image=type_images.get(name, "")) for name in type_names
    )

    return FastenerState(
        sizes=tuple(sizes.values()) or (Size(),),
        finishes=finishes or (Finish(),),
        types=types or (TypeOption(),),
    )


def _reconstruct_fitting(
    rows: list[VariantRow],
    finish_images: dict[str, str],
) -> FittingState:
    """Group rows by size label, one finish entry per row."""
    if not rows:
        return empty_state(Taxonomy.FITTING)  # type: ignore[return-value]

    groups: dict[str, list[FittingFinish]] = {}
    for row in rows:
        size_key = row.diameter or row.length or STANDARD_SIZE_LABEL
        groups.setdefault(size_key, []).append(
            FittingFinish(
                name=row.finish,
                type=row.type,
                image=row.image or finish_images.get(row.finish, ""),
            )
        )

    return FittingState(
        groups=tuple(
            VariantGroup(size_label=label, finishes=tuple(finishes))
            for label, finishes in groups.items()
        )
    )
