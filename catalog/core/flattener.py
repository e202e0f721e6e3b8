"""Write path: authoring state -> flat variant rows.

The caller persists the result as a full replacement of the product's
rows (delete then insert), never as a patch.
"""

from catalog.core.authoring import (
    AuthoringState,
    FastenerState,
    Finish,
    FittingState,
    TypeOption,
)
from catalog.core.taxonomy import Taxonomy, TaxonomyMismatchError
from catalog.core.variants import ImageMaps, VariantRow

# Stand-ins used when an axis has no named entry, so the cross product
# still runs exactly once for that axis.
NO_TYPE: tuple[TypeOption, ...] = (TypeOption(name=""),)
NO_FINISH: tuple[Finish, ...] = (Finish(name=""),)


def flatten(
    taxonomy: Taxonomy,
    state: AuthoringState,
    product_id: int | None = None,
) -> list[VariantRow]:
    """Expand an authoring state into flat variant rows.

    Args:
        taxonomy: Taxonomy computed for the product being saved
        state: Authoring state from the editor
        product_id: Optional product id stamped on every row

    Returns:
        Rows to persist, in deterministic order

    Raises:
        TaxonomyMismatchError: If the state's shape belongs to the other taxonomy
    """
    if state.taxonomy is not taxonomy:
        raise TaxonomyMismatchError(expected=taxonomy, actual=state.taxonomy)

    if isinstance(state, FastenerState):
        return _flatten_fastener(state, product_id)
    if isinstance(state, FittingState):
        return _flatten_fitting(state, product_id)

    raise TypeError(f"Unsupported authoring state: {type(state).__name__}")


def _flatten_fastener(state: FastenerState, product_id: int | None) -> list[VariantRow]:
    """Size x type x finish cross product."""
    types = tuple(t for t in state.types if t.name) or NO_TYPE
    finishes = tuple(f for f in state.finishes if f.name) or NO_FINISH

    rows: list[VariantRow] = []
    for size in state.sizes:
        if size.is_blank:
            continue
        for type_option in types:
            for finish in finishes:
                rows.append(
                    VariantRow(
                        diameter=size.diameter,
                        length=size.length,
                        unit=size.unit,
                        type=type_option.name,
                        finish=finish.name,
                        image=finish.image or None,
                        product_id=product_id,
                    )
                )
    return rows


def _flatten_fitting(state: FittingState, product_id: int | None) -> list[VariantRow]:
    """One row per named finish per labelled group."""
    rows: list[VariantRow] = []
    for group in state.groups:
        if not group.size_label:
            continue

        named = group.named_finishes
        if not named:
            # Sizeless-variant placeholder keeps the group alive in storage
            rows.append(VariantRow(diameter=group.size_label, product_id=product_id))
            continue

        for finish in named:
            rows.append(
                VariantRow(
                    diameter=group.size_label,
                    length="",
                    type=finish.type,
                    finish=finish.name,
                    image=finish.image or None,
                    product_id=product_id,
                )
            )
    return rows


def summarize_images(state: AuthoringState) -> ImageMaps:
    """Derive the product-level finish/type image maps from a state.

    Only named entries with a non-empty image are included; when a name
    appears more than once the first image wins.
    """
    finish_images: dict[str, str] = {}
    type_images: dict[str, str] = {}

    if isinstance(state, FastenerState):
        for finish in state.finishes:
            if finish.name and finish.image:
                finish_images.setdefault(finish.name, finish.image)
        for type_option in state.types:
            if type_option.name and type_option.image:
                type_images.setdefault(type_option.name, type_option.image)
    elif isinstance(state, FittingState):
        for group in state.groups:
            if not group.size_label:
                continue
            for finish in group.named_finishes:
                if finish.image:
                    finish_images.setdefault(finish.name, finish.image)
    else:
        raise TypeError(f"Unsupported authoring state: {type(state).__name__}")

    return ImageMaps(finish_images=finish_images, type_images=type_images)
