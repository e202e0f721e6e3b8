"""Core module - variant configuration model.

Pure transforms between flat variant rows and the authoring shapes, plus
the storefront selection cascade.
"""

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
from catalog.core.flattener import flatten, summarize_images
from catalog.core.reconstructor import reconstruct
from catalog.core.selection import Selection, SelectionCascade
from catalog.core.taxonomy import Taxonomy, TaxonomyMismatchError, classify
from catalog.core.variants import ImageMaps, VariantRow, finish_image_map

__all__ = [
    "AuthoringState",
    "FastenerState",
    "Finish",
    "FittingFinish",
    "FittingState",
    "Size",
    "TypeOption",
    "VariantGroup",
    "empty_state",
    "flatten",
    "summarize_images",
    "reconstruct",
    "Selection",
    "SelectionCascade",
    "Taxonomy",
    "TaxonomyMismatchError",
    "classify",
    "ImageMaps",
    "VariantRow",
    "finish_image_map",
]
