"""Authoring shapes edited by the admin tool.

The shape depends on the product taxonomy:

- FASTENER: three independent axes (sizes, finishes, types). Any size
  combines with any type and any finish.
- FITTING: a list of size groups, each with its own finishes. "Type" is
  an attribute of a finish, not an axis.

States are immutable. Every edit returns a new state, so the host UI can
keep snapshots and compose edits however it likes.
"""

from dataclasses import dataclass, replace
from typing import Any, ClassVar, TypeVar, Union

from catalog.core.taxonomy import Taxonomy
from catalog.core.variants import DEFAULT_UNIT, Unit

T = TypeVar("T")


def _replace_at(items: tuple[T, ...], index: int, item: T) -> tuple[T, ...]:
    """Return a copy of `items` with position `index` replaced."""
    if not -len(items) <= index < len(items):
        raise IndexError(f"index {index} out of range for {len(items)} entries")
    index %= len(items)
    return items[:index] + (item,) + items[index + 1:]


def _remove_at(items: tuple[T, ...], index: int) -> tuple[T, ...]:
    """Return a copy of `items` without position `index` (no-op if absent)."""
    if -len(items) <= index < 0:
        index %= len(items)
    return tuple(item for i, item in enumerate(items) if i != index)


# =============================================================================
# FASTENER shape
# =============================================================================


@dataclass(frozen=True)
class Size:
    """A diameter/length pair, e.g. ("4", "10,12,16", "mm")."""

    diameter: str = ""
    length: str = ""
    unit: Unit = DEFAULT_UNIT

    @property
    def is_blank(self) -> bool:
        return not self.diameter and not self.length


@dataclass(frozen=True)
class Finish:
    """Surface finish with an optional display image."""

    name: str = ""
    image: str = ""


@dataclass(frozen=True)
class TypeOption:
    """Optional type axis entry (head/drive style) with an optional image."""

    name: str = ""
    image: str = ""


@dataclass(frozen=True)
class FastenerState:
    """Authoring state for FASTENER products."""

    taxonomy: ClassVar[Taxonomy] = Taxonomy.FASTENER

    sizes: tuple[Size, ...] = (Size(),)
    finishes: tuple[Finish, ...] = (Finish(),)
    types: tuple[TypeOption, ...] = (TypeOption(),)

    # Sizes
    def with_size_added(self, size: Size | None = None) -> "FastenerState":
        return replace(self, sizes=self.sizes + (size or Size(),))

    def with_size_updated(self, index: int, **changes: Any) -> "FastenerState":
        size = replace(self.sizes[index], **changes)
        return replace(self, sizes=_replace_at(self.sizes, index, size))

    def with_size_removed(self, index: int) -> "FastenerState":
        return replace(self, sizes=_remove_at(self.sizes, index))

    # Finishes
    def with_finish_added(self, finish: Finish | None = None) -> "FastenerState":
        return replace(self, finishes=self.finishes + (finish or Finish(),))

    def with_finish_updated(self, index: int, **changes: Any) -> "FastenerState":
        finish = replace(self.finishes[index], **changes)
        return replace(self, finishes=_replace_at(self.finishes, index, finish))

    def with_finish_removed(self, index: int) -> "FastenerState":
        return replace(self, finishes=_remove_at(self.finishes, index))

    # Types
    def with_type_added(self, type_option: TypeOption | None = None) -> "FastenerState":
        return replace(self, types=self.types + (type_option or TypeOption(),))

    def with_type_updated(self, index: int, **changes: Any) -> "FastenerState":
        type_option = replace(self.types[index], **changes)
        return replace(self, types=_replace_at(self.types, index, type_option))

    def with_type_removed(self, index: int) -> "FastenerState":
        return replace(self, types=_remove_at(self.types, index))


# =============================================================================
# FITTING shape
# =============================================================================


@dataclass(frozen=True)
class FittingFinish:
    """Finish inside a size group; carries its own type and image."""

    name: str = ""
    type: str = ""
    image: str = ""


@dataclass(frozen=True)
class VariantGroup:
    """A size label (model code) and the finishes offered for it."""

    size_label: str = ""
    finishes: tuple[FittingFinish, ...] = (FittingFinish(),)

    @property
    def named_finishes(self) -> tuple[FittingFinish, ...]:
        return tuple(f for f in self.finishes if f.name)


@dataclass(frozen=True)
class FittingState:
    """Authoring state for FITTING products."""

    taxonomy: ClassVar[Taxonomy] = Taxonomy.FITTING

    groups: tuple[VariantGroup, ...] = (VariantGroup(),)

    def with_group_added(self, group: VariantGroup | None = None) -> "FittingState":
        return replace(self, groups=self.groups + (group or VariantGroup(),))

    def with_group_relabelled(self, index: int, size_label: str) -> "FittingState":
        group = replace(self.groups[index], size_label=size_label)
        return replace(self, groups=_replace_at(self.groups, index, group))

    def with_group_removed(self, index: int) -> "FittingState":
        return replace(self, groups=_remove_at(self.groups, index))

    def with_group_finish_added(
        self,
        group_index: int,
        finish: FittingFinish | None = None,
    ) -> "FittingState":
        group = self.groups[group_index]
        group = replace(group, finishes=group.finishes + (finish or FittingFinish(),))
        return replace(self, groups=_replace_at(self.groups, group_index, group))

    def with_group_finish_updated(
        self,
        group_index: int,
        finish_index: int,
        **changes: Any,
    ) -> "FittingState":
        group = self.groups[group_index]
        finish = replace(group.finishes[finish_index], **changes)
        group = replace(group, finishes=_replace_at(group.finishes, finish_index, finish))
        return replace(self, groups=_replace_at(self.groups, group_index, group))

    def with_group_finish_removed(self, group_index: int, finish_index: int) -> "FittingState":
        group = self.groups[group_index]
        group = replace(group, finishes=_remove_at(group.finishes, finish_index))
        return replace(self, groups=_replace_at(self.groups, group_index, group))


AuthoringState = Union[FastenerState, FittingState]


def empty_state(taxonomy: Taxonomy) -> AuthoringState:
    """Default authoring state for a new product: one blank input row per list."""
    if taxonomy is Taxonomy.FITTING:
        return FittingState()
    return FastenerState()
