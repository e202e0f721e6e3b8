"""Product record helpers used by the authoring tool on save and load."""

import re
from dataclasses import dataclass

_NON_SLUG = re.compile(r"[^a-z0-9]+")
_GRADE_SUFFIX = re.compile(r"^(.*?)\s*\(Grade\s*([^)]*)\)$", re.IGNORECASE)

MATERIAL_SEPARATOR = " | "


def slugify(name: str) -> str:
    """URL slug from a product name ("Drywall Screw 4mm" -> "drywall-screw-4mm")."""
    return _NON_SLUG.sub("-", name.lower()).strip("-")


def resolve_slug(name: str, slug: str | None = None) -> str:
    """An explicit slug wins; otherwise derive one from the name."""
    if slug and slug.strip():
        return slug.strip()
    return slugify(name)


@dataclass(frozen=True)
class MaterialRow:
    """One material line, e.g. ("Stainless Steel", "304, 316")."""

    name: str = ""
    grades: str = ""


def compose_material(rows: list[MaterialRow]) -> str:
    """Join material rows into the stored text form.

    Example:
        [("Stainless Steel", "304"), ("Brass", "")] ->
        "Stainless Steel (Grade 304) | Brass"
    """
    parts: list[str] = []
    for row in rows:
        name = row.name.strip()
        if not name:
            continue
        grades = row.grades.strip()
        parts.append(f"{name} (Grade {grades})" if grades else name)
    return MATERIAL_SEPARATOR.join(parts)


def parse_material(text: str | None) -> list[MaterialRow]:
    """Inverse of compose_material; always returns at least one row."""
    rows: list[MaterialRow] = []
    for part in (text or "").split("|"):
        part = part.strip()
        if not part:
            continue
        match = _GRADE_SUFFIX.match(part)
        if match:
            rows.append(MaterialRow(name=match.group(1).strip(), grades=match.group(2).strip()))
        else:
            rows.append(MaterialRow(name=part))
    return rows or [MaterialRow()]


@dataclass(frozen=True)
class SpecItem:
    """Key/value specification line."""

    key: str
    value: str


def merge_specifications(
    specs: list[SpecItem],
    extras: list[SpecItem] | None = None,
) -> list[SpecItem]:
    """Concatenate specification lists, dropping entries with a blank value."""
    return [item for item in [*specs, *(extras or [])] if item.value and item.value.strip()]
