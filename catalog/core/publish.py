"""Completeness checks run when a product is published.

Saving never blocks on incomplete variant data; these checks are the
gate between a draft and a product visible on the storefront.
"""

from dataclasses import dataclass
from typing import Literal

from catalog.core.taxonomy import Taxonomy
from catalog.core.variants import VariantRow

IssueCode = Literal[
    "no_variants",
    "missing_diameter",
    "missing_length",
    "duplicate_row",
    "placeholder_only",
]


@dataclass(frozen=True)
class PublishIssue:
    """A reason a product cannot be published yet."""

    code: IssueCode
    message: str
    row_index: int | None = None


def completeness_issues(taxonomy: Taxonomy, rows: list[VariantRow]) -> list[PublishIssue]:
    """Check the stored variant rows of a product.

    Args:
        taxonomy: Taxonomy of the product
        rows: Stored variant rows

    Returns:
        Issues found, in row order (empty when publishable)
    """
    if not rows:
        return [PublishIssue(code="no_variants", message="Product has no variants")]

    issues: list[PublishIssue] = []
    seen: set[tuple[str, str, str, str, str]] = set()

    for index, row in enumerate(rows):
        if not row.diameter:
            issues.append(
                PublishIssue(
                    code="missing_diameter",
                    message="Variant has no diameter",
                    row_index=index,
                )
            )
        if taxonomy is Taxonomy.FASTENER and not row.length:
            issues.append(
                PublishIssue(
                    code="missing_length",
                    message=f"Variant {row.diameter or '?'} has no length",
                    row_index=index,
                )
            )
        if row.identity in seen:
            issues.append(
                PublishIssue(
                    code="duplicate_row",
                    message=f"Duplicate variant {row.diameter} x {row.length} {row.finish}".rstrip(),
                    row_index=index,
                )
            )
        seen.add(row.identity)

    if taxonomy is Taxonomy.FITTING and all(not row.finish for row in rows):
        issues.append(
            PublishIssue(
                code="placeholder_only",
                message="No size group has a named finish",
            )
        )

    return issues
