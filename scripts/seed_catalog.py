#!/usr/bin/env python
"""Seed a local catalog database for manual testing.

This script:
1. Creates the catalog tables
2. Creates sample FASTENER and FITTING products with variants

Usage:
    # Create tables and sample products
    python scripts/seed_catalog.py --create-tables --sample

    # List products
    python scripts/seed_catalog.py --list

    # Show the stored rows and default storefront selection of a product
    python scripts/seed_catalog.py --show drywall-screw
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import select

from catalog.core.authoring import (
    FastenerState,
    Finish,
    FittingFinish,
    FittingState,
    Size,
    TypeOption,
    VariantGroup,
)
from catalog.core.product_record import MaterialRow, SpecItem
from catalog.infra.database import close_db_engine, get_db_session, get_engine
from catalog.infra.logging import get_logger, setup_logging
from catalog.models import Base, Category, Product, SubCategory
from catalog.services.variant_repository import (
    ProductConflictError,
    ProductNotFoundError,
    VariantRepository,
    VariantStoreError,
)
from catalog.services.variant_service import VariantService


setup_logging()
logger = get_logger(__name__)


SAMPLE_FASTENER = FastenerState(
    sizes=(
        Size(diameter="3.5", length="25,32,38"),
        Size(diameter="4.2", length="50,65"),
    ),
    finishes=(
        Finish(name="Black Phosphate", image="https://cdn.example.com/finishes/black.jpg"),
        Finish(name="Zinc"),
    ),
    types=(TypeOption(name="Bugle Head"),),
)

SAMPLE_FITTING = FittingState(
    groups=(
        VariantGroup(
            size_label="HG-35 Full Overlay",
            finishes=(
                FittingFinish(name="Nickel", type="Soft Close", image="https://cdn.example.com/finishes/nickel.jpg"),
                FittingFinish(name="Black", type="Soft Close"),
            ),
        ),
        VariantGroup(size_label="HG-35 Half Overlay", finishes=(FittingFinish(name="Nickel", type="Standard"),)),
    )
)


async def create_tables() -> None:
    """Create all catalog tables that do not exist yet."""
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Catalog tables ensured")


async def ensure_sub_category(category_name: str, sub_category_name: str) -> int:
    """Get or create a category/sub-category pair and return the sub-category id."""
    async with get_db_session() as session:
        result = await session.execute(select(Category).where(Category.name == category_name))
        category = result.scalar_one_or_none()
        if category is None:
            category = Category(name=category_name)
            session.add(category)
            await session.flush()

        result = await session.execute(
            select(SubCategory).where(
                SubCategory.category_id == category.id,
                SubCategory.name == sub_category_name,
            )
        )
        sub_category = result.scalar_one_or_none()
        if sub_category is None:
            sub_category = SubCategory(category_id=category.id, name=sub_category_name)
            session.add(sub_category)
            await session.flush()

        return sub_category.id


async def create_sample_products() -> bool:
    """Create one product per taxonomy, save its variants and publish it."""
    screws_id = await ensure_sub_category("Screws", "Drywall Screws")
    hinges_id = await ensure_sub_category("Furniture Fittings", "Concealed Hinges")

    samples = [
        (
            dict(
                name="Drywall Screw",
                sub_category_id=screws_id,
                material_rows=[MaterialRow(name="Carbon Steel", grades="C1022")],
                specifications=[SpecItem("Thread", "Coarse"), SpecItem("Drive", "PH2")],
                images=["https://cdn.example.com/products/drywall-screw.jpg"],
            ),
            SAMPLE_FASTENER,
        ),
        (
            dict(
                name="Concealed Hinge 35mm",
                sub_category_id=hinges_id,
                material_rows=[MaterialRow(name="Cold Rolled Steel")],
                specifications=[SpecItem("Opening Angle", "110")],
            ),
            SAMPLE_FITTING,
        ),
    ]

    try:
        for fields, state in samples:
            async with get_db_session() as session:
                service = VariantService(VariantRepository(session))
                product = await service.create_product(**fields)
                saved = await service.save_configuration(product.id, state)
                _, issues = await service.publish(product.id)
                status = "published" if not issues else ", ".join(i.code for i in issues)
                print(f"  {product.slug} ({saved.taxonomy.value}): {len(saved.rows)} variants, {status}")
        return True

    except (ProductConflictError, VariantStoreError) as e:
        logger.error("Failed to create sample products", error=str(e))
        return False


async def list_products() -> list[Product]:
    async with get_db_session() as session:
        result = await session.execute(select(Product).order_by(Product.id))
        return list(result.scalars().all())


async def show_product(slug: str) -> bool:
    """Print the stored rows and the default storefront selection of a product."""
    try:
        async with get_db_session() as session:
            service = VariantService(VariantRepository(session))
            view = await service.configurator(slug)
            rows = await service.list_rows(view.product.id)
    except ProductNotFoundError:
        print(f"Product not found or not published: {slug}")
        return False

    print(f"\nProduct: {view.product.name} [{view.taxonomy.value}]")
    print("-" * 60)
    for row in rows:
        print(f"  {row.diameter:<20} {row.length:<12} {row.type:<14} {row.finish:<16} {row.image or ''}")
    print(f"\nDiameters: {view.cascade.unique_diameters()}")
    print(f"Default selection: {view.selection}")
    return True


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Seed a local catalog database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create catalog tables",
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Create sample FASTENER and FITTING products",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List all products",
    )
    parser.add_argument(
        "--show",
        type=str,
        metavar="SLUG",
        help="Show variants of a specific product",
    )

    return parser.parse_args()


async def main() -> int:
    """Main entry point."""
    args = parse_args()

    if not (args.create_tables or args.sample or args.list or args.show):
        print("Error: nothing to do (use --create-tables, --sample, --list or --show)")
        return 1

    try:
        if args.create_tables:
            await create_tables()

        if args.sample:
            print("\nCreating sample products:")
            if not await create_sample_products():
                print("Failed to create sample products")
                return 1

        if args.list:
            print("\nProducts:")
            print("-" * 60)
            products = await list_products()
            if not products:
                print("  No products")
            for product in products:
                state = "active" if product.active else "draft"
                print(f"  {product.id:>4}  {product.slug:<30} {product.category:<20} {state}")

        if args.show:
            await show_product(args.show)

        return 0

    finally:
        await close_db_engine()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
