#!/usr/bin/env python
"""Seed a local catalog database with fake categories.

This script:
1. Creates the catalog tables (optionally dropping them first)
2. Inserts fake categories through the SQLAlchemy repository

Usage:
    # Seed 20 categories into the configured database
    CATALOG_DB_URL=sqlite+aiosqlite:///./catalog.db python scripts/seed_categories.py --count 20

    # Recreate the schema before seeding
    python scripts/seed_categories.py --count 5 --reset

    # Search stored categories
    python scripts/seed_categories.py --search movie --sort name --page 1 --per-page 10
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from catalog.domain.category import Category
from catalog.infra.category_repository import CategorySqlAlchemyRepository
from catalog.infra.database import close_db_engine, create_schema, get_db_session
from catalog.infra.logging import get_logger, setup_logging
from catalog.schemas.search import SearchParams


setup_logging()
logger = get_logger(__name__)


async def seed(count: int, reset: bool) -> int:
    """Create the schema and insert ``count`` fake categories.

    Args:
        count: Number of categories to insert
        reset: Drop existing tables first

    Returns:
        Number of categories inserted
    """
    await create_schema(drop_first=reset)

    built = Category.fake().the_categories(count).build()
    categories = built if isinstance(built, list) else [built]

    async with get_db_session() as session:
        repository = CategorySqlAlchemyRepository(session)
        await repository.bulk_insert(categories)

    logger.info("Categories seeded", count=len(categories), reset=reset)
    return len(categories)


async def search(params: SearchParams) -> None:
    """Print one page of stored categories."""
    async with get_db_session() as session:
        repository = CategorySqlAlchemyRepository(session)
        result = await repository.search(params)

    print(f"\nCategories (page {result.current_page}/{result.last_page}, total {result.total}):")
    print("-" * 60)
    if not result.items:
        print("  No categories found")
    for category in result.items:
        status = "active" if category.is_active else "inactive"
        print(f"  {category.category_id}  {category.name} ({status})")


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Seed and inspect the local catalog database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--count",
        type=int,
        default=0,
        help="Number of fake categories to insert",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop and recreate tables before seeding",
    )
    parser.add_argument(
        "--search",
        type=str,
        default=None,
        help="Filter term matched against category names",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List stored categories (first page)",
    )
    parser.add_argument("--sort", type=str, default=None, help="Sort field (name, created_at)")
    parser.add_argument("--sort-dir", type=str, default=None, help="asc or desc")
    parser.add_argument("--page", type=int, default=1, help="Page number")
    parser.add_argument("--per-page", type=int, default=None, help="Page size")

    return parser.parse_args()


async def main() -> int:
    """Main entry point."""
    args = parse_args()

    if args.count < 0:
        print("Error: --count must not be negative")
        return 1

    try:
        if args.count:
            inserted = await seed(args.count, args.reset)
            print(f"Inserted {inserted} categories")
        elif args.reset:
            await create_schema(drop_first=True)
            print("Schema recreated")

        if args.list or args.search is not None:
            await search(
                SearchParams(
                    page=args.page,
                    per_page=args.per_page,
                    sort=args.sort,
                    sort_dir=args.sort_dir,
                    filter=args.search,
                )
            )
    finally:
        await close_db_engine()

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
