"""
Seed script for default categories.
"""

import asyncio
import logging
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from taxonomy.database import SessionLocal, init_db
from taxonomy.log import setup_logging
from taxonomy.models import Category

logger = logging.getLogger(__name__)


# Default categories with their subcategories
DEFAULT_CATEGORIES: List[Dict[str, Any]] = [
    {
        "name": "Electronics",
        "children": [
            {
                "name": "Computers",
                "children": [
                    {"name": "Laptops"},
                    {"name": "Desktops"},
                ],
            },
            {"name": "Phones"},
            {"name": "Audio"},
        ],
    },
    {
        "name": "Home",
        "children": [
            {"name": "Furniture"},
            {"name": "Kitchen"},
            {"name": "Garden"},
        ],
    },
    {
        "name": "Clothing",
        "children": [
            {"name": "Men"},
            {"name": "Women"},
            {"name": "Kids"},
        ],
    },
    {"name": "Books", "children": []},
    {"name": "Other", "children": []},
]


def _add_subtree(db: AsyncSession, data: Dict[str, Any], parent_id: Optional[str]) -> int:
    category = Category(id=str(uuid.uuid4()), name=data["name"], parent_id=parent_id)
    db.add(category)

    added = 1
    for child in data.get("children", []):
        added += _add_subtree(db, child, category.id)
    return added


async def seed_categories(db: AsyncSession, categories_data: Optional[List[Dict[str, Any]]] = None) -> int:
    """
    Seed default categories into an empty database.

    Returns the number of categories created (0 if any already existed).
    """
    existing_count = await db.scalar(select(func.count()).select_from(Category))
    if existing_count:
        logger.info("Categories already seeded (%d categories exist)", existing_count)
        return 0

    if categories_data is None:
        categories_data = DEFAULT_CATEGORIES

    try:
        created = sum(_add_subtree(db, cat_data, None) for cat_data in categories_data)
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    logger.info("Seeded %d categories under %d roots", created, len(categories_data))
    return created


async def main() -> None:
    setup_logging()
    await init_db()
    async with SessionLocal() as db:
        await seed_categories(db)


if __name__ == "__main__":
    asyncio.run(main())
