"""
Category persistence on top of an async SQLAlchemy session.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from taxonomy.models.category import Category

logger = logging.getLogger(__name__)


class CategoryRepository:
    """
    Store for categories.

    Every write commits on its own, so each step of a multi-step operation is
    visible to the next read and nothing is rolled back if a later step fails.
    Reads always go to the database and overwrite whatever the session holds.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self) -> List[Category]:
        """Return every category."""
        return await self.find_where()

    async def find_by_id(self, category_id: str) -> Optional[Category]:
        """Return a category by id, or None if it doesn't exist."""
        rows = await self.find_where(Category.id == category_id)
        return rows[0] if rows else None

    async def find_where(self, *criteria: Any) -> List[Category]:
        """Return the categories matching all given SQL criteria."""
        stmt = (
            select(Category)
            .where(*criteria)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def find_children(self, parent_id: str) -> List[Category]:
        """Return the direct children of a category."""
        return await self.find_where(Category.parent_id == parent_id)

    async def add(self, category: Category) -> Category:
        """Insert a new category."""
        self.db.add(category)
        await self.db.commit()
        await self.db.refresh(category)
        logger.debug("Inserted category %s", category.id)
        return category

    async def save(self, category: Category) -> Category:
        """Persist in-place changes to a loaded category."""
        await self.db.commit()
        await self.db.refresh(category)
        return category

    async def bulk_update(self, changes: List[Dict[str, Any]]) -> None:
        """
        Apply per-row field changes in a single statement.

        Each entry holds the row's ``id`` plus the columns to set, e.g.
        ``{"id": "...", "status": CategoryStatus.inactive}``.
        """
        if not changes:
            return
        await self.db.execute(update(Category), changes)
        await self.db.commit()
        logger.debug("Bulk updated %d categories", len(changes))

    async def delete_by_id(self, category_id: str) -> None:
        """Delete a category row."""
        await self.db.execute(delete(Category).where(Category.id == category_id))
        await self.db.commit()
        logger.debug("Deleted category %s", category_id)
