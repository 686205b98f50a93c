"""
FastAPI dependencies.
"""

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from taxonomy.database import SessionLocal
from taxonomy.repositories import CategoryRepository


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for getting database sessions.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        await db.close()


def get_category_repository(db: AsyncSession = Depends(get_db)) -> CategoryRepository:
    """Dependency wrapping the request session in a category repository."""
    return CategoryRepository(db)
