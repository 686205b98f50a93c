"""
Pydantic schemas package.
"""

from taxonomy.schemas.category import (
    CategoryBase,
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
    CategoryNode,
    CategoryTree,
    CategoryDescendants,
)

__all__ = [
    "CategoryBase",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "CategoryNode",
    "CategoryTree",
    "CategoryDescendants",
]
