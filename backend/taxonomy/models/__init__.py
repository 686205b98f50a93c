"""
Database models package.
"""

from taxonomy.models.category import Category, CategoryStatus

__all__ = [
    "Category",
    "CategoryStatus",
]
