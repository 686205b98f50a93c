"""
Repositories package.
"""

from taxonomy.repositories.category_repository import CategoryRepository

__all__ = [
    "CategoryRepository",
]
