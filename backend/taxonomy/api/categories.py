"""
Category API endpoints.
"""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Response

from taxonomy.dependencies import get_category_repository
from taxonomy.models import Category
from taxonomy.repositories import CategoryRepository
from taxonomy.schemas.category import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
    CategoryTree,
    CategoryDescendants,
)
from taxonomy.services import category_service
from taxonomy.services.category_tree import build_category_tree, get_descendant_ids

logger = logging.getLogger(__name__)

router = APIRouter()


def _validate_category_id(category_id: str) -> None:
    try:
        uuid.UUID(category_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid category ID")


async def _get_category_or_404(repo: CategoryRepository, category_id: str) -> Category:
    _validate_category_id(category_id)
    category = await repo.find_by_id(category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.get("", response_model=CategoryTree)
async def list_categories(
    repo: CategoryRepository = Depends(get_category_repository)
):
    """List all categories with tree structure."""
    categories = await repo.find_all()
    tree = build_category_tree(categories)

    return CategoryTree(
        items=tree,
        total=len(categories)
    )


@router.post("", response_model=CategoryResponse, status_code=201)
async def create_category(
    category: CategoryCreate,
    repo: CategoryRepository = Depends(get_category_repository)
):
    """Create a new category."""
    # Validate parent exists if parent_id is provided
    if category.parent_id:
        _validate_category_id(category.parent_id)
        parent = await repo.find_by_id(category.parent_id)
        if not parent:
            raise HTTPException(status_code=404, detail="Parent category not found")

    db_category = await category_service.create_category(repo, category)
    logger.info("Created category %s (%s)", db_category.id, db_category.name)
    return db_category


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: str,
    repo: CategoryRepository = Depends(get_category_repository)
):
    """Get a specific category."""
    return await _get_category_or_404(repo, category_id)


@router.get("/{category_id}/descendants", response_model=CategoryDescendants)
async def list_descendants(
    category_id: str,
    repo: CategoryRepository = Depends(get_category_repository)
):
    """List the ids of every category below this one."""
    await _get_category_or_404(repo, category_id)
    categories = await repo.find_all()

    return CategoryDescendants(
        category_id=category_id,
        descendant_ids=get_descendant_ids(category_id, categories),
    )


@router.patch("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: str,
    category_update: CategoryUpdate,
    repo: CategoryRepository = Depends(get_category_repository)
):
    """Update a category. Deactivation cascades to all subcategories."""
    category = await _get_category_or_404(repo, category_id)

    previous_status = category.status
    category = await category_service.update_category(repo, category, category_update)
    if category.status != previous_status:
        logger.info("Category %s status %s -> %s", category.id, previous_status.value, category.status.value)
    return category


@router.delete("/{category_id}", status_code=204)
async def delete_category(
    category_id: str,
    repo: CategoryRepository = Depends(get_category_repository)
):
    """Delete a category (its subcategories move up to its parent)."""
    await _get_category_or_404(repo, category_id)

    await category_service.delete_and_reparent(repo, category_id)
    logger.info("Deleted category %s and reassigned its subcategories", category_id)
    return Response(status_code=204)
