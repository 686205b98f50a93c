"""
Category mutations that ripple through the tree.

These routines trust that the category they are given exists; callers check
that first. Store errors are not caught here, and steps already committed
stay committed when a later step fails.
"""

from typing import Optional, Set

from taxonomy.models.category import Category, CategoryStatus
from taxonomy.repositories.category_repository import CategoryRepository
from taxonomy.schemas.category import CategoryCreate, CategoryUpdate


async def cascade_status(
    repo: CategoryRepository,
    category_id: str,
    status: CategoryStatus,
    _seen: Optional[Set[str]] = None,
) -> None:
    """
    Set ``status`` on every descendant of a category.

    Works one level at a time: the direct children are read fresh from the
    store, updated in one bulk write, and then each child is descended into
    in turn. The category's own status is left to the caller.
    """
    seen = _seen if _seen is not None else {category_id}

    children = [child for child in await repo.find_children(category_id) if child.id not in seen]
    if not children:
        return

    await repo.bulk_update([{"id": child.id, "status": status} for child in children])

    seen.update(child.id for child in children)
    for child in children:
        await cascade_status(repo, child.id, status, seen)


async def delete_and_reparent(repo: CategoryRepository, category_id: str) -> None:
    """
    Delete a category, moving its direct children up to its parent.

    Children of a root category become roots. Deeper descendants keep their
    parent links untouched.
    """
    # Must be read before the row goes away
    category = await repo.find_by_id(category_id)
    grandparent_id = category.parent_id if category else None

    children = await repo.find_children(category_id)
    if children:
        await repo.bulk_update([{"id": child.id, "parent_id": grandparent_id} for child in children])

    await repo.delete_by_id(category_id)


async def create_category(repo: CategoryRepository, data: CategoryCreate) -> Category:
    """Create a category. The parent, if any, must already be checked."""
    category = Category(
        name=data.name,
        parent_id=data.parent_id or None,
        status=data.status,
    )
    return await repo.add(category)


async def update_category(
    repo: CategoryRepository,
    category: Category,
    data: CategoryUpdate,
) -> Category:
    """
    Apply a name/status update to a category.

    Deactivating an active category deactivates its whole subtree as well.
    Reactivating only touches the category itself.
    """
    if data.name is not None:
        category.name = data.name

    deactivating = (
        data.status == CategoryStatus.inactive
        and category.status != CategoryStatus.inactive
    )
    if data.status is not None:
        category.status = data.status

    category = await repo.save(category)

    if deactivating:
        await cascade_status(repo, category.id, CategoryStatus.inactive)

    return category
