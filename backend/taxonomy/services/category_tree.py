"""
Assembly of flat category rows into a nested tree.
"""

from typing import Dict, Iterable, List, Optional, Set

from taxonomy.models.category import Category
from taxonomy.schemas.category import CategoryNode


def build_category_tree(categories: Iterable[Category]) -> List[CategoryNode]:
    """
    Build a forest of nested nodes from a flat list of categories.

    Every input category appears exactly once in the result. A category whose
    parent is missing from the input (for instance, left over from partial
    data) is returned as a root instead of being dropped. Siblings keep the
    order in which they appear in the input.
    """
    categories = list(categories)

    node_map: Dict[str, CategoryNode] = {
        cat.id: CategoryNode(id=cat.id, name=cat.name, status=cat.status, children=[])
        for cat in categories
    }

    roots: List[CategoryNode] = []
    for cat in categories:
        node = node_map[cat.id]
        parent = node_map.get(cat.parent_id) if cat.parent_id else None
        if parent is not None:
            parent.children.append(node)
        else:
            roots.append(node)

    return roots


def get_descendant_ids(
    category_id: str,
    categories: Iterable[Category],
    _seen: Optional[Set[str]] = None,
) -> List[str]:
    """
    List the ids of all categories below ``category_id``, depth first.

    Each child is followed immediately by its own descendants. Ids already
    visited are skipped, so a cycle in the parent links ends the walk rather
    than recursing forever.
    """
    categories = list(categories)
    seen = _seen if _seen is not None else {category_id}

    descendants: List[str] = []
    for child in categories:
        if child.parent_id != category_id or child.id in seen:
            continue
        seen.add(child.id)
        descendants.append(child.id)
        descendants.extend(get_descendant_ids(child.id, categories, seen))

    return descendants
