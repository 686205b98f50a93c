"""Tests for default category seeding."""

import pytest

from taxonomy.seed import DEFAULT_CATEGORIES, seed_categories
from taxonomy.services.category_tree import build_category_tree


def count(data):
    return sum(1 + count(item.get("children", [])) for item in data)


class TestSeed:

    @pytest.mark.asyncio
    async def test_seeds_empty_database(self, db_session, repo):
        created = await seed_categories(db_session)

        assert created == count(DEFAULT_CATEGORIES)
        tree = build_category_tree(await repo.find_all())
        assert sorted(node.name for node in tree) == sorted(c["name"] for c in DEFAULT_CATEGORIES)

        electronics = next(node for node in tree if node.name == "Electronics")
        computers = next(node for node in electronics.children if node.name == "Computers")
        assert {node.name for node in computers.children} == {"Laptops", "Desktops"}

    @pytest.mark.asyncio
    async def test_skips_when_categories_exist(self, db_session, make_category):
        await make_category("Existing")

        assert await seed_categories(db_session) == 0

    @pytest.mark.asyncio
    async def test_custom_data(self, db_session, repo):
        created = await seed_categories(db_session, [{"name": "A", "children": [{"name": "B"}]}])

        assert created == 2
        tree = build_category_tree(await repo.find_all())
        assert [node.name for node in tree] == ["A"]
        assert [node.name for node in tree[0].children] == ["B"]
