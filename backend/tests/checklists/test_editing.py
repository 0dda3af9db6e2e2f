"""
Tests for pure checklist edits.
"""

import pytest

from apps.checklists.editing import (
    CrossCategoryMoveError,
    UnknownCategoryError,
    UnknownItemError,
    add_category,
    add_item,
    delete_category,
    delete_item,
    flatten_items,
    move_within_list,
    reorder_category,
    reorder_item,
    update_category,
    update_item,
)


@pytest.fixture
def categories() -> list[dict]:
    return [
        {
            "id": "a",
            "name": "Cab",
            "icon": "Car",
            "items": [
                {"id": "a1", "name": "Seat belt", "description": ""},
                {"id": "a2", "name": "Horn", "description": "Works"},
                {"id": "a3", "name": "Mirrors", "description": ""},
            ],
        },
        {
            "id": "b",
            "name": "Trailer",
            "icon": "Trailer",
            "items": [{"id": "b1", "name": "Axles", "description": ""}],
        },
        {"id": "c", "name": "Lights", "icon": "Lightbulb", "items": []},
    ]


class TestMoveWithinList:
    def test_move_forward(self) -> None:
        assert move_within_list(["a", "b", "c", "d"], 0, 2) == ["b", "c", "a", "d"]

    def test_move_backward(self) -> None:
        assert move_within_list(["a", "b", "c", "d"], 3, 1) == ["a", "d", "b", "c"]

    def test_same_index_is_identity(self) -> None:
        assert move_within_list([1, 2, 3], 1, 1) == [1, 2, 3]

    def test_input_not_mutated(self) -> None:
        items = [1, 2, 3]
        move_within_list(items, 0, 2)
        assert items == [1, 2, 3]

    @pytest.mark.parametrize(("src", "dst"), [(-1, 0), (0, 3), (5, 1)])
    def test_out_of_range(self, src: int, dst: int) -> None:
        with pytest.raises(IndexError):
            move_within_list([1, 2, 3], src, dst)


class TestCategoryEdits:
    def test_add_category_appends_empty(self, categories: list[dict]) -> None:
        result = add_category(categories, "Engine", "Cog", category_id="d")

        assert [c["id"] for c in result] == ["a", "b", "c", "d"]
        assert result[-1] == {"id": "d", "name": "Engine", "icon": "Cog", "items": []}
        assert len(categories) == 3

    def test_add_category_generates_id(self, categories: list[dict]) -> None:
        result = add_category(categories, "Engine", "Cog")
        assert result[-1]["id"] not in {"a", "b", "c"}

    def test_update_category_keeps_items(self, categories: list[dict]) -> None:
        result = update_category(categories, "a", "Cabin", "Sofa")

        assert result[0]["name"] == "Cabin"
        assert result[0]["icon"] == "Sofa"
        assert result[0]["items"] == categories[0]["items"]
        assert categories[0]["name"] == "Cab"

    def test_delete_category_removes_items(self, categories: list[dict]) -> None:
        result = delete_category(categories, "a")

        assert [c["id"] for c in result] == ["b", "c"]
        assert "a1" not in {i["item_id"] for i in flatten_items(result)}

    def test_unknown_category(self, categories: list[dict]) -> None:
        with pytest.raises(UnknownCategoryError):
            update_category(categories, "zzz", "x", "Cog")
        with pytest.raises(UnknownCategoryError):
            delete_category(categories, "zzz")

    def test_reorder_category(self, categories: list[dict]) -> None:
        result = reorder_category(categories, "c", "a")
        assert [c["id"] for c in result] == ["c", "a", "b"]

    def test_reorder_category_onto_itself(self, categories: list[dict]) -> None:
        assert reorder_category(categories, "b", "b") == categories


class TestItemEdits:
    def test_add_item_appends(self, categories: list[dict]) -> None:
        result = add_item(categories, "c", "Headlights", "Both work", item_id="c1")

        assert result[2]["items"] == [{"id": "c1", "name": "Headlights", "description": "Both work"}]
        assert categories[2]["items"] == []

    def test_add_item_unknown_category(self, categories: list[dict]) -> None:
        with pytest.raises(UnknownCategoryError):
            add_item(categories, "zzz", "x", "")

    def test_update_item(self, categories: list[dict]) -> None:
        result = update_item(categories, "a", "a2", "Horn & alarm", "Both audible")
        assert result[0]["items"][1] == {"id": "a2", "name": "Horn & alarm", "description": "Both audible"}

    def test_update_item_in_wrong_category(self, categories: list[dict]) -> None:
        with pytest.raises(UnknownItemError):
            update_item(categories, "b", "a2", "x", "")

    def test_delete_item(self, categories: list[dict]) -> None:
        result = delete_item(categories, "a", "a1")
        assert [i["id"] for i in result[0]["items"]] == ["a2", "a3"]

    def test_delete_unknown_item(self, categories: list[dict]) -> None:
        with pytest.raises(UnknownItemError):
            delete_item(categories, "a", "nope")

    def test_reorder_item_within_category(self, categories: list[dict]) -> None:
        result = reorder_item(categories, "a", "a1", "a", "a3")
        assert [i["id"] for i in result[0]["items"]] == ["a2", "a3", "a1"]

    def test_reorder_item_across_categories_is_rejected(self, categories: list[dict]) -> None:
        with pytest.raises(CrossCategoryMoveError):
            reorder_item(categories, "a", "a1", "b", "b1")

    def test_reorder_unknown_item(self, categories: list[dict]) -> None:
        with pytest.raises(UnknownItemError):
            reorder_item(categories, "a", "a1", "a", "b1")


class TestFlattenItems:
    def test_checklist_order_with_category(self, categories: list[dict]) -> None:
        flat = flatten_items(categories)

        assert [i["item_id"] for i in flat] == ["a1", "a2", "a3", "b1"]
        assert flat[3] == {
            "item_id": "b1",
            "category_id": "b",
            "category_name": "Trailer",
            "name": "Axles",
            "description": "",
        }
