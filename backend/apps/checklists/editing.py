"""
Pure checklist edits.

Every function takes the current ordered category list and returns a new
one; inputs are never mutated. Array order is display and export order.
"""

import copy
import uuid
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


class ChecklistEditError(Exception):
    """Base class for edits that cannot be applied."""


class UnknownCategoryError(ChecklistEditError):
    def __init__(self, category_id: str) -> None:
        super().__init__(f"Category {category_id!r} not found.")
        self.category_id = category_id


class UnknownItemError(ChecklistEditError):
    def __init__(self, item_id: str) -> None:
        super().__init__(f"Item {item_id!r} not found.")
        self.item_id = item_id


class CrossCategoryMoveError(ChecklistEditError):
    """Items can only be reordered within their own category."""

    def __init__(self) -> None:
        super().__init__("Items can only be moved within their own category.")


def new_id() -> str:
    return str(uuid.uuid4())


def move_within_list(items: Sequence[T], from_index: int, to_index: int) -> list[T]:
    """
    Move one element: remove it at ``from_index`` and insert at ``to_index``.

    Moving an element to its current position returns an equal list.

    Raises:
        IndexError: If either index is outside the list
    """
    size = len(items)
    if not (0 <= from_index < size and 0 <= to_index < size):
        raise IndexError(f"Cannot move {from_index} -> {to_index} in a list of {size}")
    result = list(items)
    result.insert(to_index, result.pop(from_index))
    return result


def _index_of(entries: Sequence[dict], entry_id: str) -> int:
    for index, entry in enumerate(entries):
        if entry["id"] == entry_id:
            return index
    return -1


def _category_index(categories: Sequence[dict], category_id: str) -> int:
    index = _index_of(categories, category_id)
    if index < 0:
        raise UnknownCategoryError(category_id)
    return index


def add_category(
    categories: Sequence[dict],
    name: str,
    icon: str,
    category_id: str | None = None,
) -> list[dict]:
    """Append a new empty category."""
    result = copy.deepcopy(list(categories))
    result.append({"id": category_id or new_id(), "name": name, "icon": icon, "items": []})
    return result


def update_category(categories: Sequence[dict], category_id: str, name: str, icon: str) -> list[dict]:
    """Rename a category and change its icon; id and items are kept."""
    result = copy.deepcopy(list(categories))
    category = result[_category_index(result, category_id)]
    category["name"] = name
    category["icon"] = icon
    return result


def delete_category(categories: Sequence[dict], category_id: str) -> list[dict]:
    """Remove a category together with every item nested under it."""
    _category_index(categories, category_id)
    return [copy.deepcopy(c) for c in categories if c["id"] != category_id]


def add_item(
    categories: Sequence[dict],
    category_id: str,
    name: str,
    description: str,
    item_id: str | None = None,
) -> list[dict]:
    """Append an item to the end of a category."""
    result = copy.deepcopy(list(categories))
    category = result[_category_index(result, category_id)]
    category["items"].append({"id": item_id or new_id(), "name": name, "description": description})
    return result


def update_item(
    categories: Sequence[dict],
    category_id: str,
    item_id: str,
    name: str,
    description: str,
) -> list[dict]:
    result = copy.deepcopy(list(categories))
    items = result[_category_index(result, category_id)]["items"]
    index = _index_of(items, item_id)
    if index < 0:
        raise UnknownItemError(item_id)
    items[index]["name"] = name
    items[index]["description"] = description
    return result


def delete_item(categories: Sequence[dict], category_id: str, item_id: str) -> list[dict]:
    result = copy.deepcopy(list(categories))
    category = result[_category_index(result, category_id)]
    if _index_of(category["items"], item_id) < 0:
        raise UnknownItemError(item_id)
    category["items"] = [i for i in category["items"] if i["id"] != item_id]
    return result


def reorder_category(categories: Sequence[dict], active_id: str, over_id: str) -> list[dict]:
    """Move the dragged category to the position of the one it was dropped on."""
    from_index = _category_index(categories, active_id)
    to_index = _category_index(categories, over_id)
    return copy.deepcopy(move_within_list(categories, from_index, to_index))


def reorder_item(
    categories: Sequence[dict],
    active_category_id: str,
    active_item_id: str,
    over_category_id: str,
    over_item_id: str,
) -> list[dict]:
    """
    Move the dragged item to the position of the item it was dropped on.

    Raises:
        CrossCategoryMoveError: If the two items live in different categories
    """
    if active_category_id != over_category_id:
        raise CrossCategoryMoveError()

    result = copy.deepcopy(list(categories))
    category = result[_category_index(result, active_category_id)]
    from_index = _index_of(category["items"], active_item_id)
    if from_index < 0:
        raise UnknownItemError(active_item_id)
    to_index = _index_of(category["items"], over_item_id)
    if to_index < 0:
        raise UnknownItemError(over_item_id)
    category["items"] = move_within_list(category["items"], from_index, to_index)
    return result


def flatten_items(categories: Sequence[dict]) -> list[dict]:
    """
    Every item in checklist order, tagged with its category.

    Returns dicts of ``item_id, category_id, category_name, name, description``.
    """
    return [
        {
            "item_id": item["id"],
            "category_id": category["id"],
            "category_name": category["name"],
            "name": item["name"],
            "description": item.get("description", ""),
        }
        for category in categories
        for item in category.get("items", [])
    ]
