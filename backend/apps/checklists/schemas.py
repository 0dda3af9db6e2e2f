"""
Pydantic schemas for checklist API endpoints.
"""

from ninja import Schema
from pydantic import Field, field_validator, model_validator

from apps.checklists.defaults import ICON_NAMES


class ChecklistItemSchema(Schema):
    id: str = Field(min_length=1, max_length=100)
    name: str = Field(min_length=1, max_length=255)
    description: str = Field(default="", max_length=1000)


class ChecklistCategorySchema(Schema):
    id: str = Field(min_length=1, max_length=100)
    name: str = Field(min_length=1, max_length=255)
    icon: str = Field(description="Icon name shown next to the category")
    items: list[ChecklistItemSchema] = Field(default_factory=list)

    @field_validator("icon")
    @classmethod
    def validate_icon(cls, value: str) -> str:
        if value not in ICON_NAMES:
            raise ValueError(f"Unknown icon {value!r}")
        return value


class ChecklistResponse(Schema):
    """Ordered categories; array order is display and export order."""

    categories: list[ChecklistCategorySchema]


class ReplaceChecklistRequest(Schema):
    categories: list[ChecklistCategorySchema]

    @model_validator(mode="after")
    def ids_are_unique(self) -> "ReplaceChecklistRequest":
        category_ids = [c.id for c in self.categories]
        item_ids = [i.id for c in self.categories for i in c.items]
        if len(set(category_ids)) != len(category_ids):
            raise ValueError("Category ids must be unique")
        if len(set(item_ids)) != len(item_ids):
            raise ValueError("Item ids must be unique")
        return self


class CategoryRequest(Schema):
    """Create or update a category."""

    name: str = Field(min_length=1, max_length=255)
    icon: str = Field(description="Icon name shown next to the category")

    @field_validator("icon")
    @classmethod
    def validate_icon(cls, value: str) -> str:
        if value not in ICON_NAMES:
            raise ValueError(f"Unknown icon {value!r}")
        return value


class ItemRequest(Schema):
    """Create or update an item."""

    name: str = Field(min_length=1, max_length=255)
    description: str = Field(default="", max_length=1000)


class ReorderCategoryRequest(Schema):
    active_id: str = Field(description="Category being dragged")
    over_id: str = Field(description="Category it was dropped on")


class ReorderItemRequest(Schema):
    active_category_id: str
    active_item_id: str = Field(description="Item being dragged")
    over_category_id: str
    over_item_id: str = Field(description="Item it was dropped on")
