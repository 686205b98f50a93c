"""
Category Pydantic schemas for API validation.
"""

from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional
from taxonomy.models.category import CategoryStatus


class CategoryBase(BaseModel):
    """Base category schema."""
    name: str = Field(..., min_length=1, max_length=100)
    parent_id: Optional[str] = None
    status: CategoryStatus = CategoryStatus.active


class CategoryCreate(CategoryBase):
    """Schema for creating a category."""

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Category name is required")
        return value


class CategoryUpdate(BaseModel):
    """Schema for updating a category's name and/or status."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    status: Optional[CategoryStatus] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError("Category name cannot be blank")
        return value


class CategoryResponse(CategoryBase):
    """Schema for a single flat category."""
    id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CategoryNode(BaseModel):
    """A category nested with its children, as produced by the tree builder."""
    id: str
    name: str
    status: CategoryStatus
    children: list["CategoryNode"] = []


# Enable forward references for recursive model
CategoryNode.model_rebuild()


class CategoryTree(BaseModel):
    """Schema for listing categories as a forest."""
    items: list[CategoryNode]
    total: int


class CategoryDescendants(BaseModel):
    """Ids of every category below a given one."""
    category_id: str
    descendant_ids: list[str]
