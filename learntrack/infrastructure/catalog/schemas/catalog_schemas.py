"""Pydantic schemas for Category and Tag API request/response validation."""

from pydantic import BaseModel, Field


class CategoryCreateRequest(BaseModel):
    """Schema for creating a category."""

    name: str = Field(..., min_length=1, max_length=50, description="Unique category name")
    color: str = Field(..., description="Hex color such as #3B82F6")


class CategoryUpdateRequest(BaseModel):
    """Schema for renaming or recoloring a category."""

    name: str | None = Field(None, min_length=1, max_length=50)
    color: str | None = None


class Category(BaseModel):
    """Schema for Category response."""

    id: int
    name: str
    color: str


class CategoriesListResponse(BaseModel):
    categories: list[Category]


class TagCreateRequest(BaseModel):
    """Schema for creating a tag; the name is normalized to lowercase."""

    name: str = Field(..., min_length=1)


class Tag(BaseModel):
    """Schema for Tag response."""

    id: int
    name: str


class TagsListResponse(BaseModel):
    tags: list[Tag]
