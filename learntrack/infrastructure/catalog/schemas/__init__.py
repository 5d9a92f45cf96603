"""Catalog context schemas."""

from learntrack.infrastructure.catalog.schemas.catalog_schemas import (
    CategoriesListResponse,
    Category,
    CategoryCreateRequest,
    CategoryUpdateRequest,
    Tag,
    TagCreateRequest,
    TagsListResponse,
)

__all__ = [
    "CategoriesListResponse",
    "Category",
    "CategoryCreateRequest",
    "CategoryUpdateRequest",
    "Tag",
    "TagCreateRequest",
    "TagsListResponse",
]
