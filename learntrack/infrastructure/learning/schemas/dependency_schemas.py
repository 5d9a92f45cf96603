"""Pydantic schemas for Dependency API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field, model_validator


class DependencyCreateRequest(BaseModel):
    """Schema for adding prerequisites to an item: one target or a batch."""

    target_item_id: int | None = Field(None, description="Single prerequisite item")
    target_item_ids: list[int] | None = Field(
        None, min_length=1, description="Several prerequisite items"
    )

    @model_validator(mode="after")
    def validate_single_or_batch(self) -> "DependencyCreateRequest":
        """Exactly one of target_item_id and target_item_ids must be given."""
        if (self.target_item_id is None) == (self.target_item_ids is None):
            msg = "Provide either target_item_id or target_item_ids"
            raise ValueError(msg)
        return self


class Dependency(BaseModel):
    """Schema for Dependency response."""

    id: int
    source_item_id: int
    target_item_id: int
    created_at: datetime


class RelatedItem(BaseModel):
    """Summary of the item on the far end of a dependency."""

    id: int
    title: str
    status: str
    progress: float


class DependencyWithItem(Dependency):
    item: RelatedItem


class DependenciesListResponse(BaseModel):
    """Schema for an item's dependencies response."""

    prerequisites: list[DependencyWithItem] = Field(
        default_factory=list, description="Items this item requires"
    )
    dependents: list[DependencyWithItem] = Field(
        default_factory=list, description="Items that require this item"
    )


class DependenciesCreateResponse(BaseModel):
    """Schema for created dependencies response."""

    dependencies: list[Dependency]


class CircularCheckRequest(BaseModel):
    """Schema for previewing a dependency."""

    source_item_id: int
    target_item_id: int


class CircularCheckResponse(BaseModel):
    """Schema for the outcome of a circular dependency check."""

    would_create_cycle: bool
    is_self_dependency: bool
    message: str
