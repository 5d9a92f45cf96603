"""Pydantic schemas for LearningItem API request/response validation."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from learntrack.infrastructure.learning.schemas.module_schemas import Module


class TagSummary(BaseModel):
    """Tag as embedded in an item."""

    id: int
    name: str


class LearningItemCreateRequest(BaseModel):
    """Schema for creating a learning item, optionally with its modules."""

    title: str = Field(..., min_length=1, max_length=200, description="Item title")
    category_id: int = Field(..., description="ID of an existing category")
    description_md: str = Field("", description="Markdown description")
    due_date: date | None = Field(None, description="Optional due date, not in the past")
    tags: list[str] = Field(default_factory=list, description="Tag names, created on first use")
    modules: list[str] = Field(
        default_factory=list, description="Module titles, created in the given order"
    )


class LearningItemUpdateRequest(BaseModel):
    """
    Schema for editing a learning item.

    Omitted fields are left unchanged; an explicit ``"due_date": null``
    clears the due date.
    """

    title: str | None = Field(None, min_length=1, max_length=200)
    category_id: int | None = None
    description_md: str | None = None
    due_date: date | None = None
    tags: list[str] | None = None


class LearningItemStatusUpdateRequest(BaseModel):
    """Schema for moving an item to another status."""

    status: str = Field(..., description="Backlog, Em_Andamento, Pausado or Concluido")


class LearningItem(BaseModel):
    """Schema for LearningItem response."""

    id: int
    user_id: int
    category_id: int
    title: str
    description_md: str
    due_date: date | None
    status: str
    progress: float
    is_overdue: bool
    is_due_soon: bool
    tags: list[TagSummary]
    created_at: datetime
    updated_at: datetime


class LearningItemDetail(LearningItem):
    """Schema for a single item, with its modules in display order."""

    modules: list[Module]


class LearningItemsListResponse(BaseModel):
    """Schema for list of learning items response."""

    items: list[LearningItem] = Field(..., description="Learning items on this page")
    total: int = Field(..., ge=0, description="Number of items matching the filters")
    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)


class ProgressResponse(BaseModel):
    """Schema for a recalculated progress value."""

    learning_item_id: int
    progress: float = Field(..., description="Percentage of completed modules, 0-100")
    completed_modules: int
    total_modules: int
