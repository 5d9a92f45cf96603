"""Pydantic schemas for the dashboard report endpoints."""

from datetime import date, datetime

from pydantic import BaseModel, Field


class StatusCount(BaseModel):
    status: str
    count: int


class CategoryCountItem(BaseModel):
    category_id: int
    name: str
    color: str
    count: int


class ReportItem(BaseModel):
    """Learning item summary as listed in reports."""

    id: int
    title: str
    status: str
    progress: float
    due_date: date | None
    category_id: int
    category_name: str
    updated_at: datetime


class ItemsByStatusResponse(BaseModel):
    items: list[StatusCount] = Field(..., description="One entry per status, in workflow order")


class ItemsByCategoryResponse(BaseModel):
    items: list[CategoryCountItem] = Field(
        ..., description="Categories the user has items in, by name"
    )


class ReportItemsResponse(BaseModel):
    items: list[ReportItem]


class DashboardMetricsResponse(BaseModel):
    """Schema for the combined dashboard figures."""

    total_items: int
    status_counts: list[StatusCount]
    category_counts: list[CategoryCountItem]
    average_progress: float = Field(..., description="Mean cached progress, 0-100")
    overdue: list[ReportItem]
    due_soon: list[ReportItem]
    near_completion: list[ReportItem]
    recently_updated: list[ReportItem]
