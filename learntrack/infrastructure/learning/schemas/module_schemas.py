"""Pydantic schemas for Module API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field


class ModuleCreateRequest(BaseModel):
    """Schema for adding a module to an item."""

    title: str = Field(..., min_length=1, max_length=200, description="Module title")
    order: int | None = Field(None, ge=0, description="Position; appended when omitted")


class ModuleUpdateRequest(BaseModel):
    """Schema for renaming or moving a module."""

    title: str | None = Field(None, min_length=1, max_length=200)
    order: int | None = Field(None, ge=0)


class ModuleStatusUpdateRequest(BaseModel):
    """Schema for moving a module to another status."""

    status: str = Field(..., description="Pendente, Em_Andamento or Concluido")


class ModuleOrderEntry(BaseModel):
    module_id: int
    order: int = Field(..., ge=0)


class ModuleReorderRequest(BaseModel):
    """Schema for reordering the modules of one item."""

    orders: list[ModuleOrderEntry] = Field(..., min_length=1)


class Module(BaseModel):
    """Schema for Module response."""

    id: int
    learning_item_id: int
    title: str
    status: str
    order: int
    created_at: datetime
    updated_at: datetime


class ModulesListResponse(BaseModel):
    """Schema for list of modules response."""

    modules: list[Module] = Field(..., description="List of modules")
