"""Pydantic schemas for Category model."""

from pydantic import Field

from campus_events.schemas.base import APIModel


class CategoryBase(APIModel):
    """Base fields for category."""

    name: str = Field(min_length=1, max_length=100)
    color: str = Field(min_length=1, max_length=20)
    is_default: bool = False


class CategoryCreate(CategoryBase):
    """Input for creating a category."""


class CategoryRead(CategoryBase):
    """Category output."""

    id: int
