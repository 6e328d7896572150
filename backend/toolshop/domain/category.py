"""
Category Domain Model

Categories form a parent-pointer hierarchy used by the admin console
and by category links in navigation menus.

Author: TM3
Date: 2026-10-19
"""
import re
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


def slugify(name: str) -> str:
    """Lower-case the name and join whitespace runs with '-'"""
    return re.sub(r"\s+", "-", name.lower())


class Category(BaseModel):
    """
    Category domain model

    Fields:
        id: Internal category ID
        name: Display name
        slug: URL-friendly identifier
        parent_id: Parent category ID (None for top-level categories)
    """

    id: int = Field(..., description="Internal category ID")
    name: str = Field(..., description="Display name")
    slug: str = Field(..., description="URL-friendly identifier")
    parent_id: Optional[int] = Field(None, description="Parent category ID")

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        return self.model_dump()


class CategoryCreate(BaseModel):
    """Schema for creating a category; a blank slug is derived from the name"""
    name: str = Field(..., min_length=1)
    slug: Optional[str] = None
    parent_id: Optional[int] = None

    def resolved_slug(self) -> str:
        return self.slug or slugify(self.name)
