"""
Navigation Menu Domain Models

A Menu is a named container placed in the header or the footer.
Its MenuItems form a parent-pointer hierarchy within the menu;
`order` defines the sibling sequence.

Author: TM3
Date: 2026-10-19
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Literal, Optional

MenuLocation = Literal["header", "footer"]
MenuItemType = Literal["page", "category", "custom"]


class Menu(BaseModel):
    """Named container of menu items"""

    id: int = Field(..., description="Menu ID")
    name: str = Field(..., description="Menu name")
    location: MenuLocation = Field(..., description="Where the menu is rendered")

    model_config = ConfigDict(from_attributes=True)


class MenuItem(BaseModel):
    """
    Menu item domain model

    Fields:
        id: Menu item ID
        menu_id: Owning menu
        title: Link text
        type: page, category or custom
        value: Page view name, category slug or URL, depending on type
        parent_id: Parent item within the same menu (None for top level)
        order: Position among siblings (1..N after a save)
    """

    id: int = Field(..., description="Menu item ID")
    menu_id: int = Field(..., description="Owning menu ID")
    title: str = Field(..., description="Link text")
    type: MenuItemType = Field(..., description="Link type")
    value: str = Field(..., description="View name, category slug or URL")
    parent_id: Optional[int] = Field(None, description="Parent menu item ID")
    order: int = Field(..., description="Sibling order")

    model_config = ConfigDict(from_attributes=True)


class MenuItemCreate(BaseModel):
    """Schema for adding an item to a menu working copy"""
    title: str
    type: MenuItemType
    value: str
    parent_id: Optional[int] = None


class PageLink(BaseModel):
    """A storefront page that can be linked from a menu"""
    view: str
    title: str
