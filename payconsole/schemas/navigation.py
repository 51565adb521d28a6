# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Navigation schemas."""

from pydantic import BaseModel, ConfigDict


class SubMenuItemSchema(BaseModel):
    """Schema representing a child navigation entry."""

    model_config = ConfigDict(from_attributes=True)

    title: str
    url: str
    icon: str


class MenuItemSchema(BaseModel):
    """Schema representing a navigation entry the subject may see."""

    model_config = ConfigDict(from_attributes=True)

    title: str
    url: str
    icon: str
    sub_items: list[SubMenuItemSchema] = []


class MenuSchema(BaseModel):
    """Schema for the filtered navigation menu."""

    portal: str
    items: list[MenuItemSchema]
