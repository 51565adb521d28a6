# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Navigation menu endpoint."""

from fastapi import APIRouter, Depends

from payconsole.api.deps import get_current_subject
from payconsole.rbac.subject import Subject
from payconsole.schemas.navigation import MenuItemSchema, MenuSchema
from payconsole.services import authorization_service

router = APIRouter()


@router.get("/menu", response_model=MenuSchema, summary="Get the caller's navigation menu")
def get_menu(subject: Subject = Depends(get_current_subject)):
    """Return the navigation tree for the caller's portal, reduced to the
    entries it may open. The result is already authorized.
    """
    portal, items = authorization_service.build_menu(subject)
    return MenuSchema(
        portal=portal.value,
        items=[MenuItemSchema.model_validate(item) for item in items],
    )
