"""Color routes: /api/{store_id}/colors."""

from __future__ import annotations

from fastapi import APIRouter

from ecom.application.colors import (
    CreateColorHandler,
    DeleteColorHandler,
    UpdateColorHandler,
)
from ecom.application.common import require_record, require_store
from ecom.infrastructure.api.deps import DbDep
from ecom.infrastructure.api.presenters import present_color
from ecom.infrastructure.api.schemas import ColorBody, ColorOut

router = APIRouter(prefix="/{store_id}/colors", tags=["colors"])


@router.get("", summary="List a store's colors")
def list_colors(store_id: str, db: DbDep) -> list[ColorOut]:
    require_store(db, store_id)
    colors = db.colors.find_many(
        where={"store_id": store_id},
        order_by={"created_at": "desc"},
    )
    return [present_color(color) for color in colors]


@router.get("/{color_id}", summary="Get one color")
def get_color(store_id: str, color_id: str, db: DbDep) -> ColorOut:
    return present_color(require_record(db.colors, color_id, store_id, "Color"))


@router.post("", summary="Create a color")
def create_color(store_id: str, body: ColorBody, db: DbDep) -> ColorOut:
    color = CreateColorHandler(db).handle(store_id, name=body.name, value=body.value)
    return present_color(color)


@router.patch("/{color_id}", summary="Update a color")
def update_color(store_id: str, color_id: str, body: ColorBody, db: DbDep) -> ColorOut:
    color = UpdateColorHandler(db).handle(
        store_id, color_id, name=body.name, value=body.value
    )
    return present_color(color)


@router.delete("/{color_id}", summary="Delete a color")
def delete_color(store_id: str, color_id: str, db: DbDep) -> ColorOut:
    return present_color(DeleteColorHandler(db).handle(store_id, color_id))
