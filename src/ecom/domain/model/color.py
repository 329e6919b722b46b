"""Color: a named swatch products can be filtered by."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ecom.domain.model.value_objects import (
    new_id,
    require_hex_code,
    require_text,
    utc_now,
)


@dataclass
class Color:
    """A color owned by one store.

    ``value`` is the hex code rendered as the swatch, e.g. ``#ff0000``.
    """

    id: str
    store_id: str
    name: str
    value: str
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @staticmethod
    def create(store_id: str, name: str, value: str) -> Color:
        return Color(
            id=new_id(),
            store_id=store_id,
            name=require_text(name, "Name"),
            value=require_hex_code(value),
        )

    def update(self, name: str, value: str) -> None:
        self.name = require_text(name, "Name")
        self.value = require_hex_code(value)
        self.updated_at = utc_now()
