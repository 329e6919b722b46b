"""Category: groups products and points at the billboard shown on its page."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ecom.domain.model.value_objects import new_id, require_text, utc_now


@dataclass
class Category:

    id: str
    store_id: str
    billboard_id: str
    name: str
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @staticmethod
    def create(store_id: str, billboard_id: str, name: str) -> Category:
        return Category(
            id=new_id(),
            store_id=store_id,
            billboard_id=require_text(billboard_id, "Billboard id"),
            name=require_text(name, "Name"),
        )

    def update(self, billboard_id: str, name: str) -> None:
        self.billboard_id = require_text(billboard_id, "Billboard id")
        self.name = require_text(name, "Name")
        self.updated_at = utc_now()
