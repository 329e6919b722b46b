"""Size: a named size (``Large``) with its short display value (``L``)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ecom.domain.model.value_objects import new_id, require_text, utc_now


@dataclass
class Size:

    id: str
    store_id: str
    name: str
    value: str
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @staticmethod
    def create(store_id: str, name: str, value: str) -> Size:
        return Size(
            id=new_id(),
            store_id=store_id,
            name=require_text(name, "Name"),
            value=require_text(value, "Value"),
        )

    def update(self, name: str, value: str) -> None:
        self.name = require_text(name, "Name")
        self.value = require_text(value, "Value")
        self.updated_at = utc_now()
