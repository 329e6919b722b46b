"""Store aggregate: the tenant that owns every other catalog record."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ecom.domain.model.value_objects import new_id, require_text, utc_now


@dataclass
class Store:

    id: str
    name: str
    user_id: str
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @staticmethod
    def create(name: str, user_id: str) -> Store:
        return Store(
            id=new_id(),
            name=require_text(name, "Name"),
            user_id=require_text(user_id, "User id"),
        )

    def rename(self, name: str) -> None:
        self.name = require_text(name, "Name")
        self.updated_at = utc_now()
