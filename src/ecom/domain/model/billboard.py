"""Billboard: a labelled hero image shown at the top of storefront pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ecom.domain.model.value_objects import new_id, require_text, utc_now


@dataclass
class Billboard:

    id: str
    store_id: str
    label: str
    image_url: str
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @staticmethod
    def create(store_id: str, label: str, image_url: str) -> Billboard:
        return Billboard(
            id=new_id(),
            store_id=store_id,
            label=require_text(label, "Label"),
            image_url=require_text(image_url, "Image URL"),
        )

    def update(self, label: str, image_url: str) -> None:
        self.label = require_text(label, "Label")
        self.image_url = require_text(image_url, "Image URL")
        self.updated_at = utc_now()
