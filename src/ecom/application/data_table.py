"""Data table state: search filter and pagination over listing rows.

The table only reads row attributes named by its column declarations;
it knows nothing about the entity behind a row.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ecom.application.columns import Column

DEFAULT_PAGE_SIZE = 10


class DataTable:

    def __init__(
        self,
        columns: Sequence[Column],
        data: Sequence[Any],
        search_key: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self.columns = tuple(columns)
        self._data = list(data)
        self.search_key = search_key
        self.page_size = page_size
        self.page_index = 0
        self._filter = ""

    # --- Filtering ------------------------------------------------------------

    @property
    def filter_value(self) -> str:
        return self._filter

    def set_filter(self, value: str | None) -> None:
        """Keep rows whose ``search_key`` contains *value*, ignoring case."""
        if value and self.search_key is None:
            raise ValueError("This table has no search key")
        self._filter = (value or "").strip()
        self.page_index = 0

    @property
    def filtered_rows(self) -> list[Any]:
        if not self._filter:
            return list(self._data)
        needle = self._filter.lower()
        return [
            row
            for row in self._data
            if needle in str(getattr(row, self.search_key)).lower()
        ]

    # --- Pagination -----------------------------------------------------------

    @property
    def page_count(self) -> int:
        total = len(self.filtered_rows)
        return max(1, -(-total // self.page_size))

    @property
    def rows(self) -> list[Any]:
        start = self.page_index * self.page_size
        return self.filtered_rows[start:start + self.page_size]

    @property
    def can_previous_page(self) -> bool:
        return self.page_index > 0

    @property
    def can_next_page(self) -> bool:
        return self.page_index + 1 < self.page_count

    def next_page(self) -> None:
        if self.can_next_page:
            self.page_index += 1

    def previous_page(self) -> None:
        if self.can_previous_page:
            self.page_index -= 1

    def go_to_page(self, index: int) -> None:
        self.page_index = min(max(index, 0), self.page_count - 1)

    # --- Cells ----------------------------------------------------------------

    @property
    def headers(self) -> list[str]:
        return [column.header for column in self.columns]

    @staticmethod
    def cell(row: Any, column: Column) -> str:
        value = getattr(row, column.accessor_key)
        if isinstance(value, bool):
            return "Yes" if value else "No"
        return str(value)

    def cells(self, row: Any) -> list[str]:
        return [self.cell(row, column) for column in self.columns]
