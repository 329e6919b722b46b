"""Tests for DataTable filtering and pagination."""

from dataclasses import dataclass

import pytest

from ecom.application.columns import ORDER_COLUMNS, Column
from ecom.application.data_table import DataTable


@dataclass(frozen=True)
class Row:
    name: str
    value: str


COLUMNS = (Column("name", "Name"), Column("value", "Value"))


def _rows(count: int) -> list[Row]:
    return [Row(name=f"Color {i}", value=f"#00000{i % 10}") for i in range(count)]


class TestFilter:

    def test_case_insensitive_substring(self):
        rows = [Row("Red", "#f00"), Row("Dark red", "#800"), Row("Blue", "#00f")]
        table = DataTable(COLUMNS, rows, search_key="name")
        table.set_filter("RED")
        assert [r.name for r in table.rows] == ["Red", "Dark red"]

    def test_empty_filter_shows_everything(self):
        table = DataTable(COLUMNS, _rows(3), search_key="name")
        table.set_filter("")
        assert len(table.rows) == 3

    def test_filter_resets_page(self):
        table = DataTable(COLUMNS, _rows(25), search_key="name")
        table.next_page()
        table.set_filter("Color")
        assert table.page_index == 0

    def test_no_search_key(self):
        table = DataTable(COLUMNS, _rows(3))
        with pytest.raises(ValueError, match="no search key"):
            table.set_filter("x")


class TestPagination:

    def test_ten_rows_per_page(self):
        table = DataTable(COLUMNS, _rows(25))
        assert table.page_count == 3
        assert len(table.rows) == 10
        assert not table.can_previous_page
        assert table.can_next_page

    def test_last_page(self):
        table = DataTable(COLUMNS, _rows(25))
        table.next_page()
        table.next_page()
        assert [r.name for r in table.rows] == [f"Color {i}" for i in range(20, 25)]
        assert not table.can_next_page
        table.next_page()
        assert table.page_index == 2

    def test_previous_page(self):
        table = DataTable(COLUMNS, _rows(25))
        table.next_page()
        table.previous_page()
        assert table.page_index == 0
        table.previous_page()
        assert table.page_index == 0

    def test_empty_table_has_one_page(self):
        table = DataTable(COLUMNS, [])
        assert table.page_count == 1
        assert table.rows == []
        assert not table.can_next_page

    def test_go_to_page_is_clamped(self):
        table = DataTable(COLUMNS, _rows(25))
        table.go_to_page(99)
        assert table.page_index == 2
        table.go_to_page(-1)
        assert table.page_index == 0

    def test_page_size_must_be_positive(self):
        with pytest.raises(ValueError):
            DataTable(COLUMNS, [], page_size=0)


class TestCells:

    def test_headers_follow_column_order(self):
        table = DataTable(ORDER_COLUMNS, [])
        assert table.headers == ["Products", "Mobile.No", "Address", "Total Price", "Paid"]

    def test_booleans_render_as_yes_no(self):
        @dataclass
        class Flagged:
            name: str
            is_paid: bool

        table = DataTable((Column("name", "Name"), Column("is_paid", "Paid")), [])
        assert table.cells(Flagged("A", True)) == ["A", "Yes"]
        assert table.cells(Flagged("B", False)) == ["B", "No"]
