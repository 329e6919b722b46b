"""Filtering and ordering used by ``Repository.find_many``.

``where`` is a mapping of attribute name to the value it must equal.
``order_by`` maps attribute names to ``"asc"`` or ``"desc"``; earlier keys
take precedence.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from operator import attrgetter
from typing import Any, Literal, TypeVar

T = TypeVar("T")

SortDirection = Literal["asc", "desc"]
OrderBy = Mapping[str, SortDirection]


def matches(record: Any, where: Mapping[str, Any]) -> bool:
    return all(getattr(record, key) == value for key, value in where.items())


def filter_records(records: Iterable[T], where: Mapping[str, Any] | None) -> list[T]:
    if not where:
        return list(records)
    return [record for record in records if matches(record, where)]


def sort_records(records: Iterable[T], order_by: OrderBy | None) -> list[T]:
    result = list(records)
    if not order_by:
        return result
    # Stable sorts applied from the least significant key up.
    for key, direction in reversed(list(order_by.items())):
        if direction not in ("asc", "desc"):
            raise ValueError(f"Invalid sort direction {direction!r} for {key!r}")
        result.sort(key=attrgetter(key), reverse=direction == "desc")
    return result
