"""JSON-file-backed implementation of Repository.

One file per table, holding a list of records. Every call re-reads the
file and every write rewrites it, so several processes (API server, CLI)
see each other's changes without a cache to invalidate.
"""

from __future__ import annotations

import json
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from ecom.domain.repository.repository import Repository

T = TypeVar("T")


class JsonRepository(Repository[T]):

    # save/delete read the whole file, change it and write it back. FastAPI runs
    # sync routes in a threadpool, so writers share one lock; processes do not.
    _write_lock = threading.Lock()

    def __init__(
        self,
        file_path: Path,
        to_raw: Callable[[T], dict[str, Any]],
        to_domain: Callable[[dict[str, Any]], T],
    ) -> None:
        self._file_path = file_path
        self._to_raw = to_raw
        self._to_domain = to_domain
        self._ensure_file()

    # --- Repository interface -------------------------------------------------

    def get_by_id(self, entity_id: str) -> T | None:
        for raw in self._load_raw():
            if raw["id"] == entity_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[T]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, entity: T) -> None:
        record = self._to_raw(entity)
        with self._write_lock:
            records = self._load_raw()
            for i, raw in enumerate(records):
                if raw["id"] == record["id"]:
                    records[i] = record
                    break
            else:
                records.append(record)
            self._persist_raw(records)

    def delete(self, entity_id: str) -> None:
        with self._write_lock:
            records = self._load_raw()
            remaining = [raw for raw in records if raw["id"] != entity_id]
            if len(remaining) != len(records):
                self._persist_raw(remaining)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict[str, Any]]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict[str, Any]]) -> None:
        # Replace the file in one step so unlocked readers never see half of it.
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        tmp_path.write_text(
            json.dumps(records, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )
        os.replace(tmp_path, self._file_path)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
