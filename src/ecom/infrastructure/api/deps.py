"""FastAPI dependencies."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from ecom.domain.repository.record_store import RecordStore


def get_db(request: Request) -> RecordStore:
    return request.app.state.db


DbDep = Annotated[RecordStore, Depends(get_db)]
