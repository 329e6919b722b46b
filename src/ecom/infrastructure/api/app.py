"""Admin API application factory.

Domain errors raised anywhere below a route are turned into JSON error
responses here, so routes never catch them themselves.
"""

from __future__ import annotations

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.responses import JSONResponse

from ecom.domain.exceptions import EntityNotFoundError, IntegrityError, ValidationError
from ecom.domain.repository.record_store import RecordStore
from ecom.infrastructure.api.routes import (
    billboards,
    categories,
    colors,
    orders,
    products,
    sizes,
    stores,
)
from ecom.infrastructure.bootstrap import json_record_store
from ecom.utils.logger import get_logger

logger = get_logger(__name__)

api_router = APIRouter(prefix="/api")
# Stores first: /api/stores/{id} would otherwise look like /api/{store_id}/<resource>.
api_router.include_router(stores.router)
api_router.include_router(billboards.router)
api_router.include_router(categories.router)
api_router.include_router(colors.router)
api_router.include_router(sizes.router)
api_router.include_router(products.router)
api_router.include_router(orders.router)


def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def create_app(db: RecordStore | None = None) -> FastAPI:
    app = FastAPI(title="ecom admin API")
    app.state.db = db if db is not None else json_record_store()
    app.include_router(api_router)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
        return _error(status.HTTP_400_BAD_REQUEST, exc)

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, exc)

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        logger.warning(f"{request.method} {request.url.path} conflicts: {exc}")
        return _error(status.HTTP_409_CONFLICT, exc)

    @app.get("/health", include_in_schema=False)
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
