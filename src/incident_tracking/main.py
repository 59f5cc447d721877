from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text

from incident_tracking.config import settings
from incident_tracking.db.session import shutdown
from incident_tracking.dependencies import DB
from incident_tracking.exceptions import DomainError, InvalidPageSizeError, NotFoundError
from incident_tracking.logging import get_logger
from incident_tracking.middleware import RequestIDMiddleware
from incident_tracking.routers.incident import router as incident_router
from incident_tracking.schemas.error import error_body

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log startup, then close database connections on shutdown."""
    logger.info("app_started", app_env=settings.app_env)
    yield
    await shutdown()
    logger.info("app_stopped")


app = FastAPI(title=settings.app_name, lifespan=lifespan)
app.add_middleware(RequestIDMiddleware)
app.include_router(incident_router)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content=error_body("not_found", exc.message))


@app.exception_handler(InvalidPageSizeError)
async def invalid_page_size_handler(request: Request, exc: InvalidPageSizeError) -> JSONResponse:
    return JSONResponse(status_code=400, content=error_body("invalid_page_size", exc.message))


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Return 400 for generic domain-level violations."""
    logger.warning("domain_error", error=exc.message, path=request.url.path)
    return JSONResponse(status_code=400, content=error_body("domain_error", exc.message))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the full traceback and return a generic 500 without details."""
    logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    return JSONResponse(
        status_code=500,
        content=error_body("internal_error", "Internal server error"),
    )


@app.get("/health")
async def health(db: DB) -> dict[str, str]:
    """Return 200 only if the database answers a ping query."""
    await db.execute(text("SELECT 1"))
    return {"status": "ok"}
