"""FastAPI application - statistics HTTP API."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from app.container import container
from app.repositories.common import RedisCacheStore
from app.repositories.db import close_db
from app.services.statistics import StatisticsQueryError
from web.api.errors import NotFoundError, ValidationError
from web.api.statistics.router import router as statistics_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    container.init()
    if isinstance(container.cache_store, RedisCacheStore):
        await container.cache_store.connect()
    yield
    if isinstance(container.cache_store, RedisCacheStore):
        await container.cache_store.close()
    close_db()


app = FastAPI(
    title="GES Statistics API",
    description="Enrolment and attendance statistics for schools, circuits, districts and regions.",
    version="1.0.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def request_context(request: Request, call_next):
    """Tag every log line emitted while handling a request."""
    with logger.contextualize(request=f"{request.method} {request.url.path}"):
        return await call_next(request)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return _error(400, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    detail = errors[0]["msg"] if errors else "Invalid request"
    return _error(400, f"Invalid request: {detail}")


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return _error(404, exc.message)


@app.exception_handler(StatisticsQueryError)
async def query_error_handler(request: Request, exc: StatisticsQueryError):
    logger.error("{} {} failed: {}", request.method, request.url.path, exc.message)
    return _error(500, exc.message)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on {} {}", request.method, request.url.path)
    return _error(500, str(exc) or "Internal server error")


app.include_router(statistics_router, prefix="/api", tags=["Statistics"])


@app.get("/api/ping", tags=["Health Check"])
async def ping():
    """Health check."""
    return {"success": True, "status": "ok", "version": app.version}
