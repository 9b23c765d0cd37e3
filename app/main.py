import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config.profile import DEFAULT_PROFILE
from app.config.settings import settings
from app.core.errors import ApiError, MissingParameter, NotFound
from app.core.logging_config import request_line, setup_logging
from app.routers import metro, system
from app.utils.response import error_response


# configure logging before anything logs
logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Announce where the API is served and which line it simulates."""
    p = DEFAULT_PROFILE
    logger.info(f"Dernier Metro API online at {settings.public_url} (docs: {settings.public_url}/docs)")
    logger.info(
        f"Line {p.line}: every {p.headway_min} min, "
        f"open {p.opens_at // 60:02d}:{p.opens_at % 60:02d}-{p.closes_at // 60:02d}:{p.closes_at % 60:02d} ({p.timezone})"
    )
    yield
    logger.info("Dernier Metro API stopped")


app = FastAPI(
    title="Dernier Metro API",
    description="Simulated next arrival of the metro for a station",
    version="1.0.0",
    servers=[{"url": settings.public_url}],
    openapi_url="/api-docs.json",
    docs_url="/docs",
    redoc_url=None,
    lifespan=lifespan,
)

app.include_router(system.router)
app.include_router(metro.router)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log method, path, status_code and elapsed_ms for every request."""
    start = time.perf_counter()
    # unexpected errors escape call_next and are answered by the outer 500 handler
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        elapsed = (time.perf_counter() - start) * 1000
        logger.info(request_line(request.method, request.url.path, status_code, elapsed))


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=exc.status_code, content=error_response(exc.message))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    for err in errors:
        loc = err.get("loc", ())
        if err.get("type") == "missing" and len(loc) == 2 and loc[0] == "query":
            missing = MissingParameter(str(loc[1]))
            return JSONResponse(status_code=missing.status_code, content=error_response(missing.message))
    message = errors[0].get("msg", "invalid request") if errors else "invalid request"
    return JSONResponse(status_code=400, content=error_response(message))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # unknown path or unsupported method on a known path
    if exc.status_code in (404, 405):
        missing = NotFound()
        return JSONResponse(status_code=missing.status_code, content=error_response(missing.message))
    return JSONResponse(status_code=exc.status_code, content=error_response(str(exc.detail)))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content=error_response("internal error"))
