import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .admin import router as admin_router
from .auth import router as auth_router
from .core import config
from .core.database import Database
from .core.exceptions import AppError, StoreError
from .core.schema import ensure_schema
from .orders import router as orders_router
from .profile import router as profile_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Schema failures propagate and abort startup; no request is served on a broken store
    ensure_schema(app.state.database)
    yield
    app.state.database.dispose()


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": message})


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the API around the given connection pool."""
    app = FastAPI(title="Orderdesk", lifespan=lifespan)
    app.state.database = database or Database()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms")
        return response

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if isinstance(exc, StoreError):
            logger.error(f"Store error on {request.method} {request.url.path}: {exc.message}")
            if not config.DEBUG:
                return _error_response(exc.status_code, StoreError.default_message)
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if errors:
            first = errors[0]
            field = ".".join(str(part) for part in first.get("loc", ())[1:])
            message = f"{field}: {first.get('msg')}" if field else first.get("msg")
        else:
            message = "Invalid request"
        return _error_response(400, message)

    @app.exception_handler(SQLAlchemyError)
    async def store_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.exception(f"Database error on {request.method} {request.url.path}")
        message = str(exc) if config.DEBUG else StoreError.default_message
        return _error_response(500, message)

    # Exception handler for generic exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {str(exc)}")
        return _error_response(500, "Internal server error")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    app.include_router(auth_router)
    app.include_router(profile_router)
    app.include_router(orders_router)
    app.include_router(admin_router)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("orderdesk.main:app", host="0.0.0.0", port=config.PORT, log_level="info")
