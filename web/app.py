"""
FastAPI application

Router registration, error mapping and app setup.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.config.loader import get_settings
from core.errors import LedgerError, StorageError, ValidationError
from web.routes import expenses, health

logger = logging.getLogger(__name__)

API_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """App lifecycle"""
    from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
    from core.ledger.store import ExpenseStore
    from core.utils.ids import get_id_generator

    settings = get_settings()

    logger.info("================================")
    logger.info(" EXPENSE LEDGER SERVICE START")
    logger.info("================================")
    logger.info(f"Port: {settings.web_port}")
    logger.info(f"Database: {settings.db_path}")
    logger.info(f"Partners: {', '.join(settings.partners)}")

    # Create the schema on startup
    async with SQLiteAdapter(settings.db_path) as db:
        await init_schema(db)

        # Ids issued by this process must exceed every stored id
        last_id = await ExpenseStore(db).max_numeric_id()
        if last_id is not None:
            get_id_generator().observe(str(last_id))

    logger.info(f"API available at http://{settings.config.web_host}:{settings.web_port}/api")

    yield

    logger.info("Service stopped")


def _error_response(status_code: int, message: str, **extra) -> JSONResponse:
    content = {"error": message}
    content.update({k: v for k, v in extra.items() if v is not None})
    return JSONResponse(status_code=status_code, content=content)


def register_error_handlers(app: FastAPI) -> None:
    """Map the error taxonomy to HTTP responses"""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        logger.warning(
            "Rejected invalid expense",
            extra={"path": request.url.path, "fields": exc.fields},
        )
        return _error_response(400, exc.message, fields=exc.fields)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        fields = sorted({
            str(err["loc"][-1]) for err in exc.errors() if err.get("loc")
        })
        logger.warning(
            "Malformed request body",
            extra={"path": request.url.path, "fields": fields},
        )
        return _error_response(400, "Invalid request body", fields=fields or None)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error(
            "Storage error",
            extra={"path": request.url.path, "method": request.method, "error": exc.message},
        )
        return _error_response(500, exc.message)

    @app.exception_handler(LedgerError)
    async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unexpected error",
            extra={"path": request.url.path, "method": request.method},
            exc_info=exc,
        )
        return _error_response(500, "Internal server error")


def create_app() -> FastAPI:
    """Application factory"""
    settings = get_settings()

    app = FastAPI(
        title="Pair Ledger API",
        description="Shared expense tracker for two partners",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.config.cors_origins),
        # browsers reject credentials with a wildcard origin
        allow_credentials="*" not in settings.config.cors_origins,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(
            f"{request.method} {request.url.path}",
            extra={"origin": request.headers.get("origin", "none")},
        )
        return await call_next(request)

    register_error_handlers(app)

    # =========================================================================
    # API routers
    # =========================================================================

    app.include_router(health.router)
    app.include_router(expenses.router)

    # Unknown /api/* routes (registered last)
    @app.api_route("/api/{path:path}", methods=API_METHODS, include_in_schema=False)
    async def unknown_api_route(request: Request, path: str) -> JSONResponse:
        logger.warning(f"Unknown API route: {request.method} {request.url.path}")
        return _error_response(404, "API route not found")

    return app


app = create_app()
