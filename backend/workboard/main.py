"""
Workboard Backend: FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() builds the storage engine, the two repositories, the
       middleware chain, the exception handlers and the routers.
Who:   uvicorn imports `workboard.main:app`; tests call create_app(settings)
       to get an isolated app with its own database.

Application Architecture:
    ┌───────────────────────────────────────────────────────┐
    │                     FastAPI App                       │
    │                                                       │
    │  app.state: settings, storage (AsyncEngine),          │
    │             employee_repository, task_repository      │
    │                                                       │
    │  Middleware Chain:                                    │
    │  ┌──────────┐ ┌──────────┐ ┌──────────┐               │
    │  │   CORS   │→│  Req ID  │→│ Logging  │               │
    │  └──────────┘ └──────────┘ └──────────┘               │
    │                                                       │
    │  Routes:                                              │
    │  ┌─────┐ ┌────────────┐ ┌────────┐ ┌─────────┐        │
    │  │ GET/│ │ /employees │ │ /tasks │ │ /health │        │
    │  └─────┘ └────────────┘ └────────┘ └─────────┘        │
    │                                                       │
    │  Exception Handlers:                                  │
    │  Malformed→400 │ NotFound→404 │ invalid→422           │
    │  Storage→500 │ no route→404 │ *→500                   │
    └───────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Create the employees and tasks tables (failures are logged and the
       service keeps running; affected routes then answer 500)
    3. Seed sample employees when enabled
    Shutdown:
    1. Dispose the storage engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from workboard import __version__
from workboard.config import Settings, settings as default_settings
from workboard.database import create_storage, dispose_storage
from workboard.exceptions import (
    MalformedBodyError,
    NotFoundError,
    StorageError,
    WorkboardError,
)
from workboard.middleware.logging import RequestLoggingMiddleware
from workboard.middleware.request_id import RequestIDMiddleware, request_id_var
from workboard.routes import employees, health, index, tasks
from workboard.services.repository import (
    build_employee_repository,
    build_task_repository,
)
from workboard.services.seeding import seed_employees

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str) -> None:
    """
    Configure the root logger once per process start.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our own access logger replaces uvicorn's
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    # SQL echo goes through this logger; keep it unless echo was asked for
    if log_level != "DEBUG":
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Create tables on startup and release the engine on shutdown.

    A table that fails to initialize is not retried. The process stays up and
    requests touching that table fail with the storage error.
    """
    config: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(config.log_level)
    logger.info("Workboard %s starting up...", __version__)

    employee_repository = app.state.employee_repository
    task_repository = app.state.task_repository

    employees_ready = False
    for repository in (employee_repository, task_repository):
        try:
            await repository.initialize()
        except StorageError as e:
            logger.error("Error initializing %s table: %s", repository.name, e.message)
            continue
        if repository is employee_repository:
            employees_ready = True

    if config.seed_sample_data and employees_ready:
        await seed_employees(employee_repository)

    logger.info("Server is running on http://%s:%d", config.backend_host, config.backend_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Workboard shutting down...")
    await dispose_storage(app.state.storage)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP responses.

    Handler table:
        MalformedBodyError      → 400 {"error": "Malformed JSON body: ..."}
        NotFoundError           → 404 {<body_key>: "<Resource> not found"}
        RequestValidationError  → 422 {"error": "<location>: <reason>; ..."}
        StorageError            → 500 {"error": <driver message>}
        HTTPException 404/405   → 404 {"error": "Cannot <METHOD> <path>"}
        other HTTPException     → its own status, {"error": detail}
        Exception (fallback)    → 500 {"error": str(exc)}

    A path that exists only for other methods (GET /employees/{id}) is a
    routing miss like any unknown path, so 405 is reported as 404.

    Every error body carries a single "error" key (the task lookup uses
    "message"); FastAPI's default {"detail": ...} shape never reaches clients.
    """

    @app.exception_handler(MalformedBodyError)
    async def handle_malformed_body(request: Request, exc: MalformedBodyError):
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={exc.body_key: exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        return JSONResponse(status_code=422, content={"error": problems or "Invalid request"})

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        rid = request_id_var.get("")
        logger.error("[%s] Storage error: %s | Context: %s", rid, exc.message, exc.context)
        # Picked up by the access log line
        request.state.storage_error = exc.context
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(WorkboardError)
    async def handle_workboard_error(request: Request, exc: WorkboardError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return JSONResponse(
                status_code=404,
                content={"error": f"Cannot {request.method} {request.url.path}"},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(status_code=500, content={"error": str(exc)})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration to use; defaults to the environment-driven
                  singleton from workboard.config.

    Returns:
        A configured app that owns a fresh storage engine. Tables are created
        when the lifespan starts.
    """
    config = settings or default_settings

    app = FastAPI(
        title="Employee and Task Management API",
        description="APIs for managing employees and tasks",
        version=__version__,
        lifespan=lifespan,
    )

    # ── Storage & Repositories ────────────────────────────────────────────
    storage = create_storage(config)
    app.state.settings = config
    app.state.storage = storage
    app.state.employee_repository = build_employee_repository(storage)
    app.state.task_repository = build_task_repository(storage)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: CORS → RequestID → Logging → routes
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(index.router)
    app.include_router(employees.router)
    app.include_router(tasks.router)
    app.include_router(health.router)

    return app


# uvicorn workboard.main:app
app = create_app()
