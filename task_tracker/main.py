"""
FastAPI Application Entry Point - Application initialization and configuration
"""

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from typing import Optional
import logging
import sys
import time

from task_tracker.core.config import Settings, settings, validate_config, is_production
from task_tracker.core.exceptions import StorageError
from task_tracker.database import Database

logger = logging.getLogger(__name__)

def configure_logging(debug: bool) -> None:
    """Configure application logging with timestamp and log level"""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )

def create_application(
    config: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Factory function to create and configure FastAPI application.
    Tests pass their own settings and an in-memory Database.
    """
    config = config or settings
    production = is_production(config)

    app = FastAPI(
        title=config.APP_NAME,
        version=config.APP_VERSION,
        debug=config.DEBUG,
        docs_url="/api/docs" if not production else None,  # Hide Swagger docs in production
        redoc_url="/api/redoc" if not production else None,  # Hide ReDoc in production
        description="Task tracking CRUD service"
    )
    app.state.settings = config
    app.state.database = database or Database.from_settings(config)

    setup_middleware(app, config)  # Configure CORS and request logging
    setup_exception_handlers(app)  # Configure global error handling
    setup_event_handlers(app)  # Configure startup/shutdown hooks
    setup_routers(app)  # Mount API route handlers

    return app

def setup_middleware(app: FastAPI, config: Settings) -> None:
    """Configure application middleware - runs on every request/response"""

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log every request with method, path, status, and processing time"""
        start_time = time.time()
        logger.info(f"➡️  {request.method} {request.url.path}")

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            f"⬅️  {request.method} {request.url.path} "
            f"- Status: {response.status_code} - Time: {process_time:.2f}s"
        )
        response.headers["X-Process-Time"] = str(process_time)
        return response

def setup_exception_handlers(app: FastAPI) -> None:
    """Configure global exception handlers for consistent error responses"""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """
        Malformed request data (bad JSON, wrong types, unknown enum names).
        Returns field-level error details.
        """
        errors = []
        for error in exc.errors():
            errors.append({
                "field": ".".join(str(x) for x in error["loc"]),  # Field path (e.g., "body.priority")
                "message": error["msg"],
                "type": error["type"]
            })

        logger.warning(f"❌ Validation error on {request.url.path}: {errors}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"error": "Validation Error", "detail": errors, "timestamp": time.time()}
        )

    @app.exception_handler(StorageError)
    async def storage_exception_handler(request: Request, exc: StorageError):
        """
        Storage failures - logs full details but returns generic message.
        Never expose database schema or internal errors to client.
        """
        logger.error(
            f"❌ Database error on {request.method} {request.url.path}: {str(exc)}",
            exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Database Error",
                "detail": "An error occurred while processing your request. Please try again later.",
                "timestamp": time.time()
            }
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Catch-all handler for unexpected exceptions"""
        logger.error(
            f"❌ Unhandled exception on {request.method} {request.url.path}: {str(exc)}",
            exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal Server Error",
                "detail": "An unexpected error occurred.",
                "timestamp": time.time()
            }
        )

def setup_event_handlers(app: FastAPI) -> None:
    """Configure startup and shutdown event handlers"""

    @app.on_event("startup")
    async def startup_event():
        """
        Validate config, check the database and create tables.
        Fail fast: If checks fail, application won't start.
        """
        config: Settings = app.state.settings
        database: Database = app.state.database
        logger.info(f"🚀 Starting {config.APP_NAME}...")

        try:
            validate_config(config)
        except ValueError as e:
            logger.error(f"❌ Configuration validation failed: {e}")
            sys.exit(1)

        if not database.check_connection():
            logger.error("❌ Cannot connect to database. Exiting.")
            sys.exit(1)

        try:
            database.create_tables()
        except Exception:
            logger.error("❌ Cannot create database tables. Exiting.")
            sys.exit(1)

        logger.info(f"📊 Database pool: {database.pool_stats()}")
        logger.info("✅ Application started successfully")
        logger.info(f"🌍 Environment: {config.ENVIRONMENT}")
        logger.info(f"🔧 Debug mode: {config.DEBUG}")

    @app.on_event("shutdown")
    async def shutdown_event():
        """Run on application shutdown - clean up resources gracefully"""
        logger.info(f"🛑 Shutting down {app.state.settings.APP_NAME}...")
        app.state.database.close()
        logger.info("✅ Shutdown complete")

def setup_routers(app: FastAPI) -> None:
    """Mount API routers"""

    @app.get("/health", tags=["Health"])
    def health_check(request: Request):
        """
        Health check endpoint for monitoring and load balancers.
        Returns application status, database connectivity, and version info.
        """
        database: Database = request.app.state.database
        db_healthy = database.check_connection()

        return {
            "status": "healthy" if db_healthy else "unhealthy",
            "database": "connected" if db_healthy else "disconnected",
            "pool_stats": database.pool_stats(),
            "timestamp": time.time(),
            "version": request.app.state.settings.APP_VERSION
        }

    from task_tracker.api import tasks
    app.include_router(tasks.router, prefix="/tasks", tags=["Tasks"])

configure_logging(settings.DEBUG)

# Create application instance
app = create_application()

if __name__ == "__main__":
    """
    Direct execution entry point - for development only.
    Production: Use `uvicorn task_tracker.main:app --host 0.0.0.0 --port 8080`
    """
    import uvicorn
    uvicorn.run(
        "task_tracker.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,  # Auto-reload on code changes (development only)
        log_level="debug" if settings.DEBUG else "info"
    )
