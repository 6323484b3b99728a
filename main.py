import logging
import os
import subprocess
import sys
import time
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

import click
import uvicorn
from alembic import command
from alembic.config import Config
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.database import Base, SessionLocal, engine
from app.core.exceptions import AppException
from app.core.limiter import custom_rate_limit_exceeded_handler, limiter
from app.core.security import jwt_manager
from app.models import *
from app.routers import routes

# ============================================================================
# Directory Setup
# ============================================================================
BASE_DIR = Path(__file__).parent
LOG_FILE = BASE_DIR / settings.log_file
LOGS_DIR = LOG_FILE.parent

LOGS_DIR.mkdir(parents=True, exist_ok=True)
os.chmod(LOGS_DIR, 0o755)


# ============================================================================
# Logging Configuration
# ============================================================================
def setup_logging():
    """Configure logging for the application."""
    log_level = logging.DEBUG if settings.debug else getattr(
        logging, settings.log_level.upper(), logging.INFO
    )
    log_format = "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] %(message)s"

    handlers = [
        logging.StreamHandler(sys.stdout),
        logging.FileHandler(
            LOG_FILE,
            mode="a",
            encoding="utf-8",
        ),
    ]

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=handlers,
        force=True,  # Override any existing configuration
    )

    # Suppress verbose third-party logs
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return logging.getLogger(__name__)


logger = setup_logging()


# ============================================================================
# Application Lifespan
# ============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the attempt and question paper tables if migrations have not run."""
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        logger.error(f"✗ Could not prepare attempt tables: {e}", exc_info=True)
        raise
    logger.info(
        f"✓ {settings.app_name} {settings.app_version} ready "
        f"({'production' if settings.production else 'development'})"
    )

    yield

    logger.info(f"✓ {settings.app_name} stopped")


# ============================================================================
# FastAPI Application
# ============================================================================
app = FastAPI(
    title=settings.app_name,
    description=settings.app_description,
    version=settings.app_version,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    openapi_url="/openapi.json" if settings.debug else None,
    debug=settings.debug,
    lifespan=lifespan,
)

# ============================================================================
# Middleware Configuration
# ============================================================================
app.state.limiter = limiter

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def trace_request(request: Request, call_next):
    """Echo or mint X-Request-ID and report handling time; slow attempt writes are logged."""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    started = time.perf_counter()
    response = await call_next(request)
    elapsed = time.perf_counter() - started

    response.headers["X-Request-ID"] = request_id
    response.headers["X-Process-Time"] = f"{elapsed:.4f}"
    if elapsed > 1 and request.method != "GET":
        logger.warning(
            f"Slow {request.method} {request.url.path} [{request_id}]: {elapsed:.2f}s"
        )
    return response


# ============================================================================
# Exception Handlers
# ============================================================================
@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__}: {exc.message}")
    else:
        logger.info(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.message, "type": exc.error_type},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Validation error: {exc.errors()}")
    details = []
    for error in exc.errors():
        if isinstance(error, dict):
            details.append(
                {
                    "loc": list(error.get("loc", [])),
                    "msg": str(error.get("msg", "")),
                    "type": str(error.get("type", "")),
                }
            )
        else:
            details.append({"error": str(error)})
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": "Validation error",
            "type": "validation_error",
            "details": details,
        },
    )


@app.exception_handler(SQLAlchemyError)
async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"SQLAlchemy error: {type(exc).__name__}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Database error occurred",
            "type": "internal_error",
        },
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=True)
    content = {"success": False, "error": "Internal server error", "type": "internal_error"}
    if not settings.production:
        content["detail"] = f"{type(exc).__name__}: {exc}"
    return JSONResponse(status_code=500, content=content)


app.add_exception_handler(RateLimitExceeded, custom_rate_limit_exceeded_handler)


# ============================================================================
# Health Check Endpoints
# ============================================================================
@app.get("/")
async def root():
    """Root endpoint with basic application info."""
    return {
        "app_name": settings.app_name,
        "version": settings.app_version,
        "status": "healthy",
        "environment": "production" if settings.production else "development",
    }


@app.get("/health")
@limiter.limit("10/minute")
async def health_check(request: Request):
    """Detailed health check endpoint."""
    try:
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
        finally:
            db.close()
        db_status = "healthy"
    except SQLAlchemyError as e:
        logger.error(f"Health check failed: {e}")
        db_status = "unhealthy"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "timestamp": time.time(),
        "environment": "production" if settings.production else "development",
        "database": db_status,
    }


# ============================================================================
# Routes
# ============================================================================
for router in routes:
    app.include_router(router)

logger.info(f"✓ Registered {len(routes)} routers")


# ============================================================================
# CLI Commands
# ============================================================================
@click.group()
def cli():
    """Exam prep application management CLI."""
    pass


def run_migrations():
    alembic_cfg = Config(str(BASE_DIR / "alembic.ini"))
    try:
        command.upgrade(alembic_cfg, "head")
    except SQLAlchemyError as e:
        logger.error(f"✗ Migration failed: {type(e).__name__}", exc_info=True)
        raise click.ClickException(f"Migration failed: {e}")
    logger.info("✓ Attempt store schema is at head")


def gunicorn_command(host: str, port: int, workers: int) -> list:
    """Gunicorn argv serving the app with uvicorn workers."""
    return [
        "gunicorn",
        "main:app",
        "--worker-class", "uvicorn.workers.UvicornWorker",
        "--workers", str(workers),
        "--bind", f"{host}:{port}",
        "--access-logfile", "-",
        "--error-logfile", "-",
        "--log-level", settings.log_level,
        "--timeout", "120",
        "--graceful-timeout", "30",
    ]


@cli.command()
@click.option("--host", default="127.0.0.1", help="Host to bind the server to")
@click.option("--port", default=8000, help="Port to run the server on")
@click.option("--reload", is_flag=True, help="Enable auto-reload (development only)")
def dev(host: str, port: int, reload: bool):
    """Run the API with uvicorn; tables are created on startup."""
    logger.info(f"Serving {settings.app_name} on http://{host}:{port} (reload={reload})")
    uvicorn.run("main:app", host=host, port=port, reload=reload, log_level="debug")


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind the server to")
@click.option("--port", default=8000, help="Port to run the server on")
@click.option("--workers", default=4, help="Number of worker processes")
def prod(host: str, port: int, workers: int):
    """Migrate the attempt store, then serve with gunicorn."""
    run_migrations()

    cmd = gunicorn_command(host, port, workers)
    logger.info(f"Starting gunicorn: {' '.join(cmd)}")
    try:
        subprocess.run(cmd, check=True)
    except subprocess.CalledProcessError as e:
        raise click.ClickException(f"Gunicorn exited with status {e.returncode}")
    except FileNotFoundError:
        raise click.ClickException("Gunicorn not installed")


@cli.command()
def migrate():
    """Apply database migrations."""
    run_migrations()


@cli.command("issue-token")
@click.option("--user-id", required=True, type=int, help="User id to embed in the token")
def issue_token(user_id: int):
    """Print a development access token for a user id."""
    if settings.production:
        raise click.ClickException("Refusing to issue tokens in production mode")
    click.echo(jwt_manager.create_access_token(user_id))


@cli.command()
def info():
    """Display application information."""
    click.echo(f"Application: {settings.app_name}")
    click.echo(f"Version: {settings.app_version}")
    click.echo(f"Debug Mode: {settings.debug}")
    click.echo(f"Database: {settings.sqlalchemy_url.split('@')[-1]}")
    click.echo(f"Logs Directory: {LOGS_DIR.absolute()}")


if __name__ == "__main__":
    cli()
