"""Main FastAPI application for CampusCoffee."""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from . import __version__
from .api import pos, users
from .api.middleware import ProblemDetailsMiddleware, register_problem_handlers
from .config import config_manager, get_config
from .db.database import SessionLocal, init_db
from .utils.logging_config import get_logger

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Validate configuration and prepare storage on startup."""
    config = get_config()
    for issue in config_manager.validate_config():
        logger.warning(f"Configuration issue: {issue}")

    if config.app.storage == "sqlalchemy":
        init_db()
    logger.info(
        f"CampusCoffee {__version__} started with {config.app.storage} storage"
    )
    yield
    logger.info("CampusCoffee shutting down")


app = FastAPI(
    title="CampusCoffee",
    description="Points of sale and users on campus",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(ProblemDetailsMiddleware)
register_problem_handlers(app)

app.include_router(pos.router)
app.include_router(users.router)


@app.get("/", include_in_schema=False)
async def root():
    """Redirect to the API docs."""
    return RedirectResponse(url="/docs")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "campuscoffee", "version": __version__}


@app.get("/ready")
def readiness_check():
    """Readiness check that validates storage connectivity."""
    start_time = time.time()
    config = get_config()
    checks = {"config": not config_manager.validate_config(), "storage": False}
    errors = []

    if config.app.storage == "memory":
        checks["storage"] = True
    else:
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
            checks["storage"] = True
        except SQLAlchemyError as e:
            errors.append(f"Database check failed: {e}")
        finally:
            db.close()

    all_ready = all(checks.values())
    response = {
        "status": "ready" if all_ready else "not_ready",
        "service": "campuscoffee",
        "version": __version__,
        "storage": config.app.storage,
        "checks": checks,
        "response_time_ms": round((time.time() - start_time) * 1000, 2),
    }
    if errors:
        response["errors"] = errors

    return JSONResponse(content=response, status_code=200 if all_ready else 503)
