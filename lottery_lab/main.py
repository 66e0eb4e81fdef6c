"""FastAPI application entry point."""

import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from lottery_lab.config import settings

# Configure loguru
logger.remove()
logger.add(sys.stderr, level="DEBUG" if settings.DEBUG else "INFO")
if settings.LOG_FILE:
    logger.add(settings.LOG_FILE, rotation="10 MB", retention="7 days", level="INFO")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("Starting {} ...", settings.APP_NAME)

    from lottery_lab.db.engine import create_tables
    await create_tables()

    yield

    from lottery_lab.db.engine import engine
    await engine.dispose()
    logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="Lottery results parser, pattern statistics and number suggestions",
    lifespan=lifespan,
)

# Include API routers
from lottery_lab.api.v1.router import api_router  # noqa: E402
app.include_router(api_router, prefix="/api/v1")
