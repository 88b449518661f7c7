import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import get_settings
from app.core.database import engine, session_scope
from app.core.error_handlers import register_exception_handlers
from app.api.v1.router import api_router
from app import models  # noqa: F401  registers every table on Base.metadata
from app.models.base import Base
from app.services.seed_service import seed_catalog

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.seed_on_startup:
        Base.metadata.create_all(bind=engine)
        with session_scope() as db:
            seed_catalog(db)
    logger.info("HealthCare Plus backend started (env=%s)", settings.app_env)
    yield


app = FastAPI(
    title="HealthCare Plus Backend",
    lifespan=lifespan,
)

register_exception_handlers(app)


@app.get("/health", tags=["health"])
async def root_health() -> dict:
    """
    Global health check endpoint.
    """
    return {"status": "ok"}


# Mount API router
app.include_router(api_router, prefix=settings.api_prefix)
