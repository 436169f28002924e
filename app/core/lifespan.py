# app/core/lifespan.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from app.db import upstream
from app.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # --- Startup ---
    await upstream.connect()
    logger.info("Upstream client ready base_url=%s", settings.UPSTREAM_BASE_URL)

    # Application runs
    yield

    # --- Shutdown ---
    await upstream.disconnect()
    logger.info("Upstream client closed")
