"""
Outfit Service v1.0.0
Weather-aware outfit recommendations over HTTP.

API ROUTES:
-----------
- /api/options                   - Occasion / style / mood choices
- /api/weather                   - Current weather for a location
- /api/recommendation            - Weather lookup + outfit generation
- /api/recommendation/shuffle    - Regenerate with a new item/tip order
- /health, /metrics              - Health and monitoring
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from outfit_service.app.routes import router, VERSION
from outfit_service.config import get_settings
from outfit_service.observability import is_logging_enabled

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    logger.info("=" * 50)
    logger.info(f"Outfit Service v{VERSION} Starting...")
    logger.info("=" * 50)

    logger.info(f"Default location: {settings.default_location}")
    logger.info(f"Geocoding: {settings.geocoding_url}")
    logger.info(f"Forecast: {settings.forecast_url}")
    logger.info(f"Logging: {'enabled' if is_logging_enabled() else 'disabled'}")

    logger.info("✓ Service ready! http://localhost:8000")
    logger.info("✓ Metrics available at /metrics")
    logger.info("=" * 50)

    yield

    logger.info("Service shutting down...")


app = FastAPI(
    title="Outfit Service",
    description="Weather-aware outfit recommendations",
    version=VERSION,
    lifespan=lifespan
)

# ============================================================================
# MIDDLEWARE
# ============================================================================
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

app.include_router(router)
