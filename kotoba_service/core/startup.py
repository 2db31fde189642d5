from contextlib import asynccontextmanager
import logging
import httpx
from typing import Optional
from fastapi import FastAPI

from .settings import Settings
from .logging_config import setup_logging
from kotoba_service.services.word_detail_service import WordDetailService

logger = logging.getLogger(__name__)


def build_http_client(settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """Shared upstream client; redirects are followed like a browser fetch would."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.UPSTREAM_TIMEOUT_SEC),
        limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
        follow_redirects=True,
        transport=transport,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = getattr(app.state, "settings", None) or Settings()
    setup_logging(settings)
    app.state.settings = settings

    app.state.http_client = build_http_client(settings)
    app.state.word_detail_service = WordDetailService(
        app.state.http_client,
        api_key=settings.API_KEY,
        api_url=settings.API_URL,
        default_model=settings.DEFAULT_MODEL,
    )

    if not settings.API_KEY:
        logger.warning("API_KEY is not set; lookups will require a caller-supplied key.")
    logger.info("Startup complete", extra={"api_url": settings.API_URL, "model": settings.DEFAULT_MODEL})

    yield

    await app.state.http_client.aclose()
    logger.info("Clients closed. Shutdown complete.")
