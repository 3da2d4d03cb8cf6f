from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quotex.api.middleware import register_middleware
from quotex.api.routers import documents, health, query
from quotex.utils.logging_config import setup_logging
from quotex.utils.settings import settings

setup_logging(level=settings.app.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown."""
    logger.info("🚀 Starting quotex relay...")
    logger.info(f"✓ Upstream: {settings.openai.base_url} ({settings.relay.model})")
    logger.info(f"✓ Per-document context cap: {settings.relay.doc_char_limit} chars")
    if not settings.relay.api_key:
        logger.warning("⚠️  RELAY_OPENAI_API_KEY / OPENAI_API_KEY not set: /api/query will fail")
    logger.info(f"✓ API running on http://{settings.api.host}:{settings.api.port}")

    yield

    logger.info("Shutting down quotex relay...")


app = FastAPI(
    title="quotex relay",
    description="Holds a server-side corpus and forwards quote-grounded questions to OpenAI",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_middleware(app)

# Routers
app.include_router(health.router)
app.include_router(documents.router)
app.include_router(query.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "quotex.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
        log_level=settings.app.log_level.lower(),
        access_log=True
    )
