"""
Inquiry Interview - FastAPI Application.

Main FastAPI app that serves the interview API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from inquiry_interview.api.routes import get_engine, limiter, router as api_router
from inquiry_interview.core.config import configure_logging
from inquiry_interview.infra.llm.gemini import GeminiQuestionWriter

# Configure logging
configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup loads and validates the question catalog.
    """
    logger.info("🚀 Inquiry Interview API starting...")

    engine = get_engine()
    logger.info(f"📚 Question catalog loaded: {len(engine.catalog)} phase entries")

    if not GeminiQuestionWriter().is_available:
        logger.warning("⚠️ GEMINI_API_KEY not set, questions will use template wording")

    yield

    logger.info("👋 Inquiry Interview API shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Inquiry Interview",
        description="Entrance interview practice API for inquiry activities",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # CORS middleware for local development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # In production, restrict this
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app


# Create app instance
app = create_app()
