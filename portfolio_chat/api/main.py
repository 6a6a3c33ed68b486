"""
FastAPI Application Entry Point.

This module creates and configures the FastAPI application instance.
It handles:
1. Application initialization
2. Router registration
3. Middleware configuration (CORS, request logging)
4. Exception handlers mapping errors to {"error": ...} bodies
5. Startup/shutdown events

Run with: uvicorn portfolio_chat.api.main:app --reload
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from portfolio_chat import __version__
from portfolio_chat.core.config import get_settings
from portfolio_chat.core.exceptions import PortfolioChatError
from portfolio_chat.core.logging_config import setup_logging, get_logger
from portfolio_chat.core.middleware import RequestLoggingMiddleware
from portfolio_chat.api.routes import chat_router, health_router
from portfolio_chat.services.chat_service import get_chat_service


# Initialize logging before anything else
settings = get_settings()
setup_logging(settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    - Startup: log effective configuration
    - Shutdown: close the Groq HTTP client
    """
    logger.info(f"Starting {settings.app_name} in {settings.app_env} mode")
    logger.info(f"LLM Model: {settings.llm_model}")
    if not settings.llm_configured:
        logger.warning("GROQ_API_KEY is not set; chat requests will fail until it is configured")

    yield

    logger.info(f"Shutting down {settings.app_name}")
    await get_chat_service().close()


app = FastAPI(
    title="Portfolio Chat API",
    description="""
    AI assistant for Swarup Kumar's portfolio website, powered by Groq.

    Questions are first checked for relevance to the portfolio; off-topic
    questions receive a polite decline instead of an answer.
    """,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ============================================================
# Middleware Configuration
# ============================================================

if settings.enable_request_logging:
    app.add_middleware(RequestLoggingMiddleware)
    logger.info("Request logging middleware enabled")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


# ============================================================
# Exception Handlers
# ============================================================

@app.exception_handler(PortfolioChatError)
async def portfolio_chat_error_handler(request: Request, exc: PortfolioChatError):
    """Handle all application exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Handle uncaught exceptions globally.

    Keeps the {"error": ...} body shape even for failures outside the
    chat route.
    """
    logger.exception(f"Unhandled exception: {exc}")

    return JSONResponse(
        status_code=500,
        content={"error": str(exc) or "Internal server error"}
    )


# ============================================================
# Routers
# ============================================================

app.include_router(health_router)
app.include_router(chat_router)


@app.get("/", include_in_schema=False)
async def root():
    """Basic service info."""
    return {
        "message": "Portfolio Chat API",
        "version": __version__,
        "documentation": "/docs",
        "health": "/health"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "portfolio_chat.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development()
    )
