"""
Health Check Routes - liveness and readiness endpoints.

Used by the hosting platform's probes and for quick manual checks.
Neither endpoint calls the Groq API.
"""
from fastapi import APIRouter

from portfolio_chat import __version__
from portfolio_chat.core.config import get_settings
from portfolio_chat.core.logging_config import get_logger
from portfolio_chat.models.chat import HealthResponse

logger = get_logger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check endpoint",
)
async def health_check() -> HealthResponse:
    """Report that the API process is up."""
    logger.debug("Health check requested")

    return HealthResponse(
        status="healthy",
        version=__version__,
        llm_configured=get_settings().llm_configured,
    )


@router.get(
    "/ready",
    response_model=HealthResponse,
    summary="Readiness check endpoint",
    description="""
    Reports whether the service can answer chat requests.

    Status is "ready" when GROQ_API_KEY is configured, otherwise
    "not_configured". The provider itself is not contacted.
    """
)
async def readiness_check() -> HealthResponse:
    logger.debug("Readiness check requested")

    configured = get_settings().llm_configured

    return HealthResponse(
        status="ready" if configured else "not_configured",
        version=__version__,
        llm_configured=configured,
    )
