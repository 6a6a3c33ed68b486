"""
Configuration management via environment variables.

This module loads configuration from .env file using python-dotenv.
All configuration values are accessed through the Settings class.

The Groq API key is optional at load time: a missing key is reported
per request by the chat service, so the process can start (and serve
health checks) without it.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv


# Load .env file from project root
# This must happen before accessing os.environ
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    frozen=True makes the dataclass immutable, preventing accidental
    modification of settings at runtime.

    Attributes:
        app_name: Application identifier for logging
        app_env: Environment name (development, staging, production)
        log_level: Logging verbosity (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        groq_api_key: API key for Groq LLM service (None if not configured)
        llm_model: Model identifier used for both completion calls
        relevance_temperature: Sampling temperature of the relevance check
        relevance_max_tokens: Output cap of the relevance check (one word expected)
        answer_temperature: Sampling temperature of the answer call
        answer_max_tokens: Output cap of the answer call
        cors_origins: Origins allowed to call the API from a browser
        enable_request_logging: Log every request via middleware
    """
    # Application settings
    app_name: str
    app_env: str
    log_level: str

    # LLM settings
    groq_api_key: Optional[str]
    llm_model: str
    relevance_temperature: float
    relevance_max_tokens: int
    answer_temperature: float
    answer_max_tokens: int

    # HTTP settings
    cors_origins: Tuple[str, ...]
    enable_request_logging: bool

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env.lower() == "development"

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env.lower() == "production"

    @property
    def llm_configured(self) -> bool:
        """True when a non-empty Groq API key is present."""
        return bool(self.groq_api_key)


def _get_env(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value

    Raises:
        ValueError: If required variable is not set and no default provided
    """
    value = os.environ.get(key, default)
    if value is None:
        raise ValueError(
            f"Required environment variable '{key}' is not set. "
            f"Please check your .env file."
        )
    return value


def _parse_origins(raw: str) -> Tuple[str, ...]:
    """Split a comma-separated origin list, dropping blanks."""
    origins = tuple(part.strip() for part in raw.split(",") if part.strip())
    return origins or ("*",)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are read once; call get_settings.cache_clear() after
    changing the environment (tests do this).

    Returns:
        Settings instance with all configuration values

    Raises:
        ValueError: If a numeric variable cannot be parsed
    """
    return Settings(
        # Application
        app_name=_get_env("APP_NAME", "PortfolioChat"),
        app_env=_get_env("APP_ENV", "development"),
        log_level=_get_env("LOG_LEVEL", "INFO"),

        # LLM
        groq_api_key=os.environ.get("GROQ_API_KEY") or None,
        llm_model=_get_env("LLM_MODEL", "llama-3.3-70b-versatile"),
        relevance_temperature=float(_get_env("RELEVANCE_TEMPERATURE", "0.1")),
        relevance_max_tokens=int(_get_env("RELEVANCE_MAX_TOKENS", "10")),
        answer_temperature=float(_get_env("ANSWER_TEMPERATURE", "0.7")),
        answer_max_tokens=int(_get_env("ANSWER_MAX_TOKENS", "1024")),

        # HTTP
        cors_origins=_parse_origins(_get_env("CORS_ORIGINS", "*")),
        enable_request_logging=_get_env("ENABLE_REQUEST_LOGGING", "true").lower() == "true",
    )
