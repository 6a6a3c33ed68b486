"""
Models module - Pydantic schemas for data validation.
"""
from portfolio_chat.models.chat import (
    ChatRequest,
    ChatResponse,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ErrorResponse",
    "HealthResponse",
]
