"""
Request and Response models for the Chat API.

These Pydantic models define the contract between client and server.
Every /chat response body carries exactly one of `content` or `error`.
"""
from datetime import datetime

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """
    Request model for the /chat endpoint.

    Attributes:
        message: The visitor's question. Must be a non-empty JSON string;
            other types are rejected rather than coerced.
    """
    message: str = Field(
        ...,
        min_length=1,
        strict=True,
        description="The user's message or question",
        examples=["What are Swarup's skills?"]
    )


class ChatResponse(BaseModel):
    """Response model for the /chat endpoint."""
    content: str = Field(
        ...,
        description="The assistant's reply, or the fixed decline message"
    )


class ErrorResponse(BaseModel):
    """Standard error response model."""
    error: str


class HealthResponse(BaseModel):
    """Response model for the /health endpoints."""
    status: str = Field(default="healthy")
    version: str
    llm_configured: bool
    timestamp: datetime = Field(default_factory=datetime.utcnow)
