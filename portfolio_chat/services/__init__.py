"""
Services module - Business logic and orchestration.

Services contain the core application logic:
- No HTTP concerns (those belong in api/)
- Orchestrate the relevance check and the answer call
"""
from portfolio_chat.services.chat_service import (
    ChatService,
    NO_RESPONSE_FALLBACK,
    get_chat_service,
    reset_chat_service,
)

__all__ = [
    "ChatService",
    "NO_RESPONSE_FALLBACK",
    "get_chat_service",
    "reset_chat_service",
]
