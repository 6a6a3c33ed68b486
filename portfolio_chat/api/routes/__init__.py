"""
API Routes module - Endpoint definitions.

- chat.py   : Portfolio chat relay endpoint
- health.py : Health check endpoints
"""
from portfolio_chat.api.routes.chat import router as chat_router
from portfolio_chat.api.routes.health import router as health_router

__all__ = [
    "chat_router",
    "health_router",
]
