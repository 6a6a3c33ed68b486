"""
LLM module - Language model integration.

This module handles all LLM interactions:
- Prompt construction
- API calls to Groq
- Reading completion content out of responses
"""
from portfolio_chat.llm.client import GroqChatClient, extract_content

__all__ = [
    "GroqChatClient",
    "extract_content",
]
