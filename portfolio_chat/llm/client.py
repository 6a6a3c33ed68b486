"""
LLM Client for Groq API integration.

This module provides a thin async interface to the Groq chat-completions
endpoint. It handles:
- API client initialization
- Request construction (model, messages, sampling parameters)
- Returning the decoded JSON body untouched

Response interpretation and error policy belong to the service layer:
the relevance check and the answer call treat failures differently.
"""
from typing import Any, Dict, List, Optional

import httpx
from groq import AsyncGroq

from portfolio_chat.core.config import Settings, get_settings
from portfolio_chat.core.logging_config import get_logger

logger = get_logger(__name__)


class GroqChatClient:
    """
    Async client for one-shot Groq chat completions.

    SDK retries are disabled: every call maps to exactly one HTTP request.
    Non-2xx responses raise groq.APIStatusError, transport failures raise
    groq.APIConnectionError.

    Example:
        >>> client = GroqChatClient(api_key="gsk_...")
        >>> payload = await client.complete(
        ...     [{"role": "user", "content": "Hi"}], temperature=0.7, max_tokens=64
        ... )
        >>> extract_content(payload)
        'Hello!'
    """

    def __init__(
        self,
        api_key: str,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the Groq SDK client.

        Args:
            api_key: Groq API key sent as the Bearer credential
            settings: Settings instance, defaults to get_settings()
            http_client: Optional httpx client (used by tests to mock the transport)
        """
        self.settings = settings or get_settings()
        self.model = self.settings.llm_model
        self._client = AsyncGroq(
            api_key=api_key,
            max_retries=0,
            http_client=http_client,
        )
        logger.info(f"Groq client initialized (model={self.model})")

    async def complete(
        self,
        messages: List[Dict[str, str]],
        temperature: float,
        max_tokens: int,
    ) -> Dict[str, Any]:
        """
        Send one chat-completion request.

        Args:
            messages: OpenAI-style message list
            temperature: Sampling temperature
            max_tokens: Output token cap

        Returns:
            Decoded JSON body of the completion

        Raises:
            groq.APIStatusError: Upstream answered with a non-2xx status
            groq.APIConnectionError: Request never got a response
            ValueError: Body was not valid JSON
        """
        raw = await self._client.chat.completions.with_raw_response.create(
            model=self.model,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        return raw.http_response.json()

    async def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        await self._client.close()


def extract_content(payload: Any) -> Optional[str]:
    """
    Read choices[0].message.content from a completion body.

    Returns None for any shape that does not carry a string there.
    """
    if not isinstance(payload, dict):
        return None
    choices = payload.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    return content if isinstance(content, str) else None
