"""
Chat Service - Business logic for the portfolio chat relay.

This service orchestrates one request:
1. Checks that the Groq API key is configured
2. Asks the model whether the question is about the portfolio
3. Declines politely when it is not
4. Otherwise answers with the portfolio context as system prompt

Both model calls are awaited one after the other; the relevance verdict
gates the answer call.
"""
from typing import Optional

import httpx
from groq import APIError, APIStatusError

from portfolio_chat.core.config import Settings, get_settings
from portfolio_chat.core.exceptions import ConfigurationError, UpstreamError
from portfolio_chat.core.logging_config import get_logger
from portfolio_chat.llm.client import GroqChatClient, extract_content
from portfolio_chat.llm.prompts import (
    PORTFOLIO_CONTEXT,
    POLITE_DECLINE_MESSAGE,
    build_relevance_prompt,
)

logger = get_logger(__name__)

NO_RESPONSE_FALLBACK = "No response from AI"


class ChatService:
    """
    Service answering portfolio questions through Groq.

    The Groq client is created on first use, so a missing API key is
    reported per request instead of preventing startup.

    Example:
        >>> service = ChatService()
        >>> await service.reply("What are Swarup's skills?")
        'He knows React, Node.js...'
        >>> await service.reply("What is the capital of France?")
        "I'm here to help you learn about Swarup Kumar's portfolio, ..."
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the chat service.

        Args:
            settings: Settings instance, defaults to get_settings()
            http_client: Optional httpx client handed to the Groq SDK
        """
        self.settings = settings or get_settings()
        self._http_client = http_client
        self._llm_client: Optional[GroqChatClient] = None

    def _get_client(self) -> GroqChatClient:
        """Return the Groq client, raising ConfigurationError without a key."""
        if not self.settings.groq_api_key:
            logger.error("GROQ_API_KEY is not configured")
            raise ConfigurationError()
        if self._llm_client is None:
            self._llm_client = GroqChatClient(
                api_key=self.settings.groq_api_key,
                settings=self.settings,
                http_client=self._http_client,
            )
        return self._llm_client

    async def check_relevance(self, question: str) -> bool:
        """
        Decide whether a question is about the portfolio.

        Fail-open policy: when the check itself fails (transport error,
        non-2xx status, unreadable body, missing content) the question is
        treated as relevant. Answering an off-topic question is preferred
        over refusing an on-topic one. These failures are logged, never
        raised.

        Args:
            question: Raw user question

        Returns:
            True when the model answered "YES" or the check failed,
            False for any other model reply
        """
        client = self._get_client()
        messages = [{"role": "system", "content": build_relevance_prompt(question)}]

        try:
            payload = await client.complete(
                messages,
                temperature=self.settings.relevance_temperature,
                max_tokens=self.settings.relevance_max_tokens,
            )
        except (APIError, ValueError) as e:
            logger.warning(f"Relevance check failed, allowing question: {e}")
            return True

        answer = extract_content(payload)
        if answer is None:
            logger.warning("Relevance check returned no content, allowing question")
            return True

        is_relevant = answer.strip().upper() == "YES"
        logger.info(f"Relevance verdict: {answer.strip()!r} -> relevant={is_relevant}")
        return is_relevant

    async def generate_answer(self, question: str) -> str:
        """
        Answer a question grounded in the portfolio context.

        Args:
            question: Raw user question, passed through unmodified

        Returns:
            The model's reply, or a fixed fallback if the reply has no content

        Raises:
            UpstreamError: Groq answered with a non-2xx status (not retried)
        """
        client = self._get_client()
        messages = [
            {"role": "system", "content": PORTFOLIO_CONTEXT},
            {"role": "user", "content": question},
        ]

        try:
            payload = await client.complete(
                messages,
                temperature=self.settings.answer_temperature,
                max_tokens=self.settings.answer_max_tokens,
            )
        except APIStatusError as e:
            body = e.response.text
            logger.error(f"Groq API error: status={e.status_code} body={body}")
            raise UpstreamError(e.status_code, body) from e

        content = extract_content(payload)
        if not content:
            logger.warning("Groq returned no content, using fallback reply")
            return NO_RESPONSE_FALLBACK
        return content

    async def reply(self, message: str) -> str:
        """
        Run the full relay flow for one user message.

        Raises:
            ConfigurationError: GROQ_API_KEY is not set
            UpstreamError: The answer call failed upstream
        """
        self._get_client()

        logger.info(f"Processing message: length={len(message)}")

        if not await self.check_relevance(message):
            return POLITE_DECLINE_MESSAGE

        answer = await self.generate_answer(message)
        logger.info(f"Answer generated: length={len(answer)}")
        return answer

    async def close(self) -> None:
        """Close the Groq client if one was created."""
        if self._llm_client is not None:
            await self._llm_client.close()
            self._llm_client = None


# Global service instance
_chat_service: Optional[ChatService] = None


def get_chat_service() -> ChatService:
    """Get or create the chat service instance."""
    global _chat_service
    if _chat_service is None:
        _chat_service = ChatService()
    return _chat_service


def reset_chat_service(service: Optional[ChatService] = None) -> None:
    """Replace the chat service singleton (useful for testing)."""
    global _chat_service
    _chat_service = service
