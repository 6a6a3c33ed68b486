"""
Prompts module - LLM prompt templates.

Prompts are stored as separate Python files so prompt changes are
reviewed like code.
"""
from portfolio_chat.llm.prompts.portfolio_prompts import (
    PORTFOLIO_CONTEXT,
    RELEVANCE_CHECK_PROMPT,
    POLITE_DECLINE_MESSAGE,
    build_relevance_prompt,
)

__all__ = [
    "PORTFOLIO_CONTEXT",
    "RELEVANCE_CHECK_PROMPT",
    "POLITE_DECLINE_MESSAGE",
    "build_relevance_prompt",
]
