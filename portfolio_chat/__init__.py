"""
Portfolio chat relay.

Package layout:
- api/       : FastAPI application and routes
- core/      : Configuration, logging, exceptions, middleware
- services/  : Relevance check and answer orchestration
- llm/       : Groq client and prompt text
- models/    : Pydantic request/response schemas
"""
__version__ = "0.1.0"
