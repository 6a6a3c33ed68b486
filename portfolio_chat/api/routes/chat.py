"""
Chat Routes - the portfolio chat relay endpoint.

POST /api/chat takes {"message": "..."} and returns {"content": "..."}.
Failures are raised as PortfolioChatError subclasses and rendered as
{"error": "..."} by the handlers registered in api.main.
"""
from fastapi import APIRouter, Request
from pydantic import ValidationError as PydanticValidationError

from portfolio_chat.core.exceptions import (
    PortfolioChatError,
    UnexpectedError,
    ValidationError,
)
from portfolio_chat.core.logging_config import get_logger
from portfolio_chat.models.chat import ChatRequest, ChatResponse, ErrorResponse
from portfolio_chat.services.chat_service import get_chat_service

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/chat",
    tags=["Chat"],
    responses={
        400: {"model": ErrorResponse, "description": "Missing or non-string message"},
        500: {"model": ErrorResponse, "description": "Configuration or internal error"},
    }
)


@router.post(
    "",
    response_model=ChatResponse,
    summary="Ask the portfolio assistant a question",
    description="""
    Send a question about Swarup Kumar's portfolio.

    The question first goes through a relevance check. Off-topic questions
    get a fixed polite decline; on-topic ones are answered by the model
    using the portfolio details as context.

    If the model provider returns an error, its HTTP status is passed through.
    """,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ChatRequest.model_json_schema()}},
        }
    },
)
async def send_message(request: Request) -> ChatResponse:
    """
    Process a visitor question and return the assistant's reply.

    The body is parsed by hand so that a bad message produces the fixed
    400 error body instead of FastAPI's default 422.
    """
    try:
        payload = await request.json()

        try:
            chat_request = ChatRequest.model_validate(payload)
        except PydanticValidationError as e:
            logger.warning(f"Rejected chat request: {e.error_count()} validation error(s)")
            raise ValidationError() from e

        content = await get_chat_service().reply(chat_request.message)
        return ChatResponse(content=content)

    except PortfolioChatError:
        raise
    except Exception as e:
        logger.exception(f"Chat API error: {e}")
        raise UnexpectedError(str(e)) from e
