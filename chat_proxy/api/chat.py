import logging

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from chat_proxy.core.errors import ChatProxyError
from chat_proxy.dependencies import get_groq_service
from chat_proxy.models.chat import ChatErrorResponse, ChatRequest, ChatResponse
from chat_proxy.models.llm import ErrorResponse
from chat_proxy.services.groq_service import GroqService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ChatErrorResponse}},
)
async def chat_endpoint(
    request: ChatRequest | None = Body(default=None),
    groq_service: GroqService = Depends(get_groq_service),
):
    """
    Answer a visitor's message.

    Upstream failures never surface here: they come back as a mock reply
    with `isMock: true`. Only a missing message is reported as an error.
    """
    request = request or ChatRequest()
    try:
        return await groq_service.chat(
            message=request.message,
            history=request.chat_history,
        )
    except ChatProxyError:
        raise
    except Exception as e:
        logger.exception("Chat endpoint failed")
        return JSONResponse(
            status_code=500,
            content=ChatErrorResponse(
                error="Internal server error",
                message=str(e),
                response=groq_service.mock_response(request.message or ""),
            ).model_dump(),
        )
