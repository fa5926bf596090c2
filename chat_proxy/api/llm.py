from fastapi import APIRouter, Body, Depends

from chat_proxy.dependencies import get_groq_service
from chat_proxy.models.llm import (
    ConfigResponse,
    ErrorResponse,
    ModelsResponse,
    SelectModelRequest,
    SelectModelResponse,
)
from chat_proxy.services.groq_service import GroqService

router = APIRouter()


@router.get("/models", response_model=ModelsResponse)
def list_models(
    groq_service: GroqService = Depends(get_groq_service),
) -> ModelsResponse:
    return groq_service.list_models()


@router.post(
    "/model",
    response_model=SelectModelResponse,
    responses={400: {"model": ErrorResponse}},
)
def select_model(
    request: SelectModelRequest | None = Body(default=None),
    groq_service: GroqService = Depends(get_groq_service),
) -> SelectModelResponse:
    """Switch the model used for every following completion. Not persisted."""
    request = request or SelectModelRequest()
    return groq_service.select_model(request.model)


@router.get("/config", response_model=ConfigResponse)
def get_config(
    groq_service: GroqService = Depends(get_groq_service),
) -> ConfigResponse:
    return groq_service.config()
