from fastapi import APIRouter, Depends

from chat_proxy.core.settings import get_settings
from chat_proxy.dependencies import get_groq_service
from chat_proxy.models.llm import HealthResponse
from chat_proxy.services.groq_service import GroqService

router = APIRouter()


@router.get("/")
def root_health_check() -> dict[str, str]:
    return {"status": "running", "service": get_settings().app_name}


@router.get("/api/health", response_model=HealthResponse)
def health_check(
    groq_service: GroqService = Depends(get_groq_service),
) -> HealthResponse:
    return groq_service.health()
