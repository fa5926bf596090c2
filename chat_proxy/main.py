import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chat_proxy.api import chat, health, llm
from chat_proxy.core.errors import ChatProxyError
from chat_proxy.core.logging import configure_logging
from chat_proxy.core.settings import AVAILABLE_MODELS, Settings, get_settings

logger = logging.getLogger(__name__)


def log_startup(settings: Settings) -> None:
    logger.info("%s listening on port %s", settings.app_name, settings.port)
    logger.info("Groq models available:")
    for name, model in AVAILABLE_MODELS.items():
        logger.info("  %s: %s", name, model)

    if settings.has_api_key:
        logger.info("Groq API key found - real AI responses enabled")
    else:
        logger.warning(
            "No valid Groq API key found, using mock responses. "
            "Get a free key from https://console.groq.com/keys and set "
            "GROQ_API_KEY in the .env file to enable real AI."
        )


async def chat_proxy_error_handler(request: Request, exc: ChatProxyError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log_startup(settings)
        yield

    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ChatProxyError, chat_proxy_error_handler)

    app.include_router(chat.router, prefix="/api")
    app.include_router(llm.router, prefix="/api")

    app.include_router(health.router)

    return app


app = create_app()
