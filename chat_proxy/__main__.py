import uvicorn

from chat_proxy.core.settings import get_settings


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "chat_proxy.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
