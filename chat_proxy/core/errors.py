from __future__ import annotations


class ChatProxyError(Exception):
    """Base class for every error the proxy raises on purpose."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequest(ChatProxyError):
    status_code = 400


class InvalidModel(ChatProxyError):
    status_code = 400

    def __init__(self, model: object):
        super().__init__("Invalid model")
        self.model = model


class UpstreamFailure(ChatProxyError):
    """
    Raised while talking to the completion provider.

    These never reach the client: the chat service logs them and answers
    with a mock reply instead.
    """

    status_code = 502


class InvalidCredential(UpstreamFailure):
    def __init__(self) -> None:
        super().__init__("Invalid Groq API key. Please check your API key.")


class RateLimited(UpstreamFailure):
    def __init__(self) -> None:
        super().__init__("Rate limit exceeded. Please try again later.")


class UpstreamError(UpstreamFailure):
    def __init__(self, status: int | None, message: str):
        if status is None:
            super().__init__(f"API error: {message}")
        else:
            super().__init__(f"API error: {status} - {message}")
        self.status = status


class MalformedUpstreamResponse(UpstreamFailure):
    def __init__(self) -> None:
        super().__init__("Invalid response format from Groq API")
