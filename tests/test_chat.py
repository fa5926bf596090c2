import httpx
from fastapi.testclient import TestClient

from chat_proxy.main import create_app
from chat_proxy.services.mock_responses import MOCK_NOTICE


def _client(service) -> TestClient:
    app = create_app()

    # Lazy import so the override targets the dependency the router uses
    import chat_proxy.api.chat as chat_api

    app.dependency_overrides[chat_api.get_groq_service] = lambda: service
    return TestClient(app)


def _history(n: int) -> list[dict]:
    return [{"user": f"question {i}", "assistant": f"answer {i}"} for i in range(n)]


def test_chat_without_api_key_returns_mock(make_service):
    client = _client(make_service(api_key=""))

    r = client.post("/api/chat", json={"message": "Hello"})
    assert r.status_code == 200
    body = r.json()
    assert body["isMock"] is True
    assert body["response"].endswith(MOCK_NOTICE)
    assert body["model"] == "moonshotai/kimi-k2-instruct"
    assert body["timestamp"].endswith("Z")


def test_placeholder_api_key_never_calls_upstream(make_service, upstream):
    client = _client(make_service(api_key="your_groq_api_key_here", handler=upstream))

    r = client.post("/api/chat", json={"message": "Hello"})
    assert r.status_code == 200
    assert r.json()["isMock"] is True
    assert upstream.requests == []


def test_chat_missing_message_is_rejected(make_service, upstream):
    client = _client(make_service(api_key="gsk_test", handler=upstream))

    for payload in ({}, {"message": ""}, {"chatHistory": _history(2)}):
        r = client.post("/api/chat", json=payload)
        assert r.status_code == 400
        assert r.json() == {"error": "Message is required"}

    r = client.post("/api/chat")
    assert r.status_code == 400

    assert upstream.requests == []


def test_chat_happy_path(make_service, make_upstream, completion):
    upstream = make_upstream(body=completion("  আমি যোদ্ধাবট।  \n"))
    client = _client(make_service(api_key="gsk_test", handler=upstream))

    r = client.post("/api/chat", json={"message": "Hello", "chatHistory": []})
    assert r.status_code == 200
    body = r.json()
    assert body["response"] == "আমি যোদ্ধাবট।"
    assert body["isMock"] is False
    assert body["model"] == "moonshotai/kimi-k2-instruct"

    (request,) = upstream.requests
    assert request.method == "POST"
    assert str(request.url) == "https://api.groq.com/openai/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer gsk_test"

    payload = upstream.payloads[0]
    assert payload["model"] == "moonshotai/kimi-k2-instruct"
    assert payload["temperature"] == 0.7
    assert payload["top_p"] == 0.9
    assert payload["max_tokens"] == 1024
    assert payload["stream"] is False
    assert payload["messages"][0]["role"] == "system"
    assert payload["messages"][-1] == {"role": "user", "content": "Hello"}


def test_chat_history_is_truncated_to_last_six_turns(make_service, upstream):
    client = _client(make_service(api_key="gsk_test", handler=upstream))

    r = client.post("/api/chat", json={"message": "next", "chatHistory": _history(9)})
    assert r.status_code == 200

    messages = upstream.payloads[0]["messages"]
    assert len(messages) == 1 + 6 * 2 + 1
    assert [m["role"] for m in messages[1:-1]] == ["user", "assistant"] * 6
    assert messages[1]["content"] == "question 3"
    assert messages[-2]["content"] == "answer 8"
    assert messages[-1]["content"] == "next"


def test_rate_limit_becomes_mock_response(make_service, make_upstream):
    upstream = make_upstream(
        status_code=429, body={"error": {"message": "Rate limit reached"}}
    )
    client = _client(make_service(api_key="gsk_test", handler=upstream))

    r = client.post("/api/chat", json={"message": "Hello"})
    assert r.status_code == 200
    assert r.json()["isMock"] is True
    assert MOCK_NOTICE in r.json()["response"]
    assert len(upstream.requests) == 1


def test_upstream_errors_become_mock_responses(make_service, make_upstream):
    failures = [
        make_upstream(status_code=401, body={"error": {"message": "Invalid API Key"}}),
        make_upstream(status_code=503, body={}),
        make_upstream(body={"choices": []}),
        make_upstream(body={"choices": [{"message": {}}]}),
    ]
    for upstream in failures:
        client = _client(make_service(api_key="gsk_test", handler=upstream))

        r = client.post("/api/chat", json={"message": "Hello"})
        assert r.status_code == 200
        assert r.json()["isMock"] is True


def test_connection_error_becomes_mock_response(make_service):
    def _unreachable(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = _client(make_service(api_key="gsk_test", handler=_unreachable))

    r = client.post("/api/chat", json={"message": "Hello"})
    assert r.status_code == 200
    assert r.json()["isMock"] is True


def test_chat_uses_selected_model(make_service, upstream):
    service = make_service(api_key="gsk_test", handler=upstream)
    service.select_model("gemma-7b-it")
    client = _client(service)

    r = client.post("/api/chat", json={"message": "Hello"})
    assert r.json()["model"] == "gemma-7b-it"
    assert upstream.payloads[0]["model"] == "gemma-7b-it"


class _BrokenService:
    async def chat(self, message, history):
        raise RuntimeError("boom")

    def mock_response(self, message: str) -> str:
        return f"mock:{message}"


def test_unexpected_failure_returns_500_with_mock():
    client = _client(_BrokenService())

    r = client.post("/api/chat", json={"message": "Hello"})
    assert r.status_code == 500
    assert r.json() == {
        "error": "Internal server error",
        "message": "boom",
        "response": "mock:Hello",
    }


def test_null_chat_history_is_treated_as_empty(make_service, upstream):
    client = _client(make_service(api_key="gsk_test", handler=upstream))

    r = client.post("/api/chat", json={"message": "Hello", "chatHistory": None})
    assert r.status_code == 200
    assert r.json()["isMock"] is False

    messages = upstream.payloads[0]["messages"]
    assert [m["role"] for m in messages] == ["system", "user"]
