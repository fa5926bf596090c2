from __future__ import annotations

import random

MOCK_NOTICE = "(Note: This is a mock response. Please check your Groq API key.)"

_FILLERS = (
    "I understand your question about '{message}'. Based on my knowledge...",
    "That's an interesting point! Let me think about that...",
    "Thank you for asking. Here's what I can tell you...",
    "I'd be happy to help with that. Here's some information...",
    "That's a great question! I suggest considering the following approach...",
)


def get_mock_response(message: str, rng: random.Random | None = None) -> str:
    """Placeholder reply used whenever no real completion is available."""
    template = (rng or random).choice(_FILLERS)
    return f"{template.format(message=message)} {MOCK_NOTICE}"
