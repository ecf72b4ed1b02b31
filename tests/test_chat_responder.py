from __future__ import annotations

import pytest

from app.core.errors import MalformedCompletionError, RequestValidationFailure
from app.models.completion import (
    ChatMessage,
    CompletionResult,
    CompletionSuccess,
    CompletionUnavailable,
)
from app.services.chat import (
    CHAT_ERROR_MESSAGE,
    DEFAULT_FALLBACK_REPLY,
    FALLBACK_RULES,
    SYSTEM_PROMPT,
    ChatResponder,
    fallback_reply,
)

CONTACT_REPLY = dict(FALLBACK_RULES)["contact"]
SERVICES_REPLY = dict(FALLBACK_RULES)["services"]


class FakeCompletionClient:
    def __init__(self, result: CompletionResult) -> None:
        self._result = result
        self.calls: list[list[ChatMessage]] = []

    def complete(self, messages: list[ChatMessage]) -> CompletionResult:
        self.calls.append(messages)
        return self._result


class FailingCompletionClient:
    def __init__(self, exc: Exception) -> None:
        self._exc = exc

    def complete(self, messages: list[ChatMessage]) -> CompletionResult:
        raise self._exc


def _unavailable() -> FakeCompletionClient:
    return FakeCompletionClient(CompletionUnavailable(reason="down"))


@pytest.mark.parametrize("message", [None, "", "   ", "\n\t"])
def test_resolve_rejects_blank_message_without_remote_call(message: str | None) -> None:
    client = _unavailable()

    with pytest.raises(RequestValidationFailure, match="Message is required"):
        ChatResponder(client).resolve(message)

    assert client.calls == []


def test_resolve_returns_remote_text() -> None:
    client = FakeCompletionClient(CompletionSuccess(text="I build websites."))

    reply = ChatResponder(client).resolve("What do you do?")

    assert reply.success is True
    assert reply.response == "I build websites."
    assert reply.message is None
    sent = client.calls[0]
    assert sent[0] == ChatMessage(role="system", content=SYSTEM_PROMPT)
    assert sent[1] == ChatMessage(role="user", content="What do you do?")


def test_resolve_falls_back_to_contact_reply() -> None:
    reply = ChatResponder(_unavailable()).resolve("How can I CONTACT you?")

    assert reply.success is True
    assert reply.response == CONTACT_REPLY


def test_resolve_first_declared_keyword_wins() -> None:
    reply = ChatResponder(_unavailable()).resolve("Tell me about your projects and services")

    assert reply.response == SERVICES_REPLY


def test_resolve_uses_default_reply_when_nothing_matches() -> None:
    reply = ChatResponder(_unavailable()).resolve("hello there")

    assert reply.response == DEFAULT_FALLBACK_REPLY


def test_resolve_converts_unexpected_error_to_failure_reply() -> None:
    client = FailingCompletionClient(MalformedCompletionError("no choices"))

    reply = ChatResponder(client).resolve("services?")

    assert reply.success is False
    assert reply.message == CHAT_ERROR_MESSAGE
    assert reply.response is None


def test_fallback_rules_keep_declared_order() -> None:
    keywords = [keyword for keyword, _ in FALLBACK_RULES]

    assert keywords == ["services", "projects", "contact", "technologies", "price", "experience"]


def test_fallback_reply_matches_substrings() -> None:
    assert fallback_reply("what's the PRICE range?") == dict(FALLBACK_RULES)["price"]
    assert fallback_reply("priceless") == dict(FALLBACK_RULES)["price"]
    assert fallback_reply("contacts and experience") == CONTACT_REPLY
    assert "kcaarun10@gmail.com" in DEFAULT_FALLBACK_REPLY
