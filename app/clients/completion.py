"""Client for the remote chat-completion provider (Groq, OpenAI-compatible API)."""

from __future__ import annotations

import http.client
import json
import logging
import time
import urllib.error
import urllib.request
from typing import Protocol

from app.core.config import Settings
from app.core.errors import MalformedCompletionError
from app.models.completion import (
    ChatMessage,
    CompletionResult,
    CompletionSuccess,
    CompletionUnavailable,
)

DEFAULT_MAX_TOKENS = 800
DEFAULT_TEMPERATURE = 0.7
_READ_CHUNK_SIZE = 8192


class CompletionClient(Protocol):
    def complete(self, messages: list[ChatMessage]) -> CompletionResult:
        raise NotImplementedError


class GroqCompletionClient:
    def __init__(
        self,
        settings: Settings,
        *,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> None:
        self._logger = logging.getLogger(__name__)
        self._api_key = settings.groq_api_key
        self._url = settings.groq_api_url
        self._model_id = settings.groq_model_id
        self._timeout_seconds = settings.ai_chat_timeout_seconds
        self._max_tokens = max_tokens
        self._temperature = temperature

    @property
    def enabled(self) -> bool:
        return bool(self._api_key)

    def complete(self, messages: list[ChatMessage]) -> CompletionResult:
        """Send one chat-completion request. No retries.

        Transport failures, timeouts and non-2xx statuses come back as
        CompletionUnavailable. A 2xx body that is not a completion payload
        raises MalformedCompletionError.
        """
        if not self.enabled:
            return CompletionUnavailable(reason="completion provider api key not configured")

        body = json.dumps(
            {
                "model": self._model_id,
                "messages": [message.to_dict() for message in messages],
                "max_tokens": self._max_tokens,
                "temperature": self._temperature,
                "stream": False,
            }
        ).encode("utf-8")
        request = urllib.request.Request(
            self._url,
            data=body,
            headers={
                "Authorization": f"Bearer {self._api_key}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            method="POST",
        )
        deadline = time.monotonic() + self._timeout_seconds
        try:
            with urllib.request.urlopen(request, timeout=self._timeout_seconds) as response:
                payload = _read_before_deadline(response, deadline)
        except urllib.error.HTTPError as exc:
            body_text = exc.read().decode("utf-8", errors="replace")
            self._logger.warning(
                "Completion provider HTTP error %s: %s", exc.code, body_text[:300]
            )
            return CompletionUnavailable(reason=str(exc.reason), status_code=exc.code)
        except TimeoutError as exc:
            self._logger.warning("Completion provider timed out: %s", exc)
            return CompletionUnavailable(reason="timed out")
        except (urllib.error.URLError, http.client.HTTPException, OSError) as exc:
            self._logger.warning("Completion provider request failed: %s", exc)
            return CompletionUnavailable(reason=str(exc))

        return _parse_completion(payload)


def _read_before_deadline(response: http.client.HTTPResponse, deadline: float) -> bytes:
    # urlopen's timeout bounds each socket read, not the whole body; read1 returns
    # after a single read so a trickling body still hits the deadline.
    chunks: list[bytes] = []
    while True:
        if time.monotonic() >= deadline:
            raise TimeoutError("completion response exceeded deadline")
        chunk = response.read1(_READ_CHUNK_SIZE)
        if not chunk:
            return b"".join(chunks)
        chunks.append(chunk)


def _parse_completion(payload: bytes) -> CompletionResult:
    try:
        data = json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MalformedCompletionError(f"failed to decode completion response: {exc}") from exc

    if not isinstance(data, dict):
        raise MalformedCompletionError("unexpected completion payload type")
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        raise MalformedCompletionError("completion response has no choices")
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    if not isinstance(message, dict):
        raise MalformedCompletionError("completion choice has no message")

    content = message.get("content")
    if not isinstance(content, str) or not content.strip():
        return CompletionUnavailable(reason="empty completion content", status_code=200)
    return CompletionSuccess(text=content.strip())
