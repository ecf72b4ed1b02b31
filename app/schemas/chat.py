from __future__ import annotations

from pydantic import BaseModel


class ChatRequest(BaseModel):
    """Visitor question for the site assistant."""

    message: str | None = None


class ChatReply(BaseModel):
    """`response` is set on success, `message` on failure."""

    success: bool
    response: str | None = None
    message: str | None = None
