from __future__ import annotations

from pydantic import BaseModel


class ContactRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    message: str | None = None
    subject: str | None = None


class ContactReply(BaseModel):
    success: bool
    message: str
